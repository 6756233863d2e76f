"""Discriminated result envelope for admin actions.

Handlers never raise to their caller. ``run_action`` performs the shared
steps (datastore check, actor check, exception mapping, rollback, logging)
and turns the outcome into an :class:`ActionResult`.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.schemas.common import first_error_message
from app.utils.errors import ActionError, DatastoreNotConfigured, Unauthorized

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    ok: bool
    data: Any = None
    message: Optional[str] = None
    status_code: int = 200

    @classmethod
    def success(cls, data: Any = None) -> "ActionResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, message: str, status_code: int = 400) -> "ActionResult":
        return cls(ok=False, message=message, status_code=status_code)

    @classmethod
    def from_error(cls, exc: ActionError) -> "ActionResult":
        return cls.failure(exc.message, exc.status_code)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        return {"ok": False, "message": self.message}


def _driver_message(exc: SQLAlchemyError) -> str:
    return str(getattr(exc, "orig", None) or exc)


def _rollback(db: Session) -> None:
    try:
        db.rollback()
    except SQLAlchemyError:
        logger.exception("[actions] rollback failed")


def run_action(
    db: Optional[Session],
    actor: Any,
    fn: Callable[[], Any],
    *,
    failure_message: str,
) -> ActionResult:
    if db is None:
        return ActionResult.from_error(DatastoreNotConfigured())
    if actor is None:
        return ActionResult.from_error(Unauthorized())

    try:
        data = fn()
    except ActionError as exc:
        _rollback(db)
        return ActionResult.from_error(exc)
    except ValidationError as exc:
        _rollback(db)
        return ActionResult.failure(first_error_message(exc))
    except IntegrityError as exc:
        _rollback(db)
        message = _driver_message(exc)
        if "slug" in message.lower():
            return ActionResult.failure("Slug already exists")
        logger.exception("[actions] %s", failure_message)
        return ActionResult.failure(message or failure_message, 500)
    except SQLAlchemyError as exc:
        _rollback(db)
        logger.exception("[actions] %s", failure_message)
        return ActionResult.failure(_driver_message(exc) or failure_message, 500)
    except Exception as exc:
        _rollback(db)
        logger.exception("[actions] %s", failure_message)
        return ActionResult.failure(str(exc) or failure_message, 500)
    return ActionResult.success(data)


def run_read(db: Optional[Session], fn: Callable[[], Any], *, failure_message: str) -> ActionResult:
    """Public read path: distinguishes unconfigured, query failure and unexpected errors."""
    if db is None:
        return ActionResult.from_error(DatastoreNotConfigured())
    try:
        return ActionResult.success(fn())
    except ActionError as exc:
        return ActionResult.from_error(exc)
    except SQLAlchemyError as exc:
        _rollback(db)
        logger.exception("[public] %s", failure_message)
        return ActionResult.failure(_driver_message(exc) or failure_message, 500)
    except Exception:
        logger.exception("[public] %s", failure_message)
        return ActionResult.failure(failure_message, 500)


def admin_action(failure_message: str):
    """Wrap ``fn(db, actor, ...)`` so it always returns an ActionResult."""

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(db, actor, *args, **kwargs) -> ActionResult:
            return run_action(
                db,
                actor,
                lambda: fn(db, actor, *args, **kwargs),
                failure_message=failure_message,
            )

        return wrapper

    return decorator


def to_response(result: ActionResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.to_dict())
