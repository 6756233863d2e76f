"""Post publication state rules.

``build_status_toggle`` is the publish/unpublish transition used by the
single and bulk toggles. ``normalize_post_input`` resolves the full
draft/scheduled/published form state on create and edit.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.models.post import DRAFT, PUBLISHED, SCHEDULED
from app.utils.dates import has_timezone, parse_datetime
from app.utils.errors import ValidationFailed

TARGET_PUBLISHED = "published"
TARGET_DRAFT = "draft"
STATUS_TARGETS = (TARGET_PUBLISHED, TARGET_DRAFT)

_FORM_STATUS = {"draft": DRAFT, "scheduled": SCHEDULED, "published": PUBLISHED}


def _field(post: Any, name: str) -> Any:
    if isinstance(post, dict):
        return post.get(name)
    return getattr(post, name, None)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_status_toggle(
    post: Any,
    target: str,
    actor_email: Optional[str],
    now: Optional[datetime] = None,
) -> Optional[Dict[str, Any]]:
    """Patch moving ``post`` to ``target``, or ``None`` when it is already there.

    ``target`` must be one of ``STATUS_TARGETS``; callers validate it.
    """
    now = now or datetime.now(timezone.utc)
    status = str(_field(post, "status") or "").upper()
    published = bool(_field(post, "published"))

    if target == TARGET_PUBLISHED:
        if status == PUBLISHED or published:
            return None
        return {
            "status": PUBLISHED,
            "published": True,
            "scheduled_at": None,
            "published_at": _field(post, "published_at") or now,
            "status_changed_at": now,
            "status_changed_by": actor_email,
        }

    if status == DRAFT and not published:
        return None
    return {
        "status": DRAFT,
        "published": False,
        "scheduled_at": None,
        "published_at": None,
        "status_changed_at": now,
        "status_changed_by": actor_email,
    }


def parse_optional_datetime(value: Optional[str]) -> Optional[datetime]:
    text = _clean(value)
    if text is None:
        return None
    if not has_timezone(text):
        raise ValidationFailed("Datetime values must include a timezone offset.")
    return parse_datetime(text)


def normalize_post_input(
    form: Any,
    actor_email: Optional[str],
    existing: Any = None,
    include_slug: bool = True,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Persistence patch for a validated post form.

    ``status_changed_at``/``status_changed_by`` are only present when the
    publication state actually changes (always on create).
    """
    now = now or datetime.now(timezone.utc)
    data: Dict[str, Any] = {}
    if include_slug:
        data["slug"] = _clean(form.slug)
    data.update(
        title=_clean(form.title),
        content=_clean(form.content),
        meta_description=_clean(form.meta_description),
        featured_banner=_clean(form.featured_banner),
    )

    status = _FORM_STATUS.get(str(form.status or "").lower(), DRAFT)
    scheduled_at = None
    published_at = None
    existing_status = str(_field(existing, "status") or "").upper() if existing is not None else None
    existing_published_at = _field(existing, "published_at") if existing is not None else None
    existing_scheduled_at = _field(existing, "scheduled_at") if existing is not None else None

    if status == PUBLISHED:
        provided = parse_optional_datetime(form.published_at)
        if existing_status == PUBLISHED and provided is None:
            published_at = existing_published_at or now
        else:
            published_at = provided or now
    elif status == SCHEDULED:
        scheduled_at = parse_optional_datetime(form.scheduled_at)

    status_changed = (
        existing is None
        or existing_status != status
        or (status == SCHEDULED and existing_scheduled_at != scheduled_at)
        or (status == PUBLISHED and existing_published_at != published_at)
    )

    data.update(
        status=status,
        scheduled_at=scheduled_at,
        published_at=published_at,
        published=status == PUBLISHED,
    )
    if status_changed:
        data["status_changed_at"] = now
        data["status_changed_by"] = actor_email
    return data
