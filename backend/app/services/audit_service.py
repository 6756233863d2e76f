"""Audit trail: diff construction, recording and the admin query surface."""

import json
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import inspect as sa_inspect, or_
from sqlalchemy.exc import OperationalError, ProgrammingError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.audit_entry import AUDIT_ACTIONS, AuditEntry
from app.utils.dates import to_iso
from app.utils.errors import PersistenceFailed, ValidationFailed
from app.utils.serializers import serialize_audit_entry

logger = logging.getLogger(__name__)

UNKNOWN_ACTOR = "unknown"
_MISSING_TABLE_MARKERS = ("no such table", "does not exist", "undefined table", "doesn't exist")


def _json_safe(value: Any) -> Any:
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def snapshot_row(row: Any) -> Optional[Dict[str, Any]]:
    """Column-by-column, JSON-safe copy of an ORM row (or mapping)."""
    if row is None:
        return None
    if isinstance(row, dict):
        return {str(k): _json_safe(v) for k, v in row.items()}
    mapper = sa_inspect(row).mapper
    return {attr.key: _json_safe(getattr(row, attr.key)) for attr in mapper.column_attrs}


def build_audit_diff(before: Any, after: Any) -> Dict[str, Any]:
    before_snapshot = snapshot_row(before)
    after_snapshot = snapshot_row(after)
    before_fields = before_snapshot or {}
    after_fields = after_snapshot or {}

    changes: Dict[str, Dict[str, Any]] = {}
    for key in list(before_fields) + [k for k in after_fields if k not in before_fields]:
        old, new = before_fields.get(key), after_fields.get(key)
        if old != new:
            changes[key] = {"before": old, "after": new}

    return {"before": before_snapshot, "after": after_snapshot, "changes": changes}


def actor_email_of(actor: Any) -> str:
    if actor is None:
        return UNKNOWN_ACTOR
    email = actor if isinstance(actor, str) else getattr(actor, "email", None)
    return email or UNKNOWN_ACTOR


def record_audit(
    db: Session,
    *,
    actor: Any,
    entity_type: str,
    entity_id: Any,
    action: str,
    diff: Dict[str, Any],
) -> AuditEntry:
    """Stage one audit entry in the caller's transaction (no commit)."""
    if action not in AUDIT_ACTIONS:
        raise ValidationFailed(f"Unknown audit action: {action}")
    entry = AuditEntry(
        actor_email=actor_email_of(actor),
        entity_type=entity_type,
        entity_id=str(entity_id),
        action=action,
        diff=json.dumps(diff, ensure_ascii=False),
    )
    db.add(entry)
    return entry


def is_missing_table(exc: SQLAlchemyError) -> bool:
    message = str(getattr(exc, "orig", None) or exc).lower()
    return any(marker in message for marker in _MISSING_TABLE_MARKERS)


def list_audit_entries(
    db: Session,
    *,
    action: Optional[str] = None,
    entity_type: Optional[str] = None,
    q: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[AuditEntry]:
    query = db.query(AuditEntry)
    action = (action or "").strip().upper()
    if action in AUDIT_ACTIONS:
        query = query.filter(AuditEntry.action == action)
    entity_type = (entity_type or "").strip()
    if entity_type:
        query = query.filter(AuditEntry.entity_type == entity_type)
    term = (q or "").strip()
    if term:
        pattern = f"%{term}%"
        query = query.filter(
            or_(
                AuditEntry.actor_email.ilike(pattern),
                AuditEntry.entity_type.ilike(pattern),
                AuditEntry.entity_id.ilike(pattern),
                AuditEntry.action.ilike(pattern),
            )
        )
    return (
        query.order_by(AuditEntry.created_at.desc(), AuditEntry.id.desc())
        .limit(limit or settings.AUDIT_QUERY_LIMIT)
        .all()
    )


def list_entity_types(db: Session) -> List[str]:
    rows = db.query(AuditEntry.entity_type).distinct().order_by(AuditEntry.entity_type.asc()).all()
    return [row[0] for row in rows]


def query_audit_log(
    db: Session,
    *,
    action: Optional[str] = None,
    entity_type: Optional[str] = None,
    q: Optional[str] = None,
) -> Dict[str, Any]:
    normalised_action = (action or "").strip().upper()
    filters = {
        "action": normalised_action if normalised_action in AUDIT_ACTIONS else None,
        "entity_type": (entity_type or "").strip() or None,
        "q": (q or "").strip() or None,
    }
    try:
        entries = list_audit_entries(db, action=action, entity_type=entity_type, q=q)
        entity_types = list_entity_types(db)
    except (OperationalError, ProgrammingError) as exc:
        db.rollback()
        if is_missing_table(exc):
            logger.warning("[audit] audit_entries table is missing; run scripts/init_db.py")
            return {"entries": [], "entity_types": [], "filters": filters, "table_missing": True}
        raise PersistenceFailed(str(getattr(exc, "orig", None) or exc))
    return {
        "entries": [serialize_audit_entry(entry) for entry in entries],
        "entity_types": entity_types,
        "filters": filters,
        "table_missing": False,
    }
