"""Shared persistence flow for content entities.

Each helper mutates, stages the matching audit entries in the same session,
commits once and signals the admin listing. Callers run inside
``run_action``, which owns error mapping and rollback.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from app.models.audit_entry import CREATE, DELETE, UPDATE
from app.services.audit_service import build_audit_diff, record_audit, snapshot_row
from app.services.revalidation import revalidate_path
from app.utils.errors import NotFound

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"
_NOT_COPIED = ("id", "created_at", "updated_at")


@dataclass(frozen=True)
class ContentKind:
    model: Type
    entity_type: str
    admin_path: str
    display_field: str
    not_found_message: str
    serialize: Callable[[Any], Dict[str, Any]]
    published_field: Optional[str] = "published"
    audit_id_field: str = "id"

    def audit_id(self, row: Any) -> Any:
        if isinstance(row, dict):
            return row.get(self.audit_id_field)
        return getattr(row, self.audit_id_field)


def get_or_404(db: Session, kind: ContentKind, row_id: int):
    row = db.query(kind.model).filter(kind.model.id == row_id).first()
    if row is None:
        raise NotFound(kind.not_found_message)
    return row


def list_entities(db: Session, kind: ContentKind) -> List[Dict[str, Any]]:
    rows = db.query(kind.model).order_by(kind.model.updated_at.desc(), kind.model.id.desc()).all()
    return [kind.serialize(row) for row in rows]


def create_entity(db: Session, actor: Any, kind: ContentKind, values: Dict[str, Any], *, diff_extra=None):
    row = kind.model(**values)
    db.add(row)
    db.flush()
    diff = build_audit_diff(None, row)
    if diff_extra:
        diff.update(diff_extra)
    record_audit(db, actor=actor, entity_type=kind.entity_type, entity_id=kind.audit_id(row), action=CREATE, diff=diff)
    db.commit()
    db.refresh(row)
    revalidate_path(kind.admin_path)
    return row


def update_entity(db: Session, actor: Any, kind: ContentKind, row: Any, values: Dict[str, Any]):
    before = snapshot_row(row)
    for key, value in values.items():
        setattr(row, key, value)
    db.flush()
    record_audit(
        db,
        actor=actor,
        entity_type=kind.entity_type,
        entity_id=kind.audit_id(row),
        action=UPDATE,
        diff=build_audit_diff(before, row),
    )
    db.commit()
    db.refresh(row)
    revalidate_path(kind.admin_path)
    return row


def delete_entity(db: Session, actor: Any, kind: ContentKind, row: Any) -> Dict[str, Any]:
    before = snapshot_row(row)
    db.delete(row)
    record_audit(
        db,
        actor=actor,
        entity_type=kind.entity_type,
        entity_id=kind.audit_id(before),
        action=DELETE,
        diff=build_audit_diff(before, None),
    )
    db.commit()
    revalidate_path(kind.admin_path)
    return before


def copy_values(row: Any) -> Dict[str, Any]:
    mapper = sa_inspect(row).mapper
    return {attr.key: getattr(row, attr.key) for attr in mapper.column_attrs if attr.key not in _NOT_COPIED}


def duplicate_entity(db: Session, actor: Any, kind: ContentKind, row: Any, overrides: Optional[Dict[str, Any]] = None):
    """Copy ``row`` as a new, unpublished record titled "... (Copy)"."""
    values = copy_values(row)
    values[kind.display_field] = f"{getattr(row, kind.display_field) or ''}{COPY_SUFFIX}".strip()
    if kind.published_field:
        values[kind.published_field] = False
    values.update(overrides or {})
    return create_entity(
        db,
        actor,
        kind,
        values,
        diff_extra={"duplicated_from": kind.audit_id(row)},
    )


def bulk_delete_entities(db: Session, actor: Any, kind: ContentKind, ids: Iterable[int]) -> List[Dict[str, Any]]:
    """Delete every existing row in ``ids``; returns the deleted snapshots."""
    ids = list(ids)
    if not ids:
        return []
    rows = db.query(kind.model).filter(kind.model.id.in_(ids)).all()
    if not rows:
        return []

    deleted = []
    for row in rows:
        before = snapshot_row(row)
        db.delete(row)
        record_audit(
            db,
            actor=actor,
            entity_type=kind.entity_type,
            entity_id=kind.audit_id(before),
            action=DELETE,
            diff=build_audit_diff(before, None),
        )
        deleted.append(before)
    db.commit()
    logger.info("[%s] bulk deleted %d rows", kind.entity_type, len(deleted))
    revalidate_path(kind.admin_path)
    return deleted


def toggle_published(db: Session, actor: Any, kind: ContentKind, row: Any, published: Optional[bool] = None):
    field = kind.published_field
    current = bool(getattr(row, field))
    target = (not current) if published is None else bool(published)
    if target == current:
        return row
    return update_entity(db, actor, kind, row, {field: target})
