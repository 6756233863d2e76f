"""Footer / site settings: public read and audited admin upsert and delete."""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.orm import Session

from app.models.site_settings import SiteSettings
from app.schemas.site_settings import SITE_SETTINGS_FIELDS, SiteSettingsForm
from app.services import content_service
from app.services.action_result import admin_action
from app.services.audit_service import is_missing_table
from app.services.content_service import ContentKind
from app.services.revalidation import revalidate_path
from app.utils.dates import to_iso
from app.utils.errors import NotFound, PersistenceFailed
from app.utils.serializers import serialize_site_settings

logger = logging.getLogger(__name__)

SITE_SETTINGS = ContentKind(
    model=SiteSettings,
    entity_type="SiteSettings",
    admin_path="/admin/footer",
    display_field="brand_name",
    not_found_message="Site settings not found",
    serialize=serialize_site_settings,
    published_field=None,
)

# Pages rendering the brand, contact block or footer
PUBLIC_SETTINGS_PATHS = ("/", "/work-samples", "/blog")


def to_site_settings_response(row: Optional[SiteSettings]) -> Dict[str, Any]:
    return {
        "settings": serialize_site_settings(row) if row is not None else None,
        "last_updated": to_iso(row.updated_at) if row is not None else None,
    }


def _current(db: Session) -> Optional[SiteSettings]:
    return db.query(SiteSettings).order_by(SiteSettings.id.asc()).first()


def load_site_settings(db: Session) -> Dict[str, Any]:
    """Public read; a missing table yields the empty defaults."""
    try:
        row = _current(db)
    except (OperationalError, ProgrammingError) as exc:
        db.rollback()
        if is_missing_table(exc):
            logger.error("[footer] site_settings table is missing; serving defaults")
            return to_site_settings_response(None)
        raise PersistenceFailed(str(getattr(exc, "orig", None) or exc))
    return to_site_settings_response(row)


@admin_action("Failed to load site settings")
def get_admin_site_settings(db: Session, actor) -> Dict[str, Any]:
    return to_site_settings_response(_current(db))


@admin_action("Failed to save site settings")
def save_site_settings(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = SiteSettingsForm.model_validate(payload or {})
    values = form.model_dump(include=set(SITE_SETTINGS_FIELDS))
    existing = _current(db)
    if existing is None:
        row = content_service.create_entity(db, actor, SITE_SETTINGS, values)
    else:
        row = content_service.update_entity(db, actor, SITE_SETTINGS, existing, values)
    for path in PUBLIC_SETTINGS_PATHS:
        revalidate_path(path)
    return to_site_settings_response(row)


@admin_action("Failed to delete site settings")
def delete_site_settings(db: Session, actor) -> Dict[str, Any]:
    ids = [row_id for (row_id,) in db.query(SiteSettings.id).all()]
    if not ids:
        raise NotFound(SITE_SETTINGS.not_found_message)
    deleted = content_service.bulk_delete_entities(db, actor, SITE_SETTINGS, ids)
    for path in PUBLIC_SETTINGS_PATHS:
        revalidate_path(path)
    return {"deleted": True, "count": len(deleted)}
