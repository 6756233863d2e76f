"""Promotional section admin actions."""

from typing import Any, Dict

from sqlalchemy.orm import Session

from app.models.promo_section import PromoSection
from app.schemas.promo import PromoForm
from app.services import content_service
from app.services.action_result import admin_action
from app.services.content_service import ContentKind, get_or_404
from app.utils.serializers import serialize_promo

PROMOS = ContentKind(
    model=PromoSection,
    entity_type="PromoSection",
    admin_path="/admin/promos",
    display_field="title",
    not_found_message="Promo section not found",
    serialize=serialize_promo,
    published_field="is_enabled",
)


def _values(form: PromoForm) -> Dict[str, Any]:
    return form.model_dump()


@admin_action("Failed to load promo sections")
def list_admin_promos(db: Session, actor):
    rows = (
        db.query(PromoSection)
        .order_by(PromoSection.placement.asc(), PromoSection.display_order.asc(), PromoSection.created_at.asc())
        .all()
    )
    return [serialize_promo(row) for row in rows]


@admin_action("Failed to create promo section")
def create_promo(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = PromoForm.model_validate(payload or {})
    return serialize_promo(content_service.create_entity(db, actor, PROMOS, _values(form)))


@admin_action("Failed to update promo section")
def update_promo(db: Session, actor, promo_id: int, payload: Any) -> Dict[str, Any]:
    form = PromoForm.model_validate(payload or {})
    promo = get_or_404(db, PROMOS, promo_id)
    return serialize_promo(content_service.update_entity(db, actor, PROMOS, promo, _values(form)))


@admin_action("Failed to delete promo section")
def delete_promo(db: Session, actor, promo_id: int) -> Dict[str, Any]:
    promo = get_or_404(db, PROMOS, promo_id)
    content_service.delete_entity(db, actor, PROMOS, promo)
    return {"id": promo_id}


@admin_action("Failed to duplicate promo section")
def duplicate_promo(db: Session, actor, promo_id: int) -> Dict[str, Any]:
    promo = get_or_404(db, PROMOS, promo_id)
    return serialize_promo(content_service.duplicate_entity(db, actor, PROMOS, promo))
