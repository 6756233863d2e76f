"""Work sample admin actions."""

from typing import Any, Dict, Iterable, Optional

from sqlalchemy.orm import Session

from app.models.work_sample import WorkSample
from app.schemas.work_sample import WorkSampleForm
from app.services import content_service
from app.services.action_result import admin_action
from app.services.content_service import ContentKind, get_or_404
from app.utils.serializers import serialize_work_sample

WORK_SAMPLES = ContentKind(
    model=WorkSample,
    entity_type="WorkSample",
    admin_path="/admin/worksamples",
    display_field="title",
    not_found_message="Work sample not found",
    serialize=serialize_work_sample,
)


@admin_action("Failed to load work samples")
def list_admin_work_samples(db: Session, actor):
    return content_service.list_entities(db, WORK_SAMPLES)


@admin_action("Failed to create work sample")
def create_work_sample(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = WorkSampleForm.model_validate(payload or {})
    data = form.model_dump(include={"title", "url", "description"})
    data["published"] = True if form.published is None else form.published
    return serialize_work_sample(content_service.create_entity(db, actor, WORK_SAMPLES, data))


@admin_action("Failed to update work sample")
def update_work_sample(db: Session, actor, sample_id: int, payload: Any) -> Dict[str, Any]:
    form = WorkSampleForm.model_validate(payload or {})
    # published is only changed through the toggle or an explicit value
    data = form.model_dump(include={"title", "url", "description"})
    if form.published is not None:
        data["published"] = form.published
    sample = get_or_404(db, WORK_SAMPLES, sample_id)
    return serialize_work_sample(content_service.update_entity(db, actor, WORK_SAMPLES, sample, data))


@admin_action("Failed to delete work sample")
def delete_work_sample(db: Session, actor, sample_id: int) -> Dict[str, Any]:
    sample = get_or_404(db, WORK_SAMPLES, sample_id)
    content_service.delete_entity(db, actor, WORK_SAMPLES, sample)
    return {"id": sample_id}


@admin_action("Failed to duplicate work sample")
def duplicate_work_sample(db: Session, actor, sample_id: int) -> Dict[str, Any]:
    sample = get_or_404(db, WORK_SAMPLES, sample_id)
    return serialize_work_sample(content_service.duplicate_entity(db, actor, WORK_SAMPLES, sample))


@admin_action("Failed to toggle work sample published")
def toggle_work_sample_published(
    db: Session, actor, sample_id: int, published: Optional[bool] = None
) -> Dict[str, Any]:
    sample = get_or_404(db, WORK_SAMPLES, sample_id)
    return serialize_work_sample(content_service.toggle_published(db, actor, WORK_SAMPLES, sample, published))


@admin_action("Failed to delete work samples")
def bulk_delete_work_samples(db: Session, actor, ids: Iterable[int]) -> Dict[str, Any]:
    return {"count": len(content_service.bulk_delete_entities(db, actor, WORK_SAMPLES, ids))}
