"""Experience admin actions."""

from typing import Any, Dict, Iterable, Optional

from sqlalchemy.orm import Session

from app.models.experience import Experience
from app.schemas.common import clean_optional
from app.schemas.experience import ExperienceForm
from app.services.action_result import admin_action
from app.services import content_service
from app.services.content_service import ContentKind, get_or_404
from app.utils.dates import parse_datetime
from app.utils.experience_parsers import parse_career_progression, parse_previous_role, split_multiline
from app.utils.serializers import serialize_experience

EXPERIENCES = ContentKind(
    model=Experience,
    entity_type="Experience",
    admin_path="/admin/experiences",
    display_field="company",
    not_found_message="Experience not found",
    serialize=serialize_experience,
)


def build_experience_data(form: ExperienceForm) -> Dict[str, Any]:
    # Parsers raise ValidationFailed with a user-facing message.
    career_progression = parse_career_progression(form.career_progression)
    previous_role = parse_previous_role(form.previous_role)
    return {
        "company": form.company.strip(),
        "title": form.title.strip(),
        "period": clean_optional(form.period),
        "location": clean_optional(form.location),
        "start_date": parse_datetime(form.start_date),
        "end_date": parse_datetime(form.end_date),
        "description": clean_optional(form.description),
        "achievements": split_multiline(form.achievements),
        "full_description": clean_optional(form.full_description),
        "responsibilities": split_multiline(form.responsibilities),
        "skills": split_multiline(form.skills),
        "career_progression": career_progression,
        "previous_role": previous_role,
    }


@admin_action("Failed to load experiences")
def list_admin_experiences(db: Session, actor):
    return content_service.list_entities(db, EXPERIENCES)


@admin_action("Failed to create experience")
def create_experience(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = ExperienceForm.model_validate(payload or {})
    data = build_experience_data(form)
    data["published"] = True if form.published is None else form.published
    return serialize_experience(content_service.create_entity(db, actor, EXPERIENCES, data))


@admin_action("Failed to update experience")
def update_experience(db: Session, actor, experience_id: int, payload: Any) -> Dict[str, Any]:
    form = ExperienceForm.model_validate(payload or {})
    data = build_experience_data(form)
    if form.published is not None:
        data["published"] = form.published
    experience = get_or_404(db, EXPERIENCES, experience_id)
    return serialize_experience(content_service.update_entity(db, actor, EXPERIENCES, experience, data))


@admin_action("Failed to delete experience")
def delete_experience(db: Session, actor, experience_id: int) -> Dict[str, Any]:
    experience = get_or_404(db, EXPERIENCES, experience_id)
    content_service.delete_entity(db, actor, EXPERIENCES, experience)
    return {"id": experience_id}


@admin_action("Failed to duplicate experience")
def duplicate_experience(db: Session, actor, experience_id: int) -> Dict[str, Any]:
    experience = get_or_404(db, EXPERIENCES, experience_id)
    return serialize_experience(content_service.duplicate_entity(db, actor, EXPERIENCES, experience))


@admin_action("Failed to delete experiences")
def bulk_delete_experiences(db: Session, actor, ids: Iterable[int]) -> Dict[str, Any]:
    return {"count": len(content_service.bulk_delete_entities(db, actor, EXPERIENCES, ids))}


@admin_action("Failed to toggle experience published")
def toggle_experience_published(
    db: Session, actor, experience_id: int, published: Optional[bool] = None
) -> Dict[str, Any]:
    experience = get_or_404(db, EXPERIENCES, experience_id)
    return serialize_experience(content_service.toggle_published(db, actor, EXPERIENCES, experience, published))
