"""Skill admin actions."""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.models.skill import Skill
from app.schemas.skill import SkillForm
from app.services import content_service
from app.services.action_result import admin_action
from app.services.content_service import ContentKind, get_or_404
from app.utils.errors import ValidationFailed
from app.utils.serializers import serialize_skill
from app.utils.slugs import generate_duplicate_slug

SKILLS = ContentKind(
    model=Skill,
    entity_type="Skill",
    admin_path="/admin/skills",
    display_field="name",
    not_found_message="Skill not found",
    serialize=serialize_skill,
)


def _slug_taken(db: Session, slug: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Skill.id).filter(Skill.slug == slug)
    if exclude_id is not None:
        query = query.filter(Skill.id != exclude_id)
    return query.first() is not None


def _values(form: SkillForm) -> Dict[str, Any]:
    return form.model_dump(include={"name", "slug", "description", "icon", "level", "category"})


@admin_action("Failed to load skills")
def list_admin_skills(db: Session, actor):
    return content_service.list_entities(db, SKILLS)


@admin_action("Failed to create skill")
def create_skill(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = SkillForm.model_validate(payload or {})
    if _slug_taken(db, form.slug):
        raise ValidationFailed("Slug already exists")
    data = _values(form)
    data["published"] = True if form.published is None else form.published
    return serialize_skill(content_service.create_entity(db, actor, SKILLS, data))


@admin_action("Failed to update skill")
def update_skill(db: Session, actor, skill_id: int, payload: Any) -> Dict[str, Any]:
    form = SkillForm.model_validate(payload or {})
    skill = get_or_404(db, SKILLS, skill_id)
    if _slug_taken(db, form.slug, exclude_id=skill.id):
        raise ValidationFailed("Slug already exists")
    data = _values(form)
    if form.published is not None:
        data["published"] = form.published
    return serialize_skill(content_service.update_entity(db, actor, SKILLS, skill, data))


@admin_action("Failed to delete skill")
def delete_skill(db: Session, actor, skill_id: int) -> Dict[str, Any]:
    skill = get_or_404(db, SKILLS, skill_id)
    content_service.delete_entity(db, actor, SKILLS, skill)
    return {"id": skill_id}


@admin_action("Failed to duplicate skill")
def duplicate_skill(db: Session, actor, skill_id: int) -> Dict[str, Any]:
    skill = get_or_404(db, SKILLS, skill_id)
    slug = generate_duplicate_slug(skill.slug, lambda candidate: _slug_taken(db, candidate))
    copy = content_service.duplicate_entity(db, actor, SKILLS, skill, overrides={"slug": slug})
    return serialize_skill(copy)
