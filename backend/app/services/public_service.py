"""Read queries behind the public site."""

from collections import OrderedDict
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.models.experience import Experience
from app.models.post import PUBLISHED, Post
from app.models.promo_section import PROMO_PLACEMENTS, PromoSection
from app.models.tool import Tool
from app.models.types import utcnow
from app.models.web_app import WebApp
from app.models.work_sample import WorkSample
from app.schemas.experience import ExperienceSummaryOut
from app.schemas.skill import PublicSkillOut
from app.utils.errors import NotFound
from app.utils.experience_parsers import coerce_string_array
from app.utils.serializers import (
    serialize_experience,
    serialize_many,
    serialize_post,
    serialize_promo,
    serialize_tool,
    serialize_web_app,
    serialize_work_sample,
)
from app.utils.slugs import to_slug

MAX_SUMMARY_DESCRIPTION_LENGTH = 200


def _published_posts(db: Session):
    return db.query(Post).filter(
        Post.status == PUBLISHED,
        Post.published == True,
        Post.published_at.isnot(None),
        Post.published_at <= utcnow(),
    )


def list_published_posts(db: Session) -> List[Dict[str, Any]]:
    posts = _published_posts(db).order_by(Post.published_at.desc(), Post.created_at.desc()).all()
    return [serialize_post(post) for post in posts]


def get_published_post(db: Session, slug: str) -> Dict[str, Any]:
    post = _published_posts(db).filter(Post.slug == slug).first()
    if post is None:
        raise NotFound("Post not found")
    return serialize_post(post)


def _published_experiences(db: Session) -> List[Experience]:
    return (
        db.query(Experience)
        .filter(Experience.published == True)
        .order_by(Experience.start_date.desc(), Experience.created_at.desc())
        .all()
    )


def list_published_experiences(db: Session) -> List[Dict[str, Any]]:
    return [serialize_experience(row) for row in _published_experiences(db)]


def truncate(text: str, max_length: int = MAX_SUMMARY_DESCRIPTION_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return f"{text[: max_length - 1].rstrip()}…"


def build_preview_description(description, full_description):
    source = description or full_description
    return truncate(source) if source else None


def list_experience_summaries(db: Session) -> List[Dict[str, Any]]:
    summaries = (
        {
            "id": row.id,
            "title": row.title,
            "company": row.company,
            "period": row.period,
            "location": row.location,
            "description": build_preview_description(row.description, row.full_description),
        }
        for row in _published_experiences(db)
    )
    return serialize_many(ExperienceSummaryOut, summaries)


def aggregate_skills(skill_lists) -> List[Dict[str, Any]]:
    """Distinct skills with how many experiences mention them."""
    skills: Dict[str, Dict[str, Any]] = {}
    for value in skill_lists:
        for name in coerce_string_array(value):
            slug = to_slug(name)
            if not slug:
                continue
            if slug in skills:
                skills[slug]["frequency"] += 1
            else:
                skills[slug] = {"name": name, "slug": slug, "frequency": 1}
    return sorted(skills.values(), key=lambda item: (-item["frequency"], item["name"].lower()))


def list_public_skills(db: Session) -> List[Dict[str, Any]]:
    rows = db.query(Experience.skills).all()
    return serialize_many(PublicSkillOut, aggregate_skills(row[0] for row in rows))


def list_published_work_samples(db: Session) -> List[Dict[str, Any]]:
    rows = (
        db.query(WorkSample)
        .filter(WorkSample.published == True)
        .order_by(WorkSample.created_at.desc())
        .all()
    )
    return [serialize_work_sample(row) for row in rows]


def list_published_web_apps(db: Session) -> List[Dict[str, Any]]:
    rows = (
        db.query(WebApp)
        .filter(WebApp.published == True)
        .order_by(WebApp.created_at.desc())
        .all()
    )
    return [serialize_web_app(row) for row in rows]


def list_published_tools(db: Session) -> List[Dict[str, Any]]:
    rows = db.query(Tool).filter(Tool.published == True).order_by(Tool.name.asc()).all()
    return [serialize_tool(row) for row in rows]


def list_active_promos(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    rows = (
        db.query(PromoSection)
        .filter(PromoSection.is_enabled == True)
        .order_by(PromoSection.display_order.asc(), PromoSection.created_at.asc())
        .all()
    )
    grouped: Dict[str, List[Dict[str, Any]]] = OrderedDict((placement, []) for placement in PROMO_PLACEMENTS)
    for row in rows:
        grouped.setdefault(row.placement, []).append(serialize_promo(row))
    return dict(grouped)


def get_post_preview(db: Session, slug: str) -> Dict[str, Any]:
    """Any post by slug, regardless of status (admin preview)."""
    post = db.query(Post).filter(Post.slug == slug).first()
    if post is None:
        raise NotFound("Post not found")
    return serialize_post(post)
