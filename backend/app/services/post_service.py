"""Blog post admin actions."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.audit_entry import UPDATE
from app.models.post import DRAFT, POST_STATUSES, PUBLISHED, Post
from app.models.types import utcnow
from app.schemas.common import first_error_message
from app.schemas.post import PostForm
from app.services.action_result import admin_action
from app.services.audit_service import actor_email_of, build_audit_diff, record_audit, snapshot_row
from app.services.content_service import (
    COPY_SUFFIX,
    ContentKind,
    create_entity,
    delete_entity,
    duplicate_entity,
    bulk_delete_entities,
    get_or_404,
    update_entity,
)
from app.services.post_status import (
    STATUS_TARGETS,
    TARGET_DRAFT,
    TARGET_PUBLISHED,
    build_status_toggle,
    normalize_post_input,
)
from app.services.revalidation import PUBLIC_POST_PATHS, revalidate_path
from app.utils.csv_import import parse_posts_csv
from app.utils.errors import ActionError, ValidationFailed
from app.utils.serializers import serialize_post
from app.utils.slugs import generate_duplicate_slug

logger = logging.getLogger(__name__)

MAX_DUPLICATE_TITLE_LENGTH = 180

POSTS = ContentKind(
    model=Post,
    entity_type="Post",
    admin_path="/admin/posts",
    display_field="title",
    not_found_message="Post not found",
    serialize=serialize_post,
    published_field=None,
    audit_id_field="slug",
)


def was_published(post: Any) -> bool:
    if post is None:
        return False
    if isinstance(post, dict):
        status, published = post.get("status"), post.get("published")
    else:
        status, published = post.status, post.published
    return str(status or "").upper() == PUBLISHED or bool(published)


def revalidate_public_post_paths(*posts: Any) -> None:
    if not any(was_published(post) for post in posts):
        return
    for path in PUBLIC_POST_PATHS:
        revalidate_path(path)


def _as_form(payload: Any) -> PostForm:
    if isinstance(payload, PostForm):
        return payload
    return PostForm.model_validate(payload or {})


def _slug_taken(db: Session, slug: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Post.id).filter(Post.slug == slug)
    if exclude_id is not None:
        query = query.filter(Post.id != exclude_id)
    return query.first() is not None


def _ensure_slug_available(db: Session, slug: str, exclude_id: Optional[int] = None) -> None:
    if _slug_taken(db, slug, exclude_id):
        raise ValidationFailed("Slug already exists")


@admin_action("Failed to load posts")
def list_admin_posts(db: Session, actor, status: Optional[str] = None, q: Optional[str] = None) -> Dict[str, Any]:
    query = db.query(Post)
    status = (status or "").strip().upper()
    if status in POST_STATUSES:
        query = query.filter(Post.status == status)
    term = (q or "").strip()
    if term:
        pattern = f"%{term}%"
        query = query.filter(or_(Post.title.ilike(pattern), Post.slug.ilike(pattern)))
    posts = query.order_by(Post.updated_at.desc(), Post.id.desc()).all()
    return {"posts": [serialize_post(post) for post in posts]}


@admin_action("Failed to create post")
def create_post(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = _as_form(payload)
    data = normalize_post_input(form, actor_email_of(actor))
    _ensure_slug_available(db, data["slug"])
    post = create_entity(db, actor, POSTS, data)
    revalidate_public_post_paths(post)
    return serialize_post(post)


def _bulk_create(db: Session, actor, inputs: List[Any]) -> Dict[str, Any]:
    if not inputs:
        raise ValidationFailed("No posts to create")

    skipped: List[Dict[str, Any]] = []
    forms: List[PostForm] = []
    for index, raw in enumerate(inputs):
        try:
            forms.append(_as_form(raw))
        except ValidationError as exc:
            slug = raw.get("slug") if isinstance(raw, dict) else None
            skipped.append({"index": index, "slug": slug, "message": first_error_message(exc)})
    if not forms:
        raise ValidationFailed("No valid posts to create")

    actor_email = actor_email_of(actor)
    created: List[Dict[str, Any]] = []
    for form in forms:
        # One commit per row so a failing row does not undo the others.
        try:
            data = normalize_post_input(form, actor_email)
            _ensure_slug_available(db, data["slug"])
            post = create_entity(db, actor, POSTS, data)
        except ActionError as exc:
            db.rollback()
            skipped.append({"slug": form.slug, "message": exc.message})
            continue
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("[posts] failed to create post %s", form.slug)
            skipped.append({"slug": form.slug, "message": str(getattr(exc, "orig", None) or exc)})
            continue
        created.append(serialize_post(post))

    revalidate_public_post_paths(*created)
    return {"count": len(created), "created": created, "skipped": skipped}


@admin_action("Failed to bulk create posts")
def bulk_create_posts(db: Session, actor, inputs: List[Any]) -> Dict[str, Any]:
    return _bulk_create(db, actor, list(inputs or []))


@admin_action("Failed to import posts")
def import_posts_csv(db: Session, actor, text: str) -> Dict[str, Any]:
    parsed = parse_posts_csv(text)
    if not parsed.rows:
        raise ValidationFailed("No valid posts found in CSV")
    result = _bulk_create(db, actor, parsed.rows)
    result["warnings"] = parsed.warnings
    logger.info("[posts] CSV import created %d posts (%d skipped)", result["count"], len(result["skipped"]))
    return result


@admin_action("Failed to update post")
def update_post(db: Session, actor, post_id: int, payload: Any) -> Dict[str, Any]:
    form = _as_form(payload)
    existing = get_or_404(db, POSTS, post_id)
    previous = {"status": existing.status, "published": existing.published}
    include_slug = form.slug != existing.slug
    if include_slug:
        _ensure_slug_available(db, form.slug, exclude_id=existing.id)
    data = normalize_post_input(form, actor_email_of(actor), existing, include_slug=include_slug)
    post = update_entity(db, actor, POSTS, existing, data)
    revalidate_public_post_paths(previous, post)
    return serialize_post(post)


@admin_action("Failed to delete post")
def delete_post(db: Session, actor, post_id: int) -> Dict[str, Any]:
    post = get_or_404(db, POSTS, post_id)
    deleted = delete_entity(db, actor, POSTS, post)
    revalidate_public_post_paths(deleted)
    return {"id": post_id, "slug": deleted["slug"]}


@admin_action("Failed to duplicate post")
def duplicate_post(db: Session, actor, post_id: int) -> Dict[str, Any]:
    existing = get_or_404(db, POSTS, post_id)
    slug = generate_duplicate_slug(existing.slug, lambda candidate: _slug_taken(db, candidate))
    copy = duplicate_entity(
        db,
        actor,
        POSTS,
        existing,
        overrides={
            "slug": slug,
            "title": f"{existing.title}{COPY_SUFFIX}".strip()[:MAX_DUPLICATE_TITLE_LENGTH],
            "published": False,
            "status": DRAFT,
            "scheduled_at": None,
            "published_at": None,
            "status_changed_at": utcnow(),
            "status_changed_by": actor_email_of(actor),
        },
    )
    return serialize_post(copy)


@admin_action("Failed to delete posts")
def bulk_delete_posts(db: Session, actor, ids: Iterable[int]) -> Dict[str, Any]:
    deleted = bulk_delete_entities(db, actor, POSTS, ids)
    revalidate_public_post_paths(*deleted)
    return {"count": len(deleted)}


@admin_action("Failed to update post status")
def toggle_post_status(db: Session, actor, post_id: int, target: str) -> Dict[str, Any]:
    target = (target or "").strip().lower()
    if target not in STATUS_TARGETS:
        raise ValidationFailed("Target must be published or draft")
    post = get_or_404(db, POSTS, post_id)
    patch = build_status_toggle(post, target, actor_email_of(actor))
    if patch is None:
        return serialize_post(post)
    previous = {"status": post.status, "published": post.published}
    post = update_entity(db, actor, POSTS, post, patch)
    revalidate_public_post_paths(previous, post)
    return serialize_post(post)


def _bulk_set_status(db: Session, actor, ids: Iterable[int], target: str) -> Dict[str, Any]:
    ids = list(ids or [])
    if not ids:
        return {"count": 0, "posts": []}
    posts = db.query(Post).filter(Post.id.in_(ids)).all()

    actor_email = actor_email_of(actor)
    now = utcnow()
    pending = []
    for post in posts:
        patch = build_status_toggle(post, target, actor_email, now=now)
        if patch is not None:
            pending.append((post, patch))
    if not pending:
        return {"count": 0, "posts": []}

    previous = []
    for post, patch in pending:
        before = snapshot_row(post)
        previous.append(before)
        for key, value in patch.items():
            setattr(post, key, value)
        db.flush()
        record_audit(
            db,
            actor=actor,
            entity_type=POSTS.entity_type,
            entity_id=post.slug,
            action=UPDATE,
            diff=build_audit_diff(before, post),
        )
    db.commit()

    updated = []
    for post, _ in pending:
        db.refresh(post)
        updated.append(post)
    revalidate_path(POSTS.admin_path)
    revalidate_public_post_paths(*previous, *updated)
    return {"count": len(updated), "posts": [serialize_post(post) for post in updated]}


@admin_action("Failed to publish posts")
def bulk_publish_posts(db: Session, actor, ids: Iterable[int]) -> Dict[str, Any]:
    return _bulk_set_status(db, actor, ids, TARGET_PUBLISHED)


@admin_action("Failed to unpublish posts")
def bulk_unpublish_posts(db: Session, actor, ids: Iterable[int]) -> Dict[str, Any]:
    return _bulk_set_status(db, actor, ids, TARGET_DRAFT)
