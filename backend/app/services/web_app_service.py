"""Showcased web app admin actions."""

from typing import Any, Dict, Iterable

from sqlalchemy.orm import Session

from app.models.web_app import WebApp
from app.schemas.web_app import WebAppForm
from app.services import content_service
from app.services.action_result import admin_action
from app.services.content_service import ContentKind, get_or_404
from app.utils.serializers import serialize_web_app

WEB_APPS = ContentKind(
    model=WebApp,
    entity_type="WebApp",
    admin_path="/admin/apps",
    display_field="name",
    not_found_message="App not found",
    serialize=serialize_web_app,
)


def _values(form: WebAppForm) -> Dict[str, Any]:
    return form.model_dump(include={"name", "url", "description", "image", "blog_post_slug"})


@admin_action("Failed to load apps")
def list_admin_web_apps(db: Session, actor):
    return content_service.list_entities(db, WEB_APPS)


@admin_action("Failed to create app")
def create_web_app(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = WebAppForm.model_validate(payload or {})
    data = _values(form)
    data["published"] = True if form.published is None else form.published
    return serialize_web_app(content_service.create_entity(db, actor, WEB_APPS, data))


@admin_action("Failed to update app")
def update_web_app(db: Session, actor, app_id: int, payload: Any) -> Dict[str, Any]:
    form = WebAppForm.model_validate(payload or {})
    data = _values(form)
    if form.published is not None:
        data["published"] = form.published
    web_app = get_or_404(db, WEB_APPS, app_id)
    return serialize_web_app(content_service.update_entity(db, actor, WEB_APPS, web_app, data))


@admin_action("Failed to delete app")
def delete_web_app(db: Session, actor, app_id: int) -> Dict[str, Any]:
    web_app = get_or_404(db, WEB_APPS, app_id)
    content_service.delete_entity(db, actor, WEB_APPS, web_app)
    return {"id": app_id}


@admin_action("Failed to duplicate app")
def duplicate_web_app(db: Session, actor, app_id: int) -> Dict[str, Any]:
    web_app = get_or_404(db, WEB_APPS, app_id)
    return serialize_web_app(content_service.duplicate_entity(db, actor, WEB_APPS, web_app))


@admin_action("Failed to delete apps")
def bulk_delete_web_apps(db: Session, actor, ids: Iterable[int]) -> Dict[str, Any]:
    return {"count": len(content_service.bulk_delete_entities(db, actor, WEB_APPS, ids))}
