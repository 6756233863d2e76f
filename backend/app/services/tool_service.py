"""Recommended tool admin actions."""

from typing import Any, Dict

from sqlalchemy.orm import Session

from app.models.tool import Tool
from app.schemas.tool import ToolForm
from app.services import content_service
from app.services.action_result import admin_action
from app.services.content_service import ContentKind, get_or_404
from app.utils.serializers import serialize_tool

TOOLS = ContentKind(
    model=Tool,
    entity_type="Tool",
    admin_path="/admin/tools",
    display_field="name",
    not_found_message="Tool not found",
    serialize=serialize_tool,
)


@admin_action("Failed to load tools")
def list_admin_tools(db: Session, actor):
    return content_service.list_entities(db, TOOLS)


@admin_action("Failed to create tool")
def create_tool(db: Session, actor, payload: Any) -> Dict[str, Any]:
    form = ToolForm.model_validate(payload or {})
    data = form.model_dump(include={"name", "url", "description"})
    data["published"] = True if form.published is None else form.published
    return serialize_tool(content_service.create_entity(db, actor, TOOLS, data))


@admin_action("Failed to update tool")
def update_tool(db: Session, actor, tool_id: int, payload: Any) -> Dict[str, Any]:
    form = ToolForm.model_validate(payload or {})
    data = form.model_dump(include={"name", "url", "description"})
    if form.published is not None:
        data["published"] = form.published
    tool = get_or_404(db, TOOLS, tool_id)
    return serialize_tool(content_service.update_entity(db, actor, TOOLS, tool, data))


@admin_action("Failed to delete tool")
def delete_tool(db: Session, actor, tool_id: int) -> Dict[str, Any]:
    tool = get_or_404(db, TOOLS, tool_id)
    content_service.delete_entity(db, actor, TOOLS, tool)
    return {"id": tool_id}


@admin_action("Failed to duplicate tool")
def duplicate_tool(db: Session, actor, tool_id: int) -> Dict[str, Any]:
    tool = get_or_404(db, TOOLS, tool_id)
    return serialize_tool(content_service.duplicate_entity(db, actor, TOOLS, tool))
