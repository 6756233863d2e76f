"""Recommended tool admin routes."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.services import tool_service
from app.services.action_result import to_response

router = APIRouter(prefix="/api/admin/tools", tags=["tools"])


@router.get("")
def list_tools(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(tool_service.list_admin_tools(db, admin))


@router.post("")
def create_tool(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(tool_service.create_tool(db, admin, payload))


@router.put("/{tool_id}")
def update_tool(
    tool_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(tool_service.update_tool(db, admin, tool_id, payload))


@router.delete("/{tool_id}")
def delete_tool(tool_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(tool_service.delete_tool(db, admin, tool_id))


@router.post("/{tool_id}/duplicate")
def duplicate_tool(tool_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(tool_service.duplicate_tool(db, admin, tool_id))
