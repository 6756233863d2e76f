"""Showcased web app admin routes."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.schemas.common import BulkIdsRequest
from app.services import web_app_service
from app.services.action_result import to_response

router = APIRouter(prefix="/api/admin/apps", tags=["apps"])


@router.get("")
def list_apps(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(web_app_service.list_admin_web_apps(db, admin))


@router.post("")
def create_app(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(web_app_service.create_web_app(db, admin, payload))


@router.post("/bulk-delete")
def bulk_delete_apps(
    request: BulkIdsRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(web_app_service.bulk_delete_web_apps(db, admin, request.ids))


@router.put("/{app_id}")
def update_app(
    app_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(web_app_service.update_web_app(db, admin, app_id, payload))


@router.delete("/{app_id}")
def delete_app(app_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(web_app_service.delete_web_app(db, admin, app_id))


@router.post("/{app_id}/duplicate")
def duplicate_app(app_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(web_app_service.duplicate_web_app(db, admin, app_id))
