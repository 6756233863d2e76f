"""Experience admin routes."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.schemas.common import BulkIdsRequest, PublishedToggleRequest
from app.services import experience_service
from app.services.action_result import to_response

router = APIRouter(prefix="/api/admin/experiences", tags=["experiences"])


@router.get("")
def list_experiences(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(experience_service.list_admin_experiences(db, admin))


@router.post("")
def create_experience(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(experience_service.create_experience(db, admin, payload))


@router.post("/bulk-delete")
def bulk_delete_experiences(
    request: BulkIdsRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(experience_service.bulk_delete_experiences(db, admin, request.ids))


@router.put("/{experience_id}")
def update_experience(
    experience_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(experience_service.update_experience(db, admin, experience_id, payload))


@router.delete("/{experience_id}")
def delete_experience(experience_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(experience_service.delete_experience(db, admin, experience_id))


@router.post("/{experience_id}/duplicate")
def duplicate_experience(
    experience_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)
):
    return to_response(experience_service.duplicate_experience(db, admin, experience_id))


@router.post("/{experience_id}/published")
def toggle_experience_published(
    experience_id: int,
    request: Optional[PublishedToggleRequest] = None,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    published = request.published if request else None
    return to_response(experience_service.toggle_experience_published(db, admin, experience_id, published))
