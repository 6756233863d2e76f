"""Work sample admin routes."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.schemas.common import BulkIdsRequest, PublishedToggleRequest
from app.services import work_sample_service
from app.services.action_result import to_response

router = APIRouter(prefix="/api/admin/worksamples", tags=["worksamples"])


@router.get("")
def list_work_samples(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(work_sample_service.list_admin_work_samples(db, admin))


@router.post("")
def create_work_sample(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(work_sample_service.create_work_sample(db, admin, payload))


@router.post("/bulk-delete")
def bulk_delete_work_samples(
    request: BulkIdsRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(work_sample_service.bulk_delete_work_samples(db, admin, request.ids))


@router.put("/{sample_id}")
def update_work_sample(
    sample_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(work_sample_service.update_work_sample(db, admin, sample_id, payload))


@router.delete("/{sample_id}")
def delete_work_sample(sample_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(work_sample_service.delete_work_sample(db, admin, sample_id))


@router.post("/{sample_id}/duplicate")
def duplicate_work_sample(sample_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(work_sample_service.duplicate_work_sample(db, admin, sample_id))


@router.post("/{sample_id}/published")
def toggle_work_sample_published(
    sample_id: int,
    request: Optional[PublishedToggleRequest] = None,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    published = request.published if request else None
    return to_response(work_sample_service.toggle_work_sample_published(db, admin, sample_id, published))
