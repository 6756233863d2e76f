"""Blog post admin routes."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, File, Query, UploadFile
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.schemas.common import BulkIdsRequest, StatusToggleRequest
from app.services import post_service
from app.services.action_result import ActionResult, to_response

router = APIRouter(prefix="/api/admin/posts", tags=["posts"])


@router.get("")
def list_posts(
    status: Optional[str] = Query(None),
    q: Optional[str] = Query(None, max_length=200),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.list_admin_posts(db, admin, status=status, q=q))


@router.post("")
def create_post(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.create_post(db, admin, payload))


@router.post("/bulk")
def bulk_create_posts(
    posts: List[Dict[str, Any]] = Body(..., embed=True),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.bulk_create_posts(db, admin, posts))


@router.post("/import")
async def import_posts(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    if not (file.filename or "").strip().lower().endswith(".csv"):
        return to_response(ActionResult.failure("Please upload a CSV file"))
    raw = await file.read()
    if len(raw) > settings.MAX_UPLOAD_SIZE:
        return to_response(
            ActionResult.failure(f"File exceeds the {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB limit", 413)
        )
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return to_response(ActionResult.failure("CSV file must be UTF-8 encoded"))
    return to_response(post_service.import_posts_csv(db, admin, text))


@router.post("/bulk-delete")
def bulk_delete_posts(
    request: BulkIdsRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.bulk_delete_posts(db, admin, request.ids))


@router.post("/bulk-publish")
def bulk_publish_posts(
    request: BulkIdsRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.bulk_publish_posts(db, admin, request.ids))


@router.post("/bulk-unpublish")
def bulk_unpublish_posts(
    request: BulkIdsRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.bulk_unpublish_posts(db, admin, request.ids))


@router.put("/{post_id}")
def update_post(
    post_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.update_post(db, admin, post_id, payload))


@router.delete("/{post_id}")
def delete_post(post_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(post_service.delete_post(db, admin, post_id))


@router.post("/{post_id}/duplicate")
def duplicate_post(post_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(post_service.duplicate_post(db, admin, post_id))


@router.post("/{post_id}/status")
def toggle_post_status(
    post_id: int,
    request: StatusToggleRequest,
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(post_service.toggle_post_status(db, admin, post_id, request.target))
