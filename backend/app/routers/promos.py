"""Promotional section admin routes."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.services import promo_service
from app.services.action_result import to_response

router = APIRouter(prefix="/api/admin/promos", tags=["promos"])


@router.get("")
def list_promos(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(promo_service.list_admin_promos(db, admin))


@router.post("")
def create_promo(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(promo_service.create_promo(db, admin, payload))


@router.put("/{promo_id}")
def update_promo(
    promo_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(promo_service.update_promo(db, admin, promo_id, payload))


@router.delete("/{promo_id}")
def delete_promo(promo_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(promo_service.delete_promo(db, admin, promo_id))


@router.post("/{promo_id}/duplicate")
def duplicate_promo(promo_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(promo_service.duplicate_promo(db, admin, promo_id))
