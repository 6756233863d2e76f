"""Skill admin routes."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.services import skill_service
from app.services.action_result import to_response

router = APIRouter(prefix="/api/admin/skills", tags=["skills"])


@router.get("")
def list_skills(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(skill_service.list_admin_skills(db, admin))


@router.post("")
def create_skill(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(skill_service.create_skill(db, admin, payload))


@router.put("/{skill_id}")
def update_skill(
    skill_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(skill_service.update_skill(db, admin, skill_id, payload))


@router.delete("/{skill_id}")
def delete_skill(skill_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(skill_service.delete_skill(db, admin, skill_id))


@router.post("/{skill_id}/duplicate")
def duplicate_skill(skill_id: int, db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(skill_service.duplicate_skill(db, admin, skill_id))
