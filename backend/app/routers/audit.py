"""Audit trail query route."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.services import audit_service
from app.services.action_result import run_action, to_response

router = APIRouter(prefix="/api/audit", tags=["audit"])


@router.get("")
def query_audit_log(
    action: Optional[str] = Query(None),
    entity_type: Optional[str] = Query(None, alias="entityType"),
    q: Optional[str] = Query(None, max_length=200),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    result = run_action(
        db,
        admin,
        lambda: audit_service.query_audit_log(db, action=action, entity_type=entity_type, q=q),
        failure_message="Failed to load audit log",
    )
    return to_response(result)
