"""Footer / site settings routes: one public read plus the admin editor."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.services import site_settings_service
from app.services.action_result import run_read, to_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["footer"])


@router.get("/api/footer")
def get_footer(db: Optional[Session] = Depends(get_db)):
    if db is None:
        # The site still renders its footer from the defaults.
        logger.warning("[footer] datastore unavailable; serving default site settings")
        return JSONResponse(status_code=503, content=site_settings_service.to_site_settings_response(None))
    result = run_read(
        db, lambda: site_settings_service.load_site_settings(db), failure_message="Failed to load site settings"
    )
    if result.ok:
        return result.data
    return to_response(result)


@router.get("/api/admin/footer")
def get_admin_footer(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(site_settings_service.get_admin_site_settings(db, admin))


@router.post("/api/admin/footer")
def create_footer(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(site_settings_service.save_site_settings(db, admin, payload))


@router.put("/api/admin/footer")
def update_footer(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    admin: AdminUser = Depends(get_current_admin),
):
    return to_response(site_settings_service.save_site_settings(db, admin, payload))


@router.delete("/api/admin/footer")
def delete_footer(db: Session = Depends(get_db), admin: AdminUser = Depends(get_current_admin)):
    return to_response(site_settings_service.delete_site_settings(db, admin))
