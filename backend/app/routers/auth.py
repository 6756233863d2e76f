"""Admin authentication routes."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_admin
from app.models.admin_user import AdminUser
from app.schemas.auth import AdminUserOut, LoginRequest, TokenResponse
from app.services.auth_service import create_access_token, mock_sso_login
from app.utils.errors import DatastoreNotConfigured

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Optional[Session] = Depends(get_db)):
    if db is None:
        raise DatastoreNotConfigured()
    user = mock_sso_login(db, request.email)
    token = create_access_token(user.email)
    return TokenResponse(access_token=token, user=AdminUserOut.model_validate(user))


@router.post("/logout")
def logout(current_admin: AdminUser = Depends(get_current_admin)):
    return {"ok": True, "data": {"email": current_admin.email}}


@router.get("/me", response_model=AdminUserOut)
def me(current_admin: AdminUser = Depends(get_current_admin)):
    return current_admin
