import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.admin_user import AdminUser
from app.services.auth_service import decode_token
from app.utils.errors import DatastoreNotConfigured, Unauthorized
from app.utils.permissions import is_active_admin

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _resolve_admin(db: Session, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[AdminUser]:
    if credentials is None:
        return None
    email = decode_token(credentials.credentials)
    if email is None:
        logger.warning("[auth] invalid or expired token")
        return None
    user = db.query(AdminUser).filter(AdminUser.email == email.lower()).first()
    if not is_active_admin(user):
        logger.warning("[auth] rejected session for %s", email)
        return None
    return user


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Optional[Session] = Depends(get_db),
) -> AdminUser:
    if db is None:
        raise DatastoreNotConfigured()
    user = _resolve_admin(db, credentials)
    if user is None:
        raise Unauthorized()
    return user


def get_optional_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Optional[Session] = Depends(get_db),
) -> Optional[AdminUser]:
    if db is None:
        return None
    return _resolve_admin(db, credentials)
