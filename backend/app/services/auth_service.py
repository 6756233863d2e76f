"""Admin sign-in: mock single sign-on plus JWT issuing."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.config import settings
from app.models.admin_user import AdminUser
from app.utils.errors import Unauthorized
from app.utils.permissions import is_admin_email

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_access_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": email, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[str]:
    """Email carried by ``token``; ``None`` if it is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) and subject else None


def mock_sso_login(db: Session, email: str) -> AdminUser:
    email = (email or "").strip().lower()
    if not is_admin_email(email):
        logger.warning("[auth] rejected login for %s (not in ADMIN_EMAILS)", email or "<empty>")
        raise Unauthorized()

    user = db.query(AdminUser).filter(AdminUser.email == email).first()
    if user is None:
        user = AdminUser(email=email, name=email.split("@")[0])
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("[auth] created admin account for %s", email)
    elif not user.is_active:
        logger.warning("[auth] rejected login for inactive admin %s", email)
        raise Unauthorized()
    return user
