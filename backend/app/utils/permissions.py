"""Admin permission helpers."""

from typing import Optional

from app.config import settings


def is_admin_email(email: Optional[str]) -> bool:
    if not email:
        return False
    return email.strip().lower() in settings.admin_emails()


def is_active_admin(user) -> bool:
    return bool(user is not None and user.is_active and is_admin_email(user.email))
