"""Admin login contracts."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import RecordOut


class LoginRequest(BaseModel):
    email: str


class AdminUserOut(RecordOut):
    user_id: int
    email: str
    name: Optional[str] = None
    is_active: bool
    created_at: datetime


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: AdminUserOut
