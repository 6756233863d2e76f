"""Admin account SQLAlchemy model definition."""

from sqlalchemy import Boolean, Column, Integer, String

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class AdminUser(Base):
    __tablename__ = "admin_users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(100))
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
