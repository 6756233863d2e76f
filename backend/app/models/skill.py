"""Skill SQLAlchemy model definition."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False)
    description = Column(Text)
    icon = Column(String(200))
    level = Column(Integer, default=3, nullable=False)  # 1..5
    category = Column(String(100))
    published = Column(Boolean, default=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
