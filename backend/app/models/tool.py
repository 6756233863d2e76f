"""Recommended tool SQLAlchemy model definition."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class Tool(Base):
    __tablename__ = "tools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    url = Column(String(500))
    description = Column(Text)
    published = Column(Boolean, default=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
