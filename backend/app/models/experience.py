"""Work experience SQLAlchemy model definition."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    period = Column(String(100))
    location = Column(String(200))
    start_date = Column(UTCDateTime, nullable=False)
    end_date = Column(UTCDateTime)
    description = Column(Text)
    achievements = Column(JSON, default=list)  # list[str]
    full_description = Column(Text)
    responsibilities = Column(JSON, default=list)  # list[str]
    skills = Column(JSON, default=list)  # list[str]
    career_progression = Column(JSON)  # list[{title, period, type, description, responsibilities, skills}]
    previous_role = Column(JSON)  # {title, period, note?}
    published = Column(Boolean, default=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
