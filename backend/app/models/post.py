"""Blog post SQLAlchemy model definition."""

from sqlalchemy import Boolean, Column, Index, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow

DRAFT = "DRAFT"
SCHEDULED = "SCHEDULED"
PUBLISHED = "PUBLISHED"
POST_STATUSES = (DRAFT, SCHEDULED, PUBLISHED)


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(200), unique=True, nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text)
    meta_description = Column(Text)
    featured_banner = Column(String(500))
    published = Column(Boolean, default=False, nullable=False)
    status = Column(String(20), default=DRAFT, nullable=False)  # DRAFT/SCHEDULED/PUBLISHED
    scheduled_at = Column(UTCDateTime)
    published_at = Column(UTCDateTime)
    status_changed_at = Column(UTCDateTime, default=utcnow, nullable=False)
    status_changed_by = Column(String(255))
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_posts_status_published_at", "status", "published_at"),
    )
