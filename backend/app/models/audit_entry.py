"""Audit trail SQLAlchemy model definition. Rows are append-only."""

from sqlalchemy import Column, Index, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow

CREATE = "CREATE"
UPDATE = "UPDATE"
DELETE = "DELETE"
AUDIT_ACTIONS = (CREATE, UPDATE, DELETE)


class AuditEntry(Base):
    __tablename__ = "audit_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    actor_email = Column(String(255), nullable=False)
    entity_type = Column(String(50), nullable=False)  # Post/Experience/WebApp/...
    entity_id = Column(String(200), nullable=False)  # no FK: the trail outlives the entity
    action = Column(String(10), nullable=False)  # CREATE/UPDATE/DELETE
    diff = Column(Text, nullable=False)  # JSON string
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_audit_entries_entity", "entity_type", "entity_id"),
        Index("idx_audit_entries_created_at", "created_at"),
    )
