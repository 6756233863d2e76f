"""Promotional banner/card SQLAlchemy model definition."""

from sqlalchemy import Boolean, Column, Index, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow

TOP_BAR = "TOP_BAR"
BOTTOM_BAR = "BOTTOM_BAR"
PRE_FOOTER_CARD = "PRE_FOOTER_CARD"
PROMO_PLACEMENTS = (TOP_BAR, BOTTOM_BAR, PRE_FOOTER_CARD)


class PromoSection(Base):
    __tablename__ = "promo_sections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    link_label = Column(String(120))
    link_href = Column(String(500))
    placement = Column(String(30), nullable=False)  # TOP_BAR/BOTTOM_BAR/PRE_FOOTER_CARD
    is_enabled = Column(Boolean, default=False, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_promo_sections_placement_order", "placement", "display_order"),
    )
