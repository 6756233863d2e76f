"""Site-wide brand, contact and footer settings. A single row is expected."""

from sqlalchemy import Column, Integer, String, Text

from app.database import Base
from app.models.types import UTCDateTime, utcnow


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    brand_name = Column(String(100), nullable=False)
    brand_role = Column(String(120))
    brand_description = Column(Text)
    copyright = Column(String(200))
    footer_tagline = Column(String(160))
    footer_note = Column(Text)
    footer_cta_label = Column(String(120))
    footer_cta_href = Column(String(500))
    linkedin = Column(String(500))
    github = Column(String(500))
    x = Column(String(500))
    threads = Column(String(500))
    email = Column(String(255))
    contact_headline = Column(String(160))
    contact_description = Column(Text)
    contact_location = Column(String(160))
    contact_availability = Column(String(160))
    contact_cta_label = Column(String(120))
    contact_cta_href = Column(String(500))
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
