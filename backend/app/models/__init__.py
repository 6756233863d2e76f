"""SQLAlchemy model package initialisation."""

from app.models.admin_user import AdminUser
from app.models.post import Post
from app.models.experience import Experience
from app.models.web_app import WebApp
from app.models.work_sample import WorkSample
from app.models.skill import Skill
from app.models.tool import Tool
from app.models.promo_section import PromoSection
from app.models.site_settings import SiteSettings
from app.models.audit_entry import AuditEntry

__all__ = [
    "AdminUser",
    "Post",
    "Experience",
    "WebApp",
    "WorkSample",
    "Skill",
    "Tool",
    "PromoSection",
    "SiteSettings",
    "AuditEntry",
]
