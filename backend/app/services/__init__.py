"""Service layer package."""

from app.services import (
    action_result,
    audit_service,
    auth_service,
    content_service,
    post_status,
    post_service,
    experience_service,
    web_app_service,
    work_sample_service,
    skill_service,
    tool_service,
    promo_service,
    public_service,
    site_settings_service,
    revalidation,
)
