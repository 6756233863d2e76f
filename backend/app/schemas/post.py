"""Pydantic contracts for the post admin form and post responses."""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import field_validator, model_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, require_text, validate_optional_url
from app.utils.dates import parse_datetime

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
FORM_STATUSES = ("draft", "scheduled", "published")


class PostForm(FormModel):
    slug: str = ""
    title: str = ""
    content: Optional[str] = None
    meta_description: Optional[str] = None
    featured_banner: Optional[str] = None
    status: str = "draft"
    scheduled_at: Optional[str] = None
    published_at: Optional[str] = None

    @field_validator("slug", mode="before")
    @classmethod
    def _validate_slug(cls, value):
        slug = require_text(value, "Slug is required")
        if not SLUG_PATTERN.match(slug):
            raise ValueError("Use letters, numbers, and hyphens only.")
        return slug

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, value):
        return require_text(value, "Title is required")

    @field_validator("featured_banner", mode="before")
    @classmethod
    def _validate_banner(cls, value):
        return validate_optional_url(value)

    @field_validator("status", mode="before")
    @classmethod
    def _validate_status(cls, value):
        status = (clean_optional(value) or "draft").lower()
        if status not in FORM_STATUSES:
            raise ValueError("Status must be draft, scheduled, or published")
        return status

    @field_validator("scheduled_at", "published_at", mode="before")
    @classmethod
    def _validate_datetime(cls, value):
        text = clean_optional(value)
        if text is not None and parse_datetime(text) is None:
            raise ValueError("Enter a valid date and time")
        return text

    @model_validator(mode="after")
    def _check_schedule(self):
        now = datetime.now(timezone.utc)
        if self.status == "scheduled":
            if not self.scheduled_at:
                raise ValueError("Choose when the post should be published.")
            if parse_datetime(self.scheduled_at) <= now:
                raise ValueError("Scheduled posts must be set in the future.")
        if self.status == "published" and self.published_at:
            if parse_datetime(self.published_at) > now + timedelta(seconds=1):
                raise ValueError("Published posts cannot have a publish date in the future.")
        return self


class PostOut(RecordOut):
    id: int
    slug: str
    title: str
    content: Optional[str] = None
    meta_description: Optional[str] = None
    featured_banner: Optional[str] = None
    published: bool
    status: str
    scheduled_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    status_changed_at: datetime
    status_changed_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("status", mode="before")
    @classmethod
    def _lowercase_status(cls, value):
        return str(value).lower()
