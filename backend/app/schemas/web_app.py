"""Pydantic contracts for showcased web apps."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, require_text, validate_optional_url


class WebAppForm(FormModel):
    name: str = ""
    url: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    blog_post_slug: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value):
        return require_text(value, "Name is required")

    @field_validator("url", "image", mode="before")
    @classmethod
    def _validate_urls(cls, value):
        return validate_optional_url(value)

    @field_validator("description", "blog_post_slug", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return clean_optional(value)


class WebAppOut(RecordOut):
    id: int
    name: str
    url: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    blog_post_slug: Optional[str] = None
    published: bool = True
    created_at: datetime
    updated_at: datetime

    @field_validator("published", mode="before")
    @classmethod
    def _published_default(cls, value):
        return True if value is None else value
