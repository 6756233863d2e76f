"""Pydantic contracts for work samples."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, require_text, validate_optional_url


class WorkSampleForm(FormModel):
    title: str = ""
    url: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, value):
        return require_text(value, "Title is required")

    @field_validator("url", mode="before")
    @classmethod
    def _validate_url(cls, value):
        return validate_optional_url(value)

    @field_validator("description", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return clean_optional(value)


class WorkSampleOut(RecordOut):
    id: int
    title: str
    url: Optional[str] = None
    description: Optional[str] = None
    published: bool = True
    created_at: datetime
    updated_at: datetime

    @field_validator("published", mode="before")
    @classmethod
    def _published_default(cls, value):
        return True if value is None else value
