"""Pydantic contracts for recommended tools."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, require_text, validate_optional_url


class ToolForm(FormModel):
    name: str = ""
    url: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value):
        return require_text(value, "Name is required")

    @field_validator("url", mode="before")
    @classmethod
    def _validate_url(cls, value):
        return validate_optional_url(value)

    @field_validator("description", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return clean_optional(value)


class ToolOut(RecordOut):
    id: int
    name: str
    url: Optional[str] = None
    description: Optional[str] = None
    published: bool = True
    created_at: datetime
    updated_at: datetime
