"""Pydantic contracts for skills."""

import math
from datetime import datetime
from typing import Optional

from pydantic import field_validator, model_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, require_text
from app.utils.slugs import to_slug

DEFAULT_LEVEL = 3
MIN_LEVEL = 1
MAX_LEVEL = 5


def coerce_level(value) -> int:
    try:
        level = float(value)
    except (TypeError, ValueError):
        return DEFAULT_LEVEL
    if not math.isfinite(level):
        return DEFAULT_LEVEL
    return int(round(max(MIN_LEVEL, min(MAX_LEVEL, level))))


class SkillForm(FormModel):
    name: str = ""
    slug: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    level: int = DEFAULT_LEVEL
    category: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value):
        return require_text(value, "Name is required")

    @field_validator("slug", "description", "icon", "category", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return clean_optional(value)

    @field_validator("level", mode="before")
    @classmethod
    def _clamp_level(cls, value):
        return coerce_level(value)

    @model_validator(mode="after")
    def _derive_slug(self):
        slug = to_slug(self.slug or self.name)
        if not slug:
            raise ValueError("Slug could not be generated")
        self.slug = slug
        return self


class SkillOut(RecordOut):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    level: int = DEFAULT_LEVEL
    category: Optional[str] = None
    published: bool = True
    created_at: datetime
    updated_at: datetime


class PublicSkillOut(RecordOut):
    name: str
    slug: str
    frequency: int
