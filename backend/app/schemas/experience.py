"""Pydantic contracts for experiences."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, require_text
from app.utils.dates import parse_datetime
from app.utils.experience_parsers import (
    coerce_string_array,
    normalise_career_progression_value,
    normalise_previous_role_value,
)


class ExperienceForm(FormModel):
    company: str = ""
    title: str = ""
    period: Optional[str] = None
    location: Optional[str] = None
    start_date: str = ""
    end_date: Optional[str] = None
    description: Optional[str] = None
    full_description: Optional[str] = None
    # Text (one item per line / JSON) or already structured values
    achievements: Any = None
    responsibilities: Any = None
    skills: Any = None
    career_progression: Any = None
    previous_role: Any = None
    published: Optional[bool] = None

    @field_validator("company", mode="before")
    @classmethod
    def _validate_company(cls, value):
        return require_text(value, "Company is required")

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, value):
        return require_text(value, "Title is required")

    @field_validator("start_date", mode="before")
    @classmethod
    def _validate_start_date(cls, value):
        text = require_text(value, "Start date is required")
        if parse_datetime(text) is None:
            raise ValueError("Enter a valid date")
        return text

    @field_validator("end_date", mode="before")
    @classmethod
    def _validate_end_date(cls, value):
        text = clean_optional(value)
        if text is not None and parse_datetime(text) is None:
            raise ValueError("Enter a valid date")
        return text


class ExperienceOut(RecordOut):
    id: int
    company: str
    title: str
    period: Optional[str] = None
    location: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    description: Optional[str] = None
    achievements: List[str] = []
    full_description: Optional[str] = None
    responsibilities: List[str] = []
    skills: List[str] = []
    career_progression: Optional[List[Dict[str, Any]]] = None
    previous_role: Optional[Dict[str, Any]] = None
    published: bool = True
    created_at: datetime
    updated_at: datetime

    @field_validator("achievements", "responsibilities", "skills", mode="before")
    @classmethod
    def _string_lists(cls, value):
        return coerce_string_array(value)

    @field_validator("career_progression", mode="before")
    @classmethod
    def _career_progression(cls, value):
        return normalise_career_progression_value(value)

    @field_validator("previous_role", mode="before")
    @classmethod
    def _previous_role(cls, value):
        return normalise_previous_role_value(value)

    @field_validator("published", mode="before")
    @classmethod
    def _published_default(cls, value):
        return True if value is None else value


class ExperienceSummaryOut(BaseModel):
    id: int
    title: str
    company: str
    period: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
