"""Pydantic contracts for promotional sections."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.models.promo_section import PROMO_PLACEMENTS
from app.schemas.common import FormModel, RecordOut, clean_optional, require_text


def coerce_display_order(value) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        try:
            return max(0, int(value))
        except (OverflowError, ValueError):
            return 0
    text = clean_optional(value)
    if text is None:
        return 0
    try:
        return max(0, int(text))
    except ValueError:
        return 0


class PromoForm(FormModel):
    placement: str = ""
    title: str = ""
    description: Optional[str] = None
    link_label: Optional[str] = None
    link_href: Optional[str] = None
    is_enabled: bool = False
    display_order: int = 0

    @field_validator("placement", mode="before")
    @classmethod
    def _validate_placement(cls, value):
        placement = require_text(value, "Placement is required").upper()
        if placement not in PROMO_PLACEMENTS:
            raise ValueError(f"Placement must be one of {', '.join(PROMO_PLACEMENTS)}")
        return placement

    @field_validator("title", mode="before")
    @classmethod
    def _validate_title(cls, value):
        return require_text(value, "Title is required")

    @field_validator("description", "link_label", "link_href", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return clean_optional(value)

    @field_validator("is_enabled", mode="before")
    @classmethod
    def _coerce_enabled(cls, value):
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "on", "yes")
        return bool(value)

    @field_validator("display_order", mode="before")
    @classmethod
    def _coerce_order(cls, value):
        return coerce_display_order(value)


class PromoOut(RecordOut):
    id: int
    title: str
    description: Optional[str] = None
    link_label: Optional[str] = None
    link_href: Optional[str] = None
    placement: str
    is_enabled: bool
    display_order: int
    created_at: datetime
    updated_at: datetime
