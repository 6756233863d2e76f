"""Pydantic contracts for the footer / site settings form."""

import re
from datetime import datetime
from typing import Any, Optional

from pydantic import ValidationInfo, field_validator

from app.schemas.common import FormModel, RecordOut, clean_optional, validate_optional_url

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# field -> (label used in messages, max length)
TEXT_LIMITS = {
    "brand_role": ("role", 120),
    "brand_description": ("description", 500),
    "contact_headline": ("contact headline", 160),
    "contact_description": ("contact description", 500),
    "contact_location": ("contact location", 160),
    "contact_availability": ("contact availability", 160),
    "contact_cta_label": ("contact call-to-action label", 120),
    "footer_tagline": ("footer tagline", 160),
    "footer_cta_label": ("footer call-to-action label", 120),
    "footer_note": ("footer note", 500),
    "copyright": ("copyright", 200),
}

URL_LABELS = {
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "x": "X",
    "threads": "Threads",
    "contact_cta_href": "contact call-to-action",
    "footer_cta_href": "footer call-to-action",
}

SITE_SETTINGS_FIELDS = ("brand_name", "email", *TEXT_LIMITS, *URL_LABELS)


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL.match(value))


def validate_link(value: Any, label: str) -> Optional[str]:
    """Relative paths, anchors and mailto: links are accepted besides absolute URLs."""
    text = clean_optional(value)
    if text is None:
        return None
    if text.startswith(("/", "#")):
        return text
    if text.lower().startswith("mailto:"):
        if not is_valid_email(text[len("mailto:"):]):
            raise ValueError(f"Enter a valid {label} URL")
        return text
    return validate_optional_url(text, f"Enter a valid {label} URL")


class SiteSettingsForm(FormModel):
    brand_name: str = ""
    brand_role: Optional[str] = None
    brand_description: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    x: Optional[str] = None
    threads: Optional[str] = None
    email: Optional[str] = None
    contact_headline: Optional[str] = None
    contact_description: Optional[str] = None
    contact_location: Optional[str] = None
    contact_availability: Optional[str] = None
    contact_cta_label: Optional[str] = None
    contact_cta_href: Optional[str] = None
    footer_tagline: Optional[str] = None
    footer_cta_label: Optional[str] = None
    footer_cta_href: Optional[str] = None
    footer_note: Optional[str] = None
    copyright: Optional[str] = None

    @field_validator("brand_name", mode="before")
    @classmethod
    def _validate_brand_name(cls, value):
        text = clean_optional(value) or ""
        if len(text) < 2:
            raise ValueError("Brand name must be at least 2 characters long")
        if len(text) > 100:
            raise ValueError("Brand name must be 100 characters or less")
        return text

    @field_validator(*TEXT_LIMITS, mode="before")
    @classmethod
    def _limit_text(cls, value, info: ValidationInfo):
        text = clean_optional(value)
        label, max_length = TEXT_LIMITS[info.field_name]
        if text is not None and len(text) > max_length:
            raise ValueError(f"{label[0].upper()}{label[1:]} must be {max_length} characters or less")
        return text

    @field_validator(*URL_LABELS, mode="before")
    @classmethod
    def _validate_links(cls, value, info: ValidationInfo):
        return validate_link(value, URL_LABELS[info.field_name])

    @field_validator("email", mode="before")
    @classmethod
    def _validate_email(cls, value):
        text = clean_optional(value)
        if text is None:
            return None
        # Stored without the mailto: prefix
        text = re.sub(r"^mailto:", "", text, flags=re.IGNORECASE).strip()
        if not text:
            return None
        if not is_valid_email(text):
            raise ValueError("Enter a valid email address")
        return text


class SiteSettingsOut(RecordOut):
    id: int
    brand_name: str
    brand_role: Optional[str] = None
    brand_description: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    x: Optional[str] = None
    threads: Optional[str] = None
    email: Optional[str] = None
    contact_headline: Optional[str] = None
    contact_description: Optional[str] = None
    contact_location: Optional[str] = None
    contact_availability: Optional[str] = None
    contact_cta_label: Optional[str] = None
    contact_cta_href: Optional[str] = None
    footer_tagline: Optional[str] = None
    footer_cta_label: Optional[str] = None
    footer_cta_href: Optional[str] = None
    footer_note: Optional[str] = None
    copyright: Optional[str] = None
    created_at: datetime
    updated_at: datetime
