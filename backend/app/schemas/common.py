"""Shared pydantic building blocks for the admin forms and responses."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(HttpUrl)


class FormModel(BaseModel):
    """Admin form payload; accepts both snake_case and camelCase keys."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
        validate_default=True,
    )


class RecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def clean_optional(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_text(value: Any, message: str) -> str:
    text = clean_optional(value)
    if text is None:
        raise ValueError(message)
    return text


def validate_optional_url(value: Any, message: str = "Enter a valid URL") -> Optional[str]:
    text = clean_optional(value)
    if text is None:
        return None
    try:
        _http_url.validate_python(text)
    except ValidationError:
        raise ValueError(message)
    return text


def first_error_message(exc: ValidationError, fallback: str = "Invalid data") -> str:
    errors = exc.errors()
    if not errors:
        return fallback
    message = str(errors[0].get("msg") or fallback)
    for prefix in ("Value error, ", "Assertion failed, "):
        if message.startswith(prefix):
            return message[len(prefix):]
    location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
    return f"{location}: {message}" if location else message


class BulkIdsRequest(BaseModel):
    ids: List[int] = []


class StatusToggleRequest(BaseModel):
    target: str


class PublishedToggleRequest(BaseModel):
    published: Optional[bool] = None
