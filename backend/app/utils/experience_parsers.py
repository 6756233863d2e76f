"""Parsing and normalisation of the structured experience fields.

Form input arrives either as text (newline separated lists, JSON in a
textarea) or as already-decoded JSON from API clients; both are accepted.
Stored values are re-normalised on the way out so that rows written by
older code still serialise cleanly.
"""

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from app.utils.errors import ValidationFailed

logger = logging.getLogger(__name__)

_LIST_SEPARATORS = re.compile("\r?\n|,|;|•|‣|◦|⁃|∙")
_BULLET_PREFIX = re.compile(r"^[-*•◦‣∙]+\s*")


def _normalise_string(value: Any) -> Optional[str]:
    return value.strip() if isinstance(value, str) else None


def _clean_string_list(values: Iterable[str]) -> List[str]:
    result: List[str] = []
    seen = set()
    for value in values:
        trimmed = value.strip()
        if not trimmed or trimmed in seen:
            continue
        seen.add(trimmed)
        result.append(trimmed)
    return result


def coerce_string_array(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return _clean_string_list(item for item in value if isinstance(item, str))

    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            return []
        if trimmed.startswith("["):
            try:
                parsed = json.loads(trimmed)
            except json.JSONDecodeError as exc:
                logger.debug("[experiences] failed to parse string array JSON: %s", exc)
            else:
                if isinstance(parsed, list):
                    return _clean_string_list(item for item in parsed if isinstance(item, str))
        parts = (_BULLET_PREFIX.sub("", part) for part in _LIST_SEPARATORS.split(trimmed))
        return _clean_string_list(parts)

    return []


def split_multiline(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return [line.strip() for line in str(value).splitlines() if line.strip()]


def _decode(value: Any) -> Any:
    if isinstance(value, str):
        if not value.strip():
            return None
        return json.loads(value)
    return value


def _career_entry(entry: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    title = _normalise_string(entry.get("title"))
    period = _normalise_string(entry.get("period"))
    if not title or not period:
        return None
    return {
        "title": title,
        "period": period,
        "type": _normalise_string(entry.get("type")) or "standard",
        "description": _normalise_string(entry.get("description")) or "",
        "responsibilities": coerce_string_array(entry.get("responsibilities")),
        "skills": coerce_string_array(entry.get("skills")),
    }


def parse_career_progression(value: Any) -> Optional[List[Dict[str, Any]]]:
    try:
        parsed = _decode(value)
    except json.JSONDecodeError as exc:
        raise ValidationFailed(f"Invalid JSON for career progression: {exc.msg}")
    if parsed is None:
        return None
    if not isinstance(parsed, list):
        raise ValidationFailed("Career progression must be a JSON array")

    items = []
    for entry in parsed:
        if not isinstance(entry, dict):
            raise ValidationFailed("Career progression entries must be objects")
        item = _career_entry(entry)
        if item is None:
            raise ValidationFailed("Career progression entries require a title and period")
        items.append(item)
    return items or None


def parse_previous_role(value: Any) -> Optional[Dict[str, str]]:
    try:
        parsed = _decode(value)
    except json.JSONDecodeError as exc:
        raise ValidationFailed(f"Invalid JSON for previous role: {exc.msg}")
    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise ValidationFailed("Previous role must be a JSON object")

    role = normalise_previous_role_value(parsed)
    if role is None:
        raise ValidationFailed("Previous role requires a title and period")
    return role


def normalise_career_progression_value(value: Any) -> Optional[List[Dict[str, Any]]]:
    if not isinstance(value, list):
        return None
    items = [item for item in (_career_entry(e) for e in value if isinstance(e, dict)) if item]
    return items or None


def normalise_previous_role_value(value: Any) -> Optional[Dict[str, str]]:
    if not isinstance(value, dict):
        return None
    title = _normalise_string(value.get("title"))
    period = _normalise_string(value.get("period"))
    note = _normalise_string(value.get("note"))
    if not title or not period:
        return None
    return {"title": title, "period": period, "note": note} if note else {"title": title, "period": period}
