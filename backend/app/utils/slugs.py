"""Slug helpers."""

import re
from typing import Callable

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def to_slug(value: str) -> str:
    return _NON_SLUG_CHARS.sub("-", (value or "").strip().lower()).strip("-")


def generate_duplicate_slug(slug: str, exists: Callable[[str], bool]) -> str:
    # Sequential lookups; a concurrent duplicate can still race the insert,
    # which the unique index rejects.
    base_slug = slug if slug.endswith("-copy") else f"{slug}-copy"
    candidate = base_slug
    counter = 1
    while exists(candidate):
        candidate = f"{base_slug}-{counter}"
        counter += 1
    return candidate
