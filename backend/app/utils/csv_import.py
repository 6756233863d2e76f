"""CSV parsing for the bulk post import."""

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from app.utils.errors import ValidationFailed

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("title", "slug")
VALID_STATUSES = {"draft", "scheduled", "published"}

# Lowercased header -> form field name
COLUMN_FIELDS = {
    "title": "title",
    "slug": "slug",
    "content": "content",
    "metadescription": "meta_description",
    "meta_description": "meta_description",
    "featuredbanner": "featured_banner",
    "featured_banner": "featured_banner",
    "status": "status",
    "scheduledat": "scheduled_at",
    "scheduled_at": "scheduled_at",
    "publishedat": "published_at",
    "published_at": "published_at",
}


@dataclass
class CsvParseResult:
    rows: List[Dict[str, str]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _read_records(text: str) -> List[List[str]]:
    # Quoted fields may contain commas, doubled quotes and newlines.
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff"), newline=""))
    return [record for record in reader if any(cell.strip() for cell in record)]


def parse_posts_csv(text: str) -> CsvParseResult:
    records = _read_records(text)
    if len(records) < 2:
        raise ValidationFailed("CSV file must have at least a header row and one data row")

    headers = [cell.strip().lower() for cell in records[0]]
    missing = [name for name in REQUIRED_COLUMNS if name not in headers]
    if missing:
        raise ValidationFailed(f"Missing required columns: {', '.join(missing)}")

    result = CsvParseResult()
    for line_no, values in enumerate(records[1:], start=2):
        if len(values) != len(headers):
            message = f"Row {line_no} has incorrect number of columns"
            logger.warning("[csv] %s (expected %d, got %d)", message, len(headers), len(values))
            result.warnings.append(message)
            continue

        row: Dict[str, str] = {}
        for header, raw in zip(headers, values):
            field_name = COLUMN_FIELDS.get(header)
            value = raw.strip()
            if field_name is None or not value:
                continue
            if field_name == "status":
                value = value.lower()
                if value not in VALID_STATUSES:
                    continue
            row[field_name] = value

        if not row.get("title") or not row.get("slug"):
            continue
        row.setdefault("status", "draft")
        result.rows.append(row)

    return result
