"""Audit trail response contracts."""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import RecordOut


class AuditEntryOut(RecordOut):
    id: int
    actor_email: str
    entity_type: str
    entity_id: str
    action: str
    diff: Dict[str, Any]
    created_at: datetime

    @field_validator("diff", mode="before")
    @classmethod
    def _decode_diff(cls, value):
        if isinstance(value, str):
            try:
                return json.loads(value or "{}")
            except json.JSONDecodeError:
                return {}
        return value or {}


class AuditFilters(BaseModel):
    action: Optional[str] = None
    entity_type: Optional[str] = None
    q: Optional[str] = None


class AuditQueryOut(BaseModel):
    entries: List[AuditEntryOut]
    entity_types: List[str]
    filters: AuditFilters
    table_missing: bool = False
