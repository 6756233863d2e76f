"""Row -> wire-safe dict mapping.

Datetimes are emitted as ISO-8601 UTC strings (``...Z``), post status is
lowercased and experience JSON fields are normalised by the response
schemas. :func:`deserialize` reverses the mapping.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from app.schemas.audit import AuditEntryOut
from app.schemas.experience import ExperienceOut
from app.schemas.post import PostOut
from app.schemas.promo import PromoOut
from app.schemas.site_settings import SiteSettingsOut
from app.schemas.skill import SkillOut
from app.schemas.tool import ToolOut
from app.schemas.web_app import WebAppOut
from app.schemas.work_sample import WorkSampleOut
from app.utils.dates import parse_datetime

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def serialize(schema_cls: Type[BaseModel], row: Any) -> Dict[str, Any]:
    return schema_cls.model_validate(row).model_dump(mode="json")


def serialize_many(schema_cls: Type[BaseModel], rows: Iterable[Any]) -> List[Dict[str, Any]]:
    return [serialize(schema_cls, row) for row in rows]


def deserialize(schema_cls: Type[SchemaT], data: Dict[str, Any]) -> SchemaT:
    return schema_cls.model_validate(data)


def deserialize_datetime(value: Optional[str]) -> Optional[datetime]:
    return parse_datetime(value)


def serialize_post(row) -> Dict[str, Any]:
    return serialize(PostOut, row)


def serialize_experience(row) -> Dict[str, Any]:
    return serialize(ExperienceOut, row)


def serialize_web_app(row) -> Dict[str, Any]:
    return serialize(WebAppOut, row)


def serialize_work_sample(row) -> Dict[str, Any]:
    return serialize(WorkSampleOut, row)


def serialize_skill(row) -> Dict[str, Any]:
    return serialize(SkillOut, row)


def serialize_tool(row) -> Dict[str, Any]:
    return serialize(ToolOut, row)


def serialize_promo(row) -> Dict[str, Any]:
    return serialize(PromoOut, row)


def serialize_audit_entry(row) -> Dict[str, Any]:
    return serialize(AuditEntryOut, row)


def serialize_site_settings(row) -> Dict[str, Any]:
    return serialize(SiteSettingsOut, row)
