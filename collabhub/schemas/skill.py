import logging
from typing import Any
from uuid import UUID

from pydantic import Field

from collabhub.schemas.common import CamelModel

logger = logging.getLogger(__name__)


class SkillEntry(CamelModel):
    # Clients send the skill *name* under "skillId"
    skill_id: str = Field(..., min_length=1)
    level: str | None = None


class SkillResponse(CamelModel):
    id: UUID
    name: str


class UserSkillResponse(CamelModel):
    id: UUID
    user_id: UUID
    skill_id: UUID
    level: str
    skill: SkillResponse


def drop_blank_skill_entries(value: Any) -> Any:
    """Drop entries whose skillId is missing or blank; leave other shapes to validation."""
    if not isinstance(value, list):
        return value
    kept = []
    for item in value:
        if isinstance(item, SkillEntry):
            name = item.skill_id
        elif isinstance(item, dict):
            name = item.get("skillId", item.get("skill_id"))
        else:
            continue
        if isinstance(name, str) and name.strip():
            kept.append(item)
    return kept


def coerce_list(value: Any, field_name: str) -> list:
    """Replace a non-list value with an empty list."""
    if value is None:
        return []
    if not isinstance(value, list):
        logger.error(f"{field_name} is not an array: {value!r}")
        return []
    return value
