"""Skill vocabulary reconciliation.

Skills are a shared vocabulary: a name is created the first time any user
lists it and reused afterwards. Names match exactly (case-sensitive).
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.config import get_settings
from collabhub.models.skill import Skill, UserSkill
from collabhub.schemas.skill import SkillEntry

logger = logging.getLogger(__name__)


def dedupe_skill_entries(entries: Iterable[SkillEntry], default_level: str | None = None) -> dict[str, str]:
    """Collapse entries to one level per trimmed skill name.

    The last occurrence of a name wins; names keep the position of their first
    occurrence. Blank names are skipped and a missing or empty level falls back
    to ``default_level``.
    """
    if default_level is None:
        default_level = get_settings().default_skill_level

    levels: dict[str, str] = {}
    for entry in entries:
        name = entry.skill_id.strip()
        if not name:
            continue
        levels[name] = entry.level or default_level
    return levels


class SkillService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, names: list[str]) -> dict[str, Skill]:
        """Find-or-create every name with one lookup and one batched insert."""
        if not names:
            return {}

        result = await self.db.execute(select(Skill).where(Skill.name.in_(names)))
        skills = {skill.name: skill for skill in result.scalars().all()}

        missing = [name for name in names if name not in skills]
        if missing:
            created = [Skill(name=name) for name in missing]
            self.db.add_all(created)
            await self.db.flush()
            skills.update((skill.name, skill) for skill in created)
            logger.info(f"Created {len(created)} new skills: {', '.join(missing)}")

        return skills

    async def build_user_skills(self, user_id: uuid.UUID, entries: Iterable[SkillEntry]) -> list[UserSkill]:
        """Resolve entries into unsaved UserSkill links for ``user_id``."""
        levels = dedupe_skill_entries(entries)
        skills = await self.resolve(list(levels))
        return [
            UserSkill(user_id=user_id, skill_id=skills[name].id, level=level)
            for name, level in levels.items()
        ]
