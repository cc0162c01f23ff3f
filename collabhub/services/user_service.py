"""User profile data access: listing, lookup, creation and upsert."""

import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from collabhub.exceptions import EmailConflictError, UserNotFoundError
from collabhub.models.project import Project
from collabhub.models.skill import Skill, UserSkill
from collabhub.models.user import User
from collabhub.schemas.user import UserCreate, UserProfileUpdate
from collabhub.services.skill_service import SkillService
from collabhub.utils.ids import page_window

logger = logging.getLogger(__name__)


def parse_stack(stack: str | None) -> list[str]:
    """Split a comma-separated skill filter into trimmed, non-blank names."""
    if not stack:
        return []
    return [name.strip() for name in stack.split(",") if name.strip()]


def _with_skills() -> LoaderOption:
    return selectinload(User.skills).selectinload(UserSkill.skill)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.skills = SkillService(db)

    async def list_users(
        self,
        stack: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> list[User]:
        """List users with their skills and owned projects.

        ``stack`` filters to users holding *any* of the listed skills. Paging
        only applies when ``limit`` is a positive integer.
        """
        query = (
            select(User)
            .options(_with_skills(), selectinload(User.projects))
            .order_by(User.created_at, User.id)
        )

        names = parse_stack(stack)
        if names:
            query = query.where(User.skills.any(UserSkill.skill.has(Skill.name.in_(names))))

        window = page_window(page, limit)
        if window is not None:
            offset, size = window
            query = query.offset(offset).limit(size)

        result = await self.db.execute(query)
        users = list(result.scalars().all())
        logger.info(f"Users found: {len(users)}")
        return users

    async def _find(
        self,
        *,
        firebase_uid: str | None = None,
        user_id: uuid.UUID | None = None,
        options: tuple[LoaderOption, ...] = (),
    ) -> User | None:
        if firebase_uid is not None:
            condition = User.firebase_uid == firebase_uid
        elif user_id is not None:
            condition = User.id == user_id
        else:
            return None
        result = await self.db.execute(
            select(User).where(condition).options(*options).execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_firebase_uid(self, firebase_uid: str) -> User:
        user = await self._find(
            firebase_uid=firebase_uid, options=(_with_skills(), selectinload(User.projects))
        )
        if user is None:
            raise UserNotFoundError()
        return user

    async def create_user(self, payload: UserCreate) -> User:
        """Create a user and link its skills.

        Raises EmailConflictError, before any write, when the email belongs to
        a different external identifier. ``payload.projects`` is discarded.
        """
        result = await self.db.execute(select(User).where(User.email == payload.email))
        existing = result.scalar_one_or_none()
        if existing is not None and existing.firebase_uid != payload.firebase_uid:
            raise EmailConflictError()

        user = User(**payload.model_dump(exclude={"skills", "projects"}))
        self.db.add(user)
        await self.db.flush()

        self.db.add_all(await self.skills.build_user_skills(user.id, payload.skills))
        await self.db.flush()
        await self.db.commit()

        logger.info(f"Created user {user.firebase_uid}")
        return user

    async def upsert_user(self, firebase_uid: str, payload: UserProfileUpdate) -> User:
        """Update the user keyed by ``firebase_uid``, or create it.

        The skill set is replaced wholesale: existing links are deleted and the
        submitted ones recreated.
        """
        fields = payload.model_dump(exclude_unset=True, exclude={"skills", "featured_projects"})
        fields["featured_projects"] = payload.featured_projects

        user = await self._find(firebase_uid=firebase_uid)
        if user is None:
            user = User(firebase_uid=firebase_uid, **fields)
            self.db.add(user)
            await self.db.flush()
            logger.info(f"Creating user {firebase_uid} from profile update")
        else:
            for key, value in fields.items():
                setattr(user, key, value)
            await self.db.execute(delete(UserSkill).where(UserSkill.user_id == user.id))

        self.db.add_all(await self.skills.build_user_skills(user.id, payload.skills))
        await self.db.flush()
        await self.db.commit()

        logger.info(f"Saved profile for user {firebase_uid}")
        return await self._find(user_id=user.id, options=(_with_skills(),))

    async def get_owned_projects(
        self, *, firebase_uid: str | None = None, user_id: uuid.UUID | None = None
    ) -> list[Project]:
        user = await self._find(
            firebase_uid=firebase_uid, user_id=user_id, options=(selectinload(User.projects),)
        )
        if user is None:
            raise UserNotFoundError()
        return user.projects

    async def get_collaborations(
        self, *, firebase_uid: str | None = None, user_id: uuid.UUID | None = None
    ) -> list[Project]:
        """Projects the user collaborates on, each with its creator loaded."""
        user = await self._find(
            firebase_uid=firebase_uid,
            user_id=user_id,
            options=(selectinload(User.collaborated_projects).selectinload(Project.creator),),
        )
        if user is None:
            raise UserNotFoundError()
        return user.collaborated_projects
