"""Project invitations: sending, listing received ones, and answering them."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from collabhub.exceptions import InviteNotFoundError
from collabhub.models.invite import INVITE_ACCEPTED, Invite
from collabhub.models.project import Project
from collabhub.models.user import User
from collabhub.schemas.invite import InviteCreate

logger = logging.getLogger(__name__)


class InviteService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def send_invite(self, payload: InviteCreate) -> Invite:
        # No existence or duplicate checks; foreign keys are the only guard
        invite = Invite(**payload.model_dump())
        self.db.add(invite)
        await self.db.flush()
        await self.db.commit()

        logger.info(
            f"User {invite.sender_id} invited {invite.receiver_id} to project {invite.project_id}"
        )
        return invite

    async def list_received(self, receiver_id: uuid.UUID) -> list[Invite]:
        result = await self.db.execute(
            select(Invite)
            .where(Invite.receiver_id == receiver_id)
            .options(selectinload(Invite.project), selectinload(Invite.sender))
            .order_by(Invite.created_at, Invite.id)
        )
        return list(result.scalars().all())

    async def respond(self, invite_id: uuid.UUID, status: str) -> Invite:
        """Set the invite status; accepting also adds the receiver as collaborator.

        Both writes are committed together. Status transitions are not guarded.
        """
        invite = await self.db.get(Invite, invite_id)
        if invite is None:
            raise InviteNotFoundError()

        invite.status = status

        if status == INVITE_ACCEPTED:
            result = await self.db.execute(
                select(Project)
                .where(Project.id == invite.project_id)
                .options(selectinload(Project.collaborators))
            )
            project = result.scalar_one()
            if all(member.id != invite.receiver_id for member in project.collaborators):
                receiver = await self.db.get(User, invite.receiver_id)
                project.collaborators.append(receiver)

        await self.db.flush()
        await self.db.commit()

        logger.info(f"Invite {invite.id} marked {status}")
        return invite
