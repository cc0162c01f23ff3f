from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.database import get_db
from collabhub.services.invite_service import InviteService
from collabhub.services.user_service import UserService

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_user_service(db: DbSession) -> UserService:
    return UserService(db)


def get_invite_service(db: DbSession) -> InviteService:
    return InviteService(db)


Users = Annotated[UserService, Depends(get_user_service)]
Invites = Annotated[InviteService, Depends(get_invite_service)]
