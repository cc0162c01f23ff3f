from datetime import datetime
from typing import Literal
from uuid import UUID

from collabhub.schemas.common import CamelModel
from collabhub.schemas.project import ProjectResponse

InviteStatus = Literal["pending", "accepted", "declined"]


class InviteCreate(CamelModel):
    sender_id: UUID
    receiver_id: UUID
    project_id: UUID
    role: str | None = None


class InviteRespond(CamelModel):
    status: InviteStatus


class InviteResponse(CamelModel):
    id: UUID
    sender_id: UUID
    receiver_id: UUID
    project_id: UUID
    role: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime


class SenderSummary(CamelModel):
    id: UUID
    name: str
    email: str
    github_url: str | None = None


class ReceivedInviteResponse(InviteResponse):
    project: ProjectResponse
    sender: SenderSummary
