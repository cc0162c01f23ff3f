from datetime import datetime
from uuid import UUID

from collabhub.schemas.common import CamelModel


class ProjectResponse(CamelModel):
    id: UUID
    creator_id: UUID
    title: str
    description: str | None = None
    github_url: str | None = None
    created_at: datetime
    updated_at: datetime


class CreatorSummary(CamelModel):
    id: UUID
    name: str
    email: str


class ProjectWithCreatorResponse(ProjectResponse):
    creator: CreatorSummary
