from collabhub.schemas.invite import (
    InviteCreate,
    InviteRespond,
    InviteResponse,
    ReceivedInviteResponse,
    SenderSummary,
)
from collabhub.schemas.project import CreatorSummary, ProjectResponse, ProjectWithCreatorResponse
from collabhub.schemas.skill import SkillEntry, SkillResponse, UserSkillResponse
from collabhub.schemas.user import (
    UserCreate,
    UserDetailResponse,
    UserProfileUpdate,
    UserResponse,
    UserWithSkillsResponse,
)

__all__ = [
    "UserCreate",
    "UserProfileUpdate",
    "UserResponse",
    "UserWithSkillsResponse",
    "UserDetailResponse",
    "SkillEntry",
    "SkillResponse",
    "UserSkillResponse",
    "ProjectResponse",
    "ProjectWithCreatorResponse",
    "CreatorSummary",
    "InviteCreate",
    "InviteRespond",
    "InviteResponse",
    "ReceivedInviteResponse",
    "SenderSummary",
]
