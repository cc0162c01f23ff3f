from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from collabhub.schemas.common import CamelModel
from collabhub.schemas.project import ProjectResponse
from collabhub.schemas.skill import SkillEntry, UserSkillResponse, coerce_list, drop_blank_skill_entries


class UserCreate(CamelModel):
    model_config = ConfigDict(extra="ignore")

    firebase_uid: str = Field(..., min_length=1, max_length=128)
    name: str
    email: str  # Use str not EmailStr to avoid extra dep
    bio: str | None = None
    github_url: str | None = None
    portfolio_url: str | None = None
    availability: str | None = None
    academic_year: str | None = None
    branch: str | None = None
    interests: str | None = None
    discord_or_contact: str | None = None
    featured_projects: list[Any] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)
    # Accepted but never written: projects cannot be set at creation time
    projects: Any = None

    @field_validator("skills", mode="before")
    @classmethod
    def drop_blank_skills(cls, v: Any) -> Any:
        return drop_blank_skill_entries(v)


class UserProfileUpdate(CamelModel):
    """Upsert payload. Absent profile fields are left untouched on update."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    bio: str | None = None
    github_url: str | None = None
    portfolio_url: str | None = None
    availability: str | None = None
    academic_year: str | None = None
    branch: str | None = None
    interests: str | None = None
    discord_or_contact: str | None = None
    featured_projects: list[Any] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)

    @field_validator("featured_projects", mode="before")
    @classmethod
    def coerce_featured_projects(cls, v: Any) -> list:
        return coerce_list(v, "featuredProjects")

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> list:
        return drop_blank_skill_entries(coerce_list(v, "skills"))


class UserResponse(CamelModel):
    id: UUID
    firebase_uid: str
    name: str
    email: str
    bio: str | None = None
    github_url: str | None = None
    portfolio_url: str | None = None
    availability: str | None = None
    academic_year: str | None = None
    branch: str | None = None
    interests: str | None = None
    featured_projects: list[Any] = Field(default_factory=list)
    discord_or_contact: str | None = None
    created_at: datetime
    updated_at: datetime


class UserWithSkillsResponse(UserResponse):
    skills: list[UserSkillResponse] = Field(default_factory=list)


class UserDetailResponse(UserWithSkillsResponse):
    projects: list[ProjectResponse] = Field(default_factory=list)
