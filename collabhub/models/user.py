from typing import Any

from sqlalchemy import JSON, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.models.base import Base, TimestampMixin, UUIDMixin
from collabhub.models.project import project_collaborators


class User(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "users"

    firebase_uid: Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Links
    github_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    portfolio_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    availability: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Academic metadata
    academic_year: Mapped[str | None] = mapped_column(String(50), nullable=True)
    branch: Mapped[str | None] = mapped_column(String(255), nullable=True)

    interests: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Denormalized showcase entries, not foreign-keyed to projects
    featured_projects: Mapped[list[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), default=list, nullable=False
    )
    discord_or_contact: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    skills: Mapped[list["UserSkill"]] = relationship(  # noqa: F821
        "UserSkill", back_populates="user", cascade="all, delete-orphan"
    )
    projects: Mapped[list["Project"]] = relationship(  # noqa: F821
        "Project", back_populates="creator", cascade="all, delete-orphan"
    )
    collaborated_projects: Mapped[list["Project"]] = relationship(  # noqa: F821
        "Project", secondary=project_collaborators, back_populates="collaborators"
    )

    def __repr__(self) -> str:
        return f"<User {self.firebase_uid}>"
