import uuid

from sqlalchemy import Column, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.models.base import Base, TimestampMixin, UUIDMixin

# Composite primary key: a user is in a project's collaborator set at most once
project_collaborators = Table(
    "project_collaborators",
    Base.metadata,
    Column("project_id", Uuid, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Project(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "projects"

    creator_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    github_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # Relationships
    creator: Mapped["User"] = relationship("User", back_populates="projects")  # noqa: F821
    collaborators: Mapped[list["User"]] = relationship(  # noqa: F821
        "User", secondary=project_collaborators, back_populates="collaborated_projects"
    )
    invites: Mapped[list["Invite"]] = relationship(  # noqa: F821
        "Invite", back_populates="project", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Project {self.title}>"
