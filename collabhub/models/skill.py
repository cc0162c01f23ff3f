import uuid

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.models.base import Base, TimestampMixin, UUIDMixin


class Skill(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "skills"

    # Case-sensitive: "Go" and "go" are different skills
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)

    users: Mapped[list["UserSkill"]] = relationship("UserSkill", back_populates="skill")

    def __repr__(self) -> str:
        return f"<Skill {self.name}>"


class UserSkill(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "user_skills"
    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_user_skill"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    skill_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    level: Mapped[str] = mapped_column(String(50), nullable=False, default="Beginner")

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="skills")  # noqa: F821
    skill: Mapped[Skill] = relationship("Skill", back_populates="users")

    def __repr__(self) -> str:
        return f"<UserSkill user={self.user_id} skill={self.skill_id} level={self.level}>"
