import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.models.base import Base, TimestampMixin, UUIDMixin

INVITE_PENDING = "pending"
INVITE_ACCEPTED = "accepted"


class Invite(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "invites"

    sender_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    receiver_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=INVITE_PENDING, server_default=INVITE_PENDING
    )

    # Relationships
    project: Mapped["Project"] = relationship("Project", back_populates="invites")  # noqa: F821
    sender: Mapped["User"] = relationship("User", foreign_keys=[sender_id])  # noqa: F821
    receiver: Mapped["User"] = relationship("User", foreign_keys=[receiver_id])  # noqa: F821

    def __repr__(self) -> str:
        return f"<Invite project={self.project_id} receiver={self.receiver_id} status={self.status}>"
