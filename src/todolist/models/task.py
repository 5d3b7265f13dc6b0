"""Task model for TodoList."""
from sqlalchemy import String, Text, ForeignKey, Boolean, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Task(Base):
    """Model representing a task owned by a user."""

    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Foreign keys
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Fields
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    # Stored as INTEGER 0/1 by SQLite
    completed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=text("0"),
        nullable=False
    )

    # Relationships
    user = relationship(
        "User",
        back_populates="tasks"
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
