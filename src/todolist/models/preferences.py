"""Preferences model for TodoList."""
from typing import Optional
from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Preferences(Base):
    """Model representing a user's display preferences (one row per user)."""

    __tablename__ = "preferences"

    __table_args__ = (
        CheckConstraint(
            "theme_mode IN ('light', 'dark', 'system')",
            name="ck_preferences_theme_mode"
        ),
    )

    # Primary key doubles as the owning user
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False
    )

    # Fields
    color: Mapped[int] = mapped_column(Integer, nullable=False)
    background_image_path: Mapped[Optional[str]] = mapped_column(String(1024))
    theme_mode: Mapped[str] = mapped_column(String(10), default="system", nullable=False)

    # Relationships
    user = relationship(
        "User",
        back_populates="preferences"
    )

    def __repr__(self) -> str:
        return f"<Preferences(user_id={self.user_id}, theme_mode='{self.theme_mode}')>"
