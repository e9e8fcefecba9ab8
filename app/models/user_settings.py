"""
User study preferences.

One row per user.  Tracks whether the client still has to ask for a
weekly budget, the last budget used and the current active cycle.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class UserSettings(SQLModel, table=True):
    """User's study preferences.

    Created with defaults on first access by
    :meth:`UserSettingsRepository.get_or_create`.
    """

    __tablename__ = "user_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    # Prompt for a weekly budget on the next visit
    ask_hours: bool = Field(default=True)

    # Last budget submitted
    weekly_hours: Optional[float] = Field(default=None)

    current_cycle_id: Optional[int] = Field(default=None, foreign_key="cycles.id")

    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
