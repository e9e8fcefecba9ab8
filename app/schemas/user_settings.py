"""
User settings API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel


class UserSettingsResponse(BaseModel):
    """Schema for the user's study preferences."""

    ask_hours: bool
    weekly_hours: Optional[float]
    current_cycle_id: Optional[int]
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
