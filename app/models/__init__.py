"""SQLModel database models."""

from app.models.user import User
from app.models.subject import Subject
from app.models.cycle import Cycle, CycleAssignment, CycleStatus
from app.models.user_settings import UserSettings

__all__ = [
    "User",
    "Subject",
    "Cycle",
    "CycleAssignment",
    "CycleStatus",
    "UserSettings",
]
