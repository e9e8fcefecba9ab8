"""Business logic services."""

from app.services.user_service import UserService
from app.services.subject_service import SubjectService
from app.services.cycle_service import CycleService
from app.services.user_settings_service import UserSettingsService

__all__ = [
    "UserService",
    "SubjectService",
    "CycleService",
    "UserSettingsService",
]
