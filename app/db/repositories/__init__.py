"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.subject import SubjectRepository
from app.db.repositories.cycle import CycleAssignmentRepository, CycleRepository
from app.db.repositories.user_settings import UserSettingsRepository

__all__ = [
    "UserRepository",
    "SubjectRepository",
    "CycleRepository",
    "CycleAssignmentRepository",
    "UserSettingsRepository",
]
