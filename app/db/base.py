"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.subject import Subject  # noqa: F401
from app.models.cycle import Cycle, CycleAssignment  # noqa: F401
from app.models.user_settings import UserSettings  # noqa: F401
