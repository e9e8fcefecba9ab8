"""User study-preferences service."""

from sqlmodel import Session

from app.db.repositories.user_settings import UserSettingsRepository
from app.schemas.user_settings import UserSettingsResponse


class UserSettingsService:
    """Read access to the per-user preference record."""

    def __init__(self, session: Session):
        self.repository = UserSettingsRepository(session)

    def get_settings(self, user_id: int) -> UserSettingsResponse:
        return UserSettingsResponse.model_validate(self.repository.get_or_create(user_id))
