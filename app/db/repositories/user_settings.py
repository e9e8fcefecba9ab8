"""User settings repository."""

from typing import Optional

from sqlmodel import Session, select

from app.models.user_settings import UserSettings


class UserSettingsRepository:
    """Repository for UserSettings database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int) -> Optional[UserSettings]:
        statement = select(UserSettings).where(UserSettings.user_id == user_id)
        return self.session.exec(statement).first()

    def create(self, user_settings: UserSettings) -> UserSettings:
        self.session.add(user_settings)
        self.session.commit()
        self.session.refresh(user_settings)
        return user_settings

    def add(self, user_settings: UserSettings) -> UserSettings:
        """Stage changes without committing."""
        self.session.add(user_settings)
        self.session.flush()
        return user_settings

    def get_or_create(self, user_id: int) -> UserSettings:
        """Get the user's settings, or create the default row."""
        existing = self.get_by_user(user_id)
        if existing:
            return existing
        return self.create(UserSettings(user_id=user_id))
