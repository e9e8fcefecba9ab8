"""Integration tests for subject management and user settings."""

import pytest
from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from app.models.cycle import CycleAssignment
from app.models.user_settings import UserSettings
from app.planner.allocation import DifficultyLevel, WeightLevel
from app.schemas.subject import SubjectCreate
from app.services.cycle_service import CycleService
from app.services.subject_service import SubjectService
from app.services.user_settings_service import UserSettingsService


def _failing_commit(*args, **kwargs):
    raise OperationalError("COMMIT", {}, Exception("store unavailable"))


@pytest.fixture
def service(session):
    return SubjectService(session)


class TestSubjectCreate:
    def test_create_and_list_by_name(self, service, user):
        service.create_subject(user.id, SubjectCreate(name="Química", difficulty="hard", weight="high"))
        service.create_subject(user.id, SubjectCreate(name="Biologia", difficulty="easy", weight="low"))

        subjects = service.list_subjects(user.id)
        assert [s.name for s in subjects] == ["Biologia", "Química"]
        assert subjects[1].difficulty == DifficultyLevel.HARD
        assert subjects[1].weight == WeightLevel.HIGH

    def test_name_is_stripped(self, service, user):
        subject = service.create_subject(user.id, SubjectCreate(name="  História  ", difficulty="medium",
                                                                weight="medium"))
        assert subject.name == "História"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            SubjectCreate(name=name, difficulty="medium", weight="low")

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            SubjectCreate(name="Física", difficulty="impossible", weight="low")

    def test_subjects_are_scoped_per_user(self, service, user, other_user):
        service.create_subject(user.id, SubjectCreate(name="Física", difficulty="hard", weight="high"))
        assert service.list_subjects(other_user.id) == []
        assert len(service.list_subjects(user.id)) == 1

    def test_store_failure_adds_nothing(self, session, service, user, monkeypatch):
        monkeypatch.setattr(session, "commit", _failing_commit)
        with pytest.raises(HTTPException) as exc_info:
            service.create_subject(user.id, SubjectCreate(name="Física", difficulty="hard", weight="high"))
        assert exc_info.value.status_code == 503

        monkeypatch.undo()
        assert service.list_subjects(user.id) == []


class TestSubjectDelete:
    def test_delete(self, service, user):
        subject = service.create_subject(user.id, SubjectCreate(name="Física", difficulty="hard", weight="high"))
        service.delete_subject(user.id, subject.id)
        assert service.list_subjects(user.id) == []

    def test_delete_removes_assignments(self, session, service, user):
        keep = service.create_subject(user.id, SubjectCreate(name="Artes", difficulty="easy", weight="low"))
        drop = service.create_subject(user.id, SubjectCreate(name="Física", difficulty="hard", weight="high"))
        CycleService(session).create_cycle(user.id, 10)

        service.delete_subject(user.id, drop.id)

        remaining = session.exec(select(CycleAssignment)).all()
        assert [a.subject_id for a in remaining] == [keep.id]

    def test_delete_other_users_subject(self, service, user, other_user):
        subject = service.create_subject(user.id, SubjectCreate(name="Física", difficulty="hard", weight="high"))
        with pytest.raises(HTTPException) as exc_info:
            service.delete_subject(other_user.id, subject.id)
        assert exc_info.value.status_code == 404

    def test_delete_missing(self, service, user):
        with pytest.raises(HTTPException) as exc_info:
            service.delete_subject(user.id, 12345)
        assert exc_info.value.status_code == 404

    def test_store_failure_keeps_subject(self, session, service, user, monkeypatch):
        subject = service.create_subject(user.id, SubjectCreate(name="Física", difficulty="hard", weight="high"))
        monkeypatch.setattr(session, "commit", _failing_commit)
        with pytest.raises(HTTPException) as exc_info:
            service.delete_subject(user.id, subject.id)
        assert exc_info.value.status_code == 503

        monkeypatch.undo()
        assert [s.id for s in service.list_subjects(user.id)] == [subject.id]


class TestUserSettings:
    def test_defaults_created_on_first_access(self, session, user):
        prefs = UserSettingsService(session).get_settings(user.id)
        assert prefs.ask_hours is True
        assert prefs.weekly_hours is None
        assert prefs.current_cycle_id is None

    def test_get_or_create_is_idempotent(self, session, user):
        service = UserSettingsService(session)
        service.get_settings(user.id)
        service.get_settings(user.id)
        assert len(session.exec(select(UserSettings)).all()) == 1
