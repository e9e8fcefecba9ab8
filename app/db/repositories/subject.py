"""Subject repository."""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.cycle import CycleAssignment
from app.models.subject import Subject


class SubjectRepository:
    """Repository for Subject database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, subject: Subject) -> Subject:
        self.session.add(subject)
        self.session.commit()
        self.session.refresh(subject)
        return subject

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        return self.session.get(Subject, subject_id)

    def get_all_by_user(self, user_id: int) -> list[Subject]:
        """All of the user's subjects, ordered by name then id."""
        statement = select(Subject).where(Subject.user_id == user_id).order_by(Subject.name, Subject.id)
        return list(self.session.exec(statement).all())

    def count_by_user(self, user_id: int) -> int:
        statement = select(func.count()).select_from(Subject).where(Subject.user_id == user_id)
        return self.session.exec(statement).one()

    def delete(self, subject_id: int) -> bool:
        """Delete a subject together with its cycle assignments."""
        subject = self.get_by_id(subject_id)
        if not subject:
            return False
        assignments = self.session.exec(
            select(CycleAssignment).where(CycleAssignment.subject_id == subject_id)
        ).all()
        for assignment in assignments:
            self.session.delete(assignment)
        self.session.delete(subject)
        self.session.commit()
        return True
