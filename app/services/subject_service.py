"""
Subject service.

Registers and removes the subjects a user studies.  Subjects added after a
cycle was created only join the plan at the next cycle.
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.subject import SubjectRepository
from app.models.subject import Subject
from app.schemas.subject import SubjectCreate, SubjectResponse

logger = logging.getLogger(__name__)


class SubjectService:
    """Service for subject CRUD."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = SubjectRepository(session)

    def create_subject(self, user_id: int, data: SubjectCreate) -> SubjectResponse:
        subject = Subject(user_id=user_id, name=data.name, difficulty=data.difficulty, weight=data.weight)
        try:
            subject = self.repository.create(subject)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Error adding subject for user %s", user_id)
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                                detail="Could not add the subject.", )
        logger.info("User %s added subject %s (%s/%s)", user_id, subject.id, subject.difficulty.value,
                    subject.weight.value)
        return SubjectResponse.model_validate(subject)

    def list_subjects(self, user_id: int) -> list[SubjectResponse]:
        return [SubjectResponse.model_validate(s) for s in self.repository.get_all_by_user(user_id)]

    def delete_subject(self, user_id: int, subject_id: int) -> None:
        subject = self.repository.get_by_id(subject_id)
        if not subject or subject.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found", )
        try:
            self.repository.delete(subject_id)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Error deleting subject %s", subject_id)
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                                detail="Could not remove the subject.", )
        logger.info("User %s removed subject %s", user_id, subject_id)
