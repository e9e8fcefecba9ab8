"""
Study cycle service.

Owns the cycle lifecycle and per-subject progress.

**Lifecycle** (per user)::

    none ──create──▶ active ──reset──▶ completed
                        ▲                  │
                        └─────create───────┘

Creating a cycle snapshots the user's subjects once, allocates the weekly
budget across them (:func:`app.planner.allocation.allocate_cycle`) and
writes the cycle, its assignments and the updated preferences in a single
transaction.  Nothing is persisted if any write fails.

Reset never deletes anything: cycles and assignments remain as history.
"""

import datetime
import logging
import math
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.cycle import CycleAssignmentRepository, CycleRepository
from app.db.repositories.subject import SubjectRepository
from app.db.repositories.user_settings import UserSettingsRepository
from app.models.cycle import Cycle, CycleAssignment, CycleStatus
from app.models.subject import Subject
from app.models.user_settings import UserSettings
from app.planner import progress
from app.planner.allocation import allocate_cycle
from app.schemas.cycle import (ActiveCycleResponse, AssignmentDetailResponse, AssignmentResponse, CycleResponse,
                               DashboardResponse, )
from app.schemas.subject import SubjectResponse
from app.schemas.user_settings import UserSettingsResponse

logger = logging.getLogger(__name__)


class CycleService:
    """Service for study cycles and hour tracking."""

    def __init__(self, session: Session):
        self.session = session
        self.cycle_repo = CycleRepository(session)
        self.assignment_repo = CycleAssignmentRepository(session)
        self.subject_repo = SubjectRepository(session)
        self.settings_repo = UserSettingsRepository(session)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create_cycle(self, user_id: int, weekly_hours: float, name: Optional[str] = None, ) -> ActiveCycleResponse:
        """Start a new active cycle from a weekly budget.

        Any cycle still active is closed as ``completed`` in the same
        transaction, so at most one cycle is active per user.
        """
        if not settings.MIN_WEEKLY_HOURS <= weekly_hours <= settings.MAX_WEEKLY_HOURS:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=(f"Weekly hours must be between {settings.MIN_WEEKLY_HOURS:g} "
                                        f"and {settings.MAX_WEEKLY_HOURS:g}"), )

        subjects = self.subject_repo.get_all_by_user(user_id)
        if not subjects:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail="Add at least one subject before creating a cycle", )

        # One snapshot for every subject's allocation
        hours = allocate_cycle(weekly_hours, [(s.difficulty, s.weight) for s in subjects])

        try:
            for previous in self.cycle_repo.get_active_by_user(user_id):
                previous.status = CycleStatus.COMPLETED
                self.session.add(previous)

            cycle_name = (name or "").strip() or settings.DEFAULT_CYCLE_NAME
            cycle = self.cycle_repo.add(Cycle(user_id=user_id, name=cycle_name,
                                              weekly_hours=weekly_hours, status=CycleStatus.ACTIVE, ))

            self.assignment_repo.add_all([
                CycleAssignment(cycle_id=cycle.id, subject_id=subject.id, hours_assigned=assigned,
                                hours_completed=0.0, )
                for subject, assigned in zip(subjects, hours)
            ])

            user_settings = self.settings_repo.get_by_user(user_id) or UserSettings(user_id=user_id)
            user_settings.ask_hours = False
            user_settings.weekly_hours = weekly_hours
            user_settings.current_cycle_id = cycle.id
            user_settings.updated_at = datetime.datetime.utcnow()
            self.settings_repo.add(user_settings)

            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Error creating cycle for user %s", user_id)
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                                detail="Could not create the cycle.", )

        self.session.refresh(cycle)
        logger.info("User %s created cycle %s: %sh across %d subjects", user_id, cycle.id, weekly_hours,
                    len(subjects))
        return self._active_cycle_response(cycle)

    def adjust_hours(self, user_id: int, assignment_id: int, delta: float) -> AssignmentResponse:
        """Add ``delta`` completed hours, flooring the result at 0.

        There is no ceiling: completed hours may exceed assigned hours.
        Assignments of completed cycles are read-only history.
        """
        assignment = self._get_owned_assignment(user_id, assignment_id)
        new_completed = assignment.hours_completed + delta
        if not math.isfinite(new_completed):
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail="Completed hours must stay a finite number", )
        assignment.hours_completed = max(0.0, new_completed)
        try:
            assignment = self.assignment_repo.update(assignment)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Error updating hours for assignment %s", assignment_id)
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                                detail="Could not update the hours.", )
        logger.debug("Assignment %s now at %sh / %sh", assignment.id, assignment.hours_completed,
                     assignment.hours_assigned)
        return self._assignment_response(assignment)

    def reset_cycle(self, user_id: int) -> None:
        """Close the active cycle (if any) and ask for a new budget.

        Safe to call with no active cycle: only the preferences change.
        """
        try:
            active = self.cycle_repo.get_active_by_user(user_id)
            for cycle in active:
                cycle.status = CycleStatus.COMPLETED
                self.session.add(cycle)

            user_settings = self.settings_repo.get_by_user(user_id) or UserSettings(user_id=user_id)
            user_settings.ask_hours = True
            user_settings.current_cycle_id = None
            user_settings.updated_at = datetime.datetime.utcnow()
            self.settings_repo.add(user_settings)

            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Error resetting cycle for user %s", user_id)
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                                detail="Could not reset the cycle.", )
        logger.info("User %s reset cycle(s) %s", user_id, [c.id for c in active] or "none")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_active_cycle(self, user_id: int) -> Optional[ActiveCycleResponse]:
        cycle = self.cycle_repo.get_active(user_id)
        if cycle is None:
            return None
        return self._active_cycle_response(cycle)

    def list_cycles(self, user_id: int) -> list[CycleResponse]:
        return [CycleResponse.model_validate(c) for c in self.cycle_repo.get_all_by_user(user_id)]

    def get_dashboard(self, user_id: int) -> DashboardResponse:
        user_settings = self.settings_repo.get_or_create(user_id)
        subject_count = self.subject_repo.count_by_user(user_id)
        active = self.get_active_cycle(user_id)
        return DashboardResponse(settings=UserSettingsResponse.model_validate(user_settings),
                                 subject_count=subject_count,
                                 needs_hours_setup=progress.needs_hours_setup(user_settings.ask_hours, subject_count,
                                                                              active is not None),
                                 active_cycle=active, )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_assignment(self, user_id: int, assignment_id: int) -> CycleAssignment:
        assignment = self.assignment_repo.get_by_id(assignment_id)
        cycle = self.cycle_repo.get_by_id(assignment.cycle_id) if assignment else None
        if not assignment or not cycle or cycle.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assignment not found", )
        if cycle.status != CycleStatus.ACTIVE:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Cycle is no longer active", )
        return assignment

    def _active_cycle_response(self, cycle: Cycle) -> ActiveCycleResponse:
        rows = self.assignment_repo.get_with_subjects(cycle.id)
        assignments = [a for a, _ in rows]
        return ActiveCycleResponse(id=cycle.id, name=cycle.name, weekly_hours=cycle.weekly_hours, status=cycle.status,
                                   created_at=cycle.created_at,
                                   assignments=[self._assignment_detail_response(a, s) for a, s in rows],
                                   total_hours_assigned=progress.total_hours_assigned(assignments),
                                   total_hours_completed=progress.total_hours_completed(assignments),
                                   overall_progress=progress.overall_progress(assignments), )

    @staticmethod
    def _assignment_response(assignment: CycleAssignment) -> AssignmentResponse:
        return AssignmentResponse(id=assignment.id, cycle_id=assignment.cycle_id, subject_id=assignment.subject_id,
                                  hours_assigned=assignment.hours_assigned,
                                  hours_completed=assignment.hours_completed,
                                  progress=progress.assignment_ratio(assignment.hours_assigned,
                                                                     assignment.hours_completed) * 100,
                                  is_complete=progress.is_complete(assignment.hours_assigned,
                                                                   assignment.hours_completed), )

    @classmethod
    def _assignment_detail_response(cls, assignment: CycleAssignment, subject: Subject, ) -> AssignmentDetailResponse:
        base = cls._assignment_response(assignment)
        return AssignmentDetailResponse(**base.model_dump(), subject=SubjectResponse.model_validate(subject))
