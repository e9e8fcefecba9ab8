"""
Cycle and assignment repositories.

``add*`` methods only stage and flush so several writes can share one
transaction; the caller commits.  ``update`` commits immediately.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.cycle import Cycle, CycleAssignment, CycleStatus
from app.models.subject import Subject


class CycleRepository:
    """Repository for Cycle database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, cycle: Cycle) -> Cycle:
        """Stage a cycle and flush so ``cycle.id`` is populated."""
        self.session.add(cycle)
        self.session.flush()
        return cycle

    def get_by_id(self, cycle_id: int) -> Optional[Cycle]:
        return self.session.get(Cycle, cycle_id)

    def get_all_by_user(self, user_id: int) -> list[Cycle]:
        """Cycle history, newest first."""
        statement = (select(Cycle).where(Cycle.user_id == user_id)
                     .order_by(Cycle.created_at.desc(), Cycle.id.desc()))
        return list(self.session.exec(statement).all())

    def get_active_by_user(self, user_id: int) -> list[Cycle]:
        statement = (select(Cycle).where(Cycle.user_id == user_id, Cycle.status == CycleStatus.ACTIVE)
                     .order_by(Cycle.created_at.desc(), Cycle.id.desc()))
        return list(self.session.exec(statement).all())

    def get_active(self, user_id: int) -> Optional[Cycle]:
        """Most recent active cycle, if any."""
        active = self.get_active_by_user(user_id)
        return active[0] if active else None


class CycleAssignmentRepository:
    """Repository for CycleAssignment database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add_all(self, assignments: list[CycleAssignment]) -> list[CycleAssignment]:
        self.session.add_all(assignments)
        self.session.flush()
        return assignments

    def get_by_id(self, assignment_id: int) -> Optional[CycleAssignment]:
        return self.session.get(CycleAssignment, assignment_id)

    def get_with_subjects(self, cycle_id: int) -> list[tuple[CycleAssignment, Subject]]:
        """Assignments of a cycle joined to their subject, ordered by subject name."""
        statement = (select(CycleAssignment, Subject)
                     .join(Subject, Subject.id == CycleAssignment.subject_id)
                     .where(CycleAssignment.cycle_id == cycle_id)
                     .order_by(Subject.name, CycleAssignment.id))
        return [(a, s) for a, s in self.session.exec(statement).all()]

    def update(self, assignment: CycleAssignment) -> CycleAssignment:
        self.session.add(assignment)
        self.session.commit()
        self.session.refresh(assignment)
        return assignment
