"""
Study cycle and assignment models.

A cycle is one weekly plan with a total hour budget.  Each cycle owns one
assignment per subject that existed when the cycle was created; the
assignment pairs the target (``hours_assigned``) with the actual
(``hours_completed``).
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class CycleStatus(str, Enum):
    """Lifecycle of a cycle.

    ``paused`` is reserved; no operation transitions into or out of it.
    """
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class Cycle(SQLModel, table=True):
    """A weekly study cycle."""

    __tablename__ = "cycles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(default="Ciclo atual", max_length=255)

    weekly_hours: float = Field(nullable=False, ge=1, le=168)
    status: CycleStatus = Field(default=CycleStatus.ACTIVE, nullable=False, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class CycleAssignment(SQLModel, table=True):
    """Per-subject target and progress inside a cycle.

    ``hours_assigned`` is computed once at cycle creation.
    ``hours_completed`` is floored at 0 but may exceed ``hours_assigned``.
    """

    __tablename__ = "cycle_assignments"

    id: Optional[int] = Field(default=None, primary_key=True)
    cycle_id: int = Field(foreign_key="cycles.id", nullable=False, index=True)
    subject_id: int = Field(foreign_key="subjects.id", nullable=False, index=True)

    hours_assigned: float = Field(nullable=False)
    hours_completed: float = Field(default=0.0, nullable=False, ge=0)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
