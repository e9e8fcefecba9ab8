"""
Study cycle API schemas.
"""

import datetime
import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.cycle import CycleStatus
from app.schemas.subject import SubjectResponse
from app.schemas.user_settings import UserSettingsResponse


class CycleCreate(BaseModel):
    """Schema for starting a new cycle from a weekly budget."""

    weekly_hours: float = Field(..., ge=1, le=168, description="Hours available per week (1-168)")
    name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def blank_name_to_default(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class HoursAdjustment(BaseModel):
    """Schema for adding or removing completed hours (usually +1 / -1)."""

    delta: float = Field(..., description="Hours to add (negative to remove)")

    @field_validator("delta")
    @classmethod
    def delta_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("delta must be a finite number")
        return value


class CycleResponse(BaseModel):
    """Schema for a cycle without its assignments."""

    id: int
    name: str
    weekly_hours: float
    status: CycleStatus
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class AssignmentResponse(BaseModel):
    """Per-subject target and progress."""

    id: int
    cycle_id: int
    subject_id: int
    hours_assigned: float
    hours_completed: float
    progress: float = Field(..., ge=0, le=100, description="Completion percentage, capped at 100")
    is_complete: bool


class AssignmentDetailResponse(AssignmentResponse):
    subject: SubjectResponse


class ActiveCycleResponse(CycleResponse):
    """Active cycle with assignments and derived progress."""

    assignments: list[AssignmentDetailResponse]
    total_hours_assigned: float
    total_hours_completed: float
    overall_progress: float


class CycleCreatedResponse(BaseModel):
    message: str
    cycle: ActiveCycleResponse


class DashboardResponse(BaseModel):
    """Everything the dashboard needs in one call."""

    settings: UserSettingsResponse
    subject_count: int
    needs_hours_setup: bool
    active_cycle: Optional[ActiveCycleResponse]
