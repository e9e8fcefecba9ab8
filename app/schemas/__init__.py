"""Pydantic schemas for request/response validation."""

from app.schemas.user import Token, UserCreate, UserLogin, UserResponse
from app.schemas.subject import MessageResponse, SubjectCreate, SubjectCreatedResponse, SubjectResponse
from app.schemas.user_settings import UserSettingsResponse
from app.schemas.cycle import (
    ActiveCycleResponse,
    AssignmentDetailResponse,
    AssignmentResponse,
    CycleCreate,
    CycleCreatedResponse,
    CycleResponse,
    DashboardResponse,
    HoursAdjustment,
)

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "MessageResponse",
    "SubjectCreate",
    "SubjectCreatedResponse",
    "SubjectResponse",
    "UserSettingsResponse",
    "ActiveCycleResponse",
    "AssignmentDetailResponse",
    "AssignmentResponse",
    "CycleCreate",
    "CycleCreatedResponse",
    "CycleResponse",
    "DashboardResponse",
    "HoursAdjustment",
]
