"""
Subject API schemas.
"""

import datetime

from pydantic import BaseModel, Field, field_validator

from app.planner.allocation import DifficultyLevel, WeightLevel


class SubjectCreate(BaseModel):
    """Schema for registering a subject."""

    name: str = Field(..., min_length=1, max_length=255, description="Subject display name")
    difficulty: DifficultyLevel = Field(..., description="How hard the subject is")
    weight: WeightLevel = Field(..., description="How important the subject is")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Subject name must not be blank")
        return value


class SubjectResponse(BaseModel):
    """Schema for subject data in API responses."""

    id: int
    name: str
    difficulty: DifficultyLevel
    weight: WeightLevel
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class SubjectCreatedResponse(BaseModel):
    message: str
    subject: SubjectResponse


class MessageResponse(BaseModel):
    """Short user-facing notification text."""

    message: str
