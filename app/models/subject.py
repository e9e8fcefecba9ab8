"""
Subject database model.

A subject ("matéria") is a topic the user studies.  Difficulty and weight
drive the hour allocation and are fixed once the subject is created.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.planner.allocation import DifficultyLevel, WeightLevel


class Subject(SQLModel, table=True):
    """A user's study subject."""

    __tablename__ = "subjects"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)

    difficulty: DifficultyLevel = Field(nullable=False)
    weight: WeightLevel = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
