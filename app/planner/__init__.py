"""Study planner core: hour allocation and progress metrics."""

from app.planner.allocation import (
    DifficultyLevel,
    InvalidAllocationInput,
    WeightLevel,
    allocate_cycle,
    allocate_hours,
)
from app.planner.progress import overall_progress

__all__ = [
    "DifficultyLevel",
    "InvalidAllocationInput",
    "WeightLevel",
    "allocate_cycle",
    "allocate_hours",
    "overall_progress",
]
