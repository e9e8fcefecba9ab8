"""
Weekly hour allocation.

Each subject is characterised by **2 categorical tags**, and a fixed factor
table maps each tag to a multiplier:

* **DifficultyLevel** (very_easy … very_hard): harder subjects get more time.
* **WeightLevel** (low / medium / high): how much the subject matters.

The subject factor is the product of both multipliers.  The weekly budget
is split proportionally::

    subject_factor = DIFFICULTY_FACTORS[d] × WEIGHT_FACTORS[w]
    raw_hours      = subject_factor / Σ subject_factor(all) × total_hours
    hours          = round_half_hour(raw_hours)

Every subject rounds independently to the nearest half-hour, so the sum of
allocations drifts from ``total_hours`` by at most ``0.5 × N``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Sequence

# ======================================================================
# Enums
# ======================================================================


class DifficultyLevel(str, Enum):
    """How hard the subject is for the user."""
    VERY_EASY = "very_easy"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    VERY_HARD = "very_hard"


class WeightLevel(str, Enum):
    """How important the subject is (e.g. exam weight)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ======================================================================
# Factor tables
# ======================================================================

DIFFICULTY_FACTORS: dict[DifficultyLevel, float] = {
    DifficultyLevel.VERY_EASY: 0.8,
    DifficultyLevel.EASY: 0.9,
    DifficultyLevel.MEDIUM: 1.0,
    DifficultyLevel.HARD: 1.2,
    DifficultyLevel.VERY_HARD: 1.4,
}

WEIGHT_FACTORS: dict[WeightLevel, float] = {
    WeightLevel.LOW: 1.0,
    WeightLevel.MEDIUM: 1.5,
    WeightLevel.HIGH: 2.0,
}

SubjectTags = tuple[DifficultyLevel, WeightLevel]


class InvalidAllocationInput(ValueError):
    """Raised when the allocation cannot be computed (no subjects, bad budget)."""


# ======================================================================
# Formula
# ======================================================================


def subject_factor(difficulty: DifficultyLevel, weight: WeightLevel) -> float:
    return DIFFICULTY_FACTORS[DifficultyLevel(difficulty)] * WEIGHT_FACTORS[WeightLevel(weight)]


def total_factor(all_subjects: Sequence[SubjectTags]) -> float:
    """Sum of subject factors; rejects an empty subject list."""
    if not all_subjects:
        raise InvalidAllocationInput("Cannot allocate hours without at least one subject")
    total = sum(subject_factor(d, w) for d, w in all_subjects)
    if total <= 0:
        raise InvalidAllocationInput("Total subject factor must be positive")
    return total


def round_half_hour(hours: float) -> float:
    """Round to the nearest 0.5h, halves away from zero (2.25 → 2.5)."""
    doubled = Decimal(repr(hours)) * 2
    return float(doubled.quantize(Decimal("1"), rounding=ROUND_HALF_UP) / 2)


def raw_hours(difficulty: DifficultyLevel, weight: WeightLevel, total_hours: float,
              all_subjects: Sequence[SubjectTags], ) -> float:
    """Proportional share of ``total_hours`` before rounding."""
    _check_budget(total_hours)
    return subject_factor(difficulty, weight) / total_factor(all_subjects) * total_hours


def allocate_hours(difficulty: DifficultyLevel, weight: WeightLevel, total_hours: float,
                   all_subjects: Sequence[SubjectTags], ) -> float:
    """Hours assigned to one subject, rounded to the nearest half-hour.

    ``all_subjects`` must include the subject itself.

    Raises:
        InvalidAllocationInput: empty ``all_subjects`` or non-positive budget
    """
    return round_half_hour(raw_hours(difficulty, weight, total_hours, all_subjects))


def allocate_cycle(total_hours: float, all_subjects: Sequence[SubjectTags]) -> list[float]:
    """Allocate the whole budget in one pass.

    The factor sum is computed once over the snapshot ``all_subjects`` and
    the result is aligned with the input order.
    """
    _check_budget(total_hours)
    total = total_factor(all_subjects)
    return [round_half_hour(subject_factor(d, w) / total * total_hours) for d, w in all_subjects]


def _check_budget(total_hours: float) -> None:
    if total_hours <= 0:
        raise InvalidAllocationInput(f"Weekly hours must be positive, got {total_hours}")
