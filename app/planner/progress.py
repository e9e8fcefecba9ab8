"""
Cycle progress metrics.

Everything here is derived from assignment rows and never stored.

Overall progress is the **average of per-subject completion ratios**, each
capped at 1, not the ratio of hour sums.  A subject that overshoots its
target therefore cannot compensate for one that is behind: the cycle reads
100 % only when every subject individually reached its assigned hours.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence


class HasHours(Protocol):
    hours_assigned: float
    hours_completed: float


def assignment_ratio(hours_assigned: float, hours_completed: float) -> float:
    """Completion ratio in [0, 1]; 0 when nothing was assigned."""
    if hours_assigned <= 0:
        return 0.0
    return min(hours_completed / hours_assigned, 1.0)


def is_complete(hours_assigned: float, hours_completed: float) -> bool:
    return hours_completed >= hours_assigned


def overall_progress(assignments: Sequence[HasHours]) -> float:
    """Average completion ratio across assignments, as a percentage (0–100)."""
    if not assignments:
        return 0.0
    total = sum(assignment_ratio(a.hours_assigned, a.hours_completed) for a in assignments)
    return total / len(assignments) * 100


def total_hours_assigned(assignments: Iterable[HasHours]) -> float:
    return sum(a.hours_assigned for a in assignments)


def total_hours_completed(assignments: Iterable[HasHours]) -> float:
    return sum(a.hours_completed for a in assignments)


def needs_hours_setup(ask_hours: bool, subject_count: int, has_active_cycle: bool) -> bool:
    """Whether the client should prompt for a weekly budget."""
    return ask_hours and subject_count > 0 and not has_active_cycle
