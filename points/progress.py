"""Day-level aggregation of task points into a progress ratio."""

from __future__ import annotations

import logging
import math

from points.calculator import score_task
from points.errors import InvalidTarget
from points.models import ComputedDayProgress, DaySnapshot

_LOGGER = logging.getLogger(__name__)


def progress_ratio(total_points: float, target_points: float) -> float:
    """Progress toward *target_points*, clamped to [0, 1].

    A day without a positive target shows no progress rather than failing;
    freshly created days may not have one configured yet.
    """
    if target_points <= 0:
        return 0.0
    return min(1.0, max(0.0, total_points / target_points))


def aggregate(day: DaySnapshot) -> ComputedDayProgress:
    """Score every task on *day* and total them.

    Tasks with an invalid target are left out of the total and reported in
    ``unscoreable``; the rest of the day is still scored.
    """
    scored = []
    unscoreable = []
    for task in day.tasks:
        try:
            scored.append(score_task(task))
        except InvalidTarget as err:
            _LOGGER.warning("Skipping unscoreable task: %s", err)
            unscoreable.append(task.title)

    # fsum is exactly rounded, so task order cannot change the total
    total = math.fsum(s.earned_points for s in scored)
    return ComputedDayProgress(
        total_points=total,
        progress_ratio=progress_ratio(total, day.target_points),
        task_points=tuple(scored),
        unscoreable=tuple(unscoreable),
        date=day.date,
    )


def summarize_day(progress: ComputedDayProgress) -> str:
    """Build a one-line summary of a scored day."""
    pct = round(progress.progress_ratio * 100)
    lead = "Done" if progress.progress_ratio >= 1.0 else f"{pct}%"
    earners = [t for t in progress.task_points if t.earned_points > 0]
    earners.sort(key=lambda t: t.earned_points, reverse=True)
    parts = [f"{progress.total_points:g} pts"]
    if earners:
        top = [t.title or "(task)" for t in earners[:3]]
        more = "" if len(earners) <= 3 else f" (+{len(earners) - 3} more)"
        parts.append(f"from {', '.join(top)}{more}")
    if progress.bonus:
        parts.append(f"streak bonus +{round(progress.bonus * 100)}%")
    if progress.unscoreable:
        parts.append(f"{len(progress.unscoreable)} unscoreable")
    day = progress.date or "today"
    return f"[{lead}] {day}: {'; '.join(parts)}."
