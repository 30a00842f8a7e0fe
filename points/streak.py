"""Streak bonus resolution and streak counting."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import Iterable

from points.config import EngineConfig
from points.models import DayRecord, TaskSnapshot

_LOGGER = logging.getLogger(__name__)

STREAK_STEP = 0.1  # per consecutive qualifying day after the first
STREAK_CAP = 1.0  # also the ceiling for any configured cap
TARGET_MET_BONUS = 0.2
OVER_TARGET_BONUS = 0.1


def resolve_bonus(
    prior_consecutive_days: int,
    step: float = STREAK_STEP,
    cap: float = STREAK_CAP,
) -> float:
    """Bonus fraction in [0, min(cap, 1)] for a run of consecutive qualifying days.

    A single qualifying day earns nothing; each further day adds *step*.
    Garbage input (negative, non-numeric, infinite) is treated as 0.
    """
    try:
        days = int(prior_consecutive_days)
    except (TypeError, ValueError, OverflowError):
        days = 0
    if days <= 1:
        return 0.0
    ceiling = max(0.0, min(cap, STREAK_CAP))
    return min(ceiling, max(0.0, (days - 1) * step))


def completion_bonus(task: TaskSnapshot) -> float:
    """Extra bonus for routines that reach, and go past, their target."""
    if not task.is_routine or task.target <= 0 or task.completed < task.target:
        return 0.0
    bonus = TARGET_MET_BONUS
    if task.completed > task.target and task.max > task.target:
        extra = min(task.completed, task.max) - task.target
        bonus += extra / (task.max - task.target) * OVER_TARGET_BONUS
    return bonus


def resolve_task_bonus(
    task: TaskSnapshot,
    prior_consecutive_days: int,
    config: EngineConfig | None = None,
) -> float:
    """Total bonus for one task; non-routines never get one."""
    if not task.is_routine:
        return 0.0
    if config is None:
        config = EngineConfig()
    bonus = resolve_bonus(prior_consecutive_days, config.streak_step, config.streak_cap)
    if config.completion_bonus:
        bonus += completion_bonus(task)
    return bonus


def apply_bonus(
    tasks: Iterable[TaskSnapshot],
    prior_consecutive_days: int,
    config: EngineConfig | None = None,
) -> tuple[TaskSnapshot, ...]:
    """Return copies of *tasks* with the resolved bonus set on routines."""
    result = []
    for task in tasks:
        if task.is_routine:
            task = replace(task, bonus=resolve_task_bonus(task, prior_consecutive_days, config))
        result.append(task)
    return tuple(result)


def count_streak(records: Iterable[DayRecord], through: str) -> int:
    """Count consecutive calendar days ending at *through* that met their target.

    A day with no record, or whose record missed its target, ends the run.
    """
    try:
        cursor = date.fromisoformat(through)
    except (TypeError, ValueError):
        _LOGGER.debug("Cannot count streak through %r", through)
        return 0

    met = {r.date for r in records if r.met_target}
    streak = 0
    while cursor.isoformat() in met:
        streak += 1
        cursor -= timedelta(days=1)
    return streak
