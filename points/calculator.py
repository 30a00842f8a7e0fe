"""Per-task point computation.

Routines earn partial credit linearly up to their target and keep earning
past it until ``max``; non-routines are all-or-nothing. The streak bonus only
ever multiplies a routine's base points.

``reward`` is added whatever the completion ratio. This is intended: a fixed
incentive is paid independently of progress, not only on completion.
"""

from __future__ import annotations

import logging

from points.errors import InvalidTarget
from points.models import ComputedTaskPoints, TaskSnapshot

_LOGGER = logging.getLogger(__name__)


def _check_target(task: TaskSnapshot) -> None:
    if task.target <= 0:
        raise InvalidTarget(task.title, task.target)


def effective_base(task: TaskSnapshot) -> float:
    """Base points scaled by ``scalar`` and, for routines, the bonus."""
    bonus = max(0.0, task.bonus) if task.is_routine else 0.0
    return task.base_points * task.scalar * (1 + bonus)


def completion_ratio(task: TaskSnapshot) -> float:
    """Fraction of the base a task has earned; routines may exceed 1.0."""
    _check_target(task)
    completed = max(0, task.completed)

    if not task.is_routine:
        return 1.0 if completed >= task.target else 0.0

    if completed < task.target:
        return completed / task.target
    capped = min(completed, task.max)
    return min(capped / task.target, task.max / task.target)


def compute_points(task: TaskSnapshot) -> float:
    """Points currently earned by *task*. Raises InvalidTarget if target <= 0."""
    return score_task(task).earned_points


def score_task(task: TaskSnapshot) -> ComputedTaskPoints:
    ratio = completion_ratio(task)
    base = effective_base(task)
    earned = base * ratio + task.reward
    _LOGGER.debug(
        "Scored %r: base=%s ratio=%s reward=%s earned=%s",
        task.title, base, ratio, task.reward, earned,
    )
    return ComputedTaskPoints(
        earned_points=earned,
        title=task.title,
        effective_base=base,
        ratio=ratio,
    )
