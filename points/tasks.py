"""Task validation and completion lifecycle."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable

from points.config import EngineConfig
from points.models import TaskSnapshot


# ── Validation ────────────────────────────────────────────────


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_task(task: dict[str, Any]) -> list[str]:
    """Validate task data and return list of errors (empty if valid)."""
    errors = []
    if not str(task.get("title", "")).strip():
        errors.append("Missing required field: title")

    target = task.get("target")
    if target is None:
        errors.append("Missing required field: target")
    elif not isinstance(target, int) or isinstance(target, bool) or target < 1:
        errors.append("target must be integer >= 1")

    if "max" in task:
        if not isinstance(task["max"], int) or isinstance(task["max"], bool):
            errors.append("max must be integer")
        elif isinstance(target, int) and task["max"] < target:
            errors.append("max must be >= target")

    if "completed" in task:
        if not isinstance(task["completed"], int) or task["completed"] < 0:
            errors.append("completed must be integer >= 0")

    for key in ("basePoints", "reward", "bonus"):
        if key in task and (not _is_number(task[key]) or task[key] < 0):
            errors.append(f"{key} must be a non-negative number")

    if "scalar" in task and (not _is_number(task["scalar"]) or task["scalar"] <= 0):
        errors.append("scalar must be a positive number")

    return errors


# ── Lifecycle ─────────────────────────────────────────────────


def new_task(
    title: str,
    base_points: float | None = None,
    target: int | None = None,
    config: EngineConfig | None = None,
) -> TaskSnapshot:
    """A fresh one-off task.

    With an explicit target, max sits two completions above it; otherwise
    target and max both come from the configured defaults.
    """
    if config is None:
        config = EngineConfig()
    if base_points is None:
        base_points = config.default_task_points
    if target is None:
        target = config.default_task_target
        max_ = max(target, config.default_task_max)
    else:
        max_ = target + 2
    return TaskSnapshot(
        title=title,
        base_points=base_points,
        target=target,
        completed=0,
        max=max_,
    )


def increment_completion(task: TaskSnapshot) -> TaskSnapshot:
    """One more completion, unless the task is already at max."""
    if task.completed >= task.max:
        return task
    return replace(task, completed=task.completed + 1)


def decrement_completion(task: TaskSnapshot) -> TaskSnapshot:
    if task.completed <= 0:
        return task
    return replace(task, completed=task.completed - 1)


def reset_completions(tasks: Iterable[TaskSnapshot]) -> tuple[TaskSnapshot, ...]:
    return tuple(replace(t, completed=0) for t in tasks)


def duplicate_task(task: TaskSnapshot) -> TaskSnapshot:
    """Copy of *task* with no completions and no resolved bonus."""
    return replace(task, completed=0, bonus=0.0)
