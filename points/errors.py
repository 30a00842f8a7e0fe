"""Exceptions raised by the points engine."""

from __future__ import annotations


class PointsError(Exception):
    """Base class for engine errors."""


class InvalidTarget(PointsError, ValueError):
    """Raised when a task's completion target is not positive.

    A zero target would divide by zero; it signals a data-integrity defect in
    the caller's storage, so the task is unscoreable rather than defaulted.

    Attributes:
        title: Title of the offending task
        target: The target value that was supplied
    """

    def __init__(self, title: str, target: int) -> None:
        self.title = title
        self.target = target
        super().__init__(f"Invalid target for task {title!r}: target={target} (must be >= 1)")
