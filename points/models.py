"""Typed dataclasses for the points data model.

All models use from_dict/to_dict for JSON/YAML serialization.
camelCase on disk is mapped to snake_case in Python.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

_LOGGER = logging.getLogger(__name__)


def _pick(d: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key, so original attribute names still load."""
    for key in keys:
        if key in d and d[key] is not None:
            return d[key]
    return default


def _number(d: dict[str, Any], *keys: str, default: Any, kind: type = float, bad: Any = None) -> Any:
    """Read a numeric field, using *bad* (or *default*) when it does not parse.

    Storage may hand over transient garbage; it is logged and replaced, never
    raised.
    """
    raw = _pick(d, *keys, default=default)
    try:
        value = kind(float(raw)) if kind is int else kind(raw)
        if not math.isfinite(value):
            raise ValueError(raw)
    except (TypeError, ValueError, OverflowError):
        fallback = default if bad is None else bad
        _LOGGER.warning("Unreadable %s=%r, using %r", keys[0], raw, fallback)
        return fallback
    return value


# ── Inputs ────────────────────────────────────────────────────


@dataclass(frozen=True)
class TaskSnapshot:
    """One task as the caller's storage sees it at computation time."""

    title: str = ""
    base_points: float = 0.0
    target: int = 1
    completed: int = 0
    max: int = 1
    is_routine: bool = False
    is_optional: bool = False
    reward: float = 0.0
    scalar: float = 1.0
    bonus: float = 0.0  # only read for routines

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TaskSnapshot:
        # an unreadable target becomes 0 so scoring reports it as InvalidTarget
        target = _number(d, "target", default=1, kind=int, bad=0)
        return cls(
            title=str(_pick(d, "title", default="")),
            base_points=_number(d, "basePoints", "base_points", "points", default=0.0),
            target=target,
            completed=_number(d, "completed", default=0, kind=int),
            max=_number(d, "max", default=target, kind=int),
            is_routine=bool(_pick(d, "isRoutine", "is_routine", "routine", default=False)),
            is_optional=bool(_pick(d, "isOptional", "is_optional", "optional", default=False)),
            reward=_number(d, "reward", default=0.0),
            scalar=_number(d, "scalar", default=1.0),
            bonus=_number(d, "bonus", default=0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "title": self.title,
            "basePoints": self.base_points,
            "target": self.target,
            "completed": self.completed,
            "max": self.max,
            "isRoutine": self.is_routine,
        }
        if self.is_optional:
            d["isOptional"] = True
        if self.reward:
            d["reward"] = self.reward
        if self.scalar != 1.0:
            d["scalar"] = self.scalar
        if self.bonus:
            d["bonus"] = self.bonus
        return d


@dataclass(frozen=True)
class DaySnapshot:
    target_points: float = 0.0
    tasks: tuple[TaskSnapshot, ...] = ()
    prior_consecutive_days: int = 0
    date: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DaySnapshot:
        if not d or not isinstance(d, dict):
            return cls()
        tasks = tuple(
            TaskSnapshot.from_dict(t) for t in (d.get("tasks") or []) if isinstance(t, dict)
        )
        return cls(
            target_points=_number(d, "targetPoints", "target_points", "target", default=0.0),
            tasks=tasks,
            prior_consecutive_days=_number(
                d, "priorConsecutiveDays", "prior_consecutive_days", default=0, kind=int
            ),
            date=str(_pick(d, "date", default="")),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "targetPoints": self.target_points,
            "priorConsecutiveDays": self.prior_consecutive_days,
            "tasks": [t.to_dict() for t in self.tasks],
        }
        if self.date:
            d["date"] = self.date
        return d


# ── Outputs ───────────────────────────────────────────────────


@dataclass(frozen=True)
class ComputedTaskPoints:
    earned_points: float = 0.0
    title: str = ""
    effective_base: float = 0.0
    ratio: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "earnedPoints": self.earned_points,
            "effectiveBase": self.effective_base,
            "ratio": self.ratio,
        }


@dataclass(frozen=True)
class ComputedDayProgress:
    total_points: float = 0.0
    progress_ratio: float = 0.0
    task_points: tuple[ComputedTaskPoints, ...] = ()
    unscoreable: tuple[str, ...] = ()
    bonus: float = 0.0
    date: str = ""

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "totalPoints": self.total_points,
            "progressRatio": round(self.progress_ratio, 3),
            "tasks": [t.to_dict() for t in self.task_points],
        }
        if self.unscoreable:
            d["unscoreable"] = list(self.unscoreable)
        if self.bonus:
            d["bonus"] = self.bonus
        if self.date:
            d["date"] = self.date
        return d


# ── History ───────────────────────────────────────────────────


@dataclass
class DayRecord:
    date: str = ""
    target_points: float = 0.0
    total_points: float = 0.0

    @property
    def met_target(self) -> bool:
        return self.target_points > 0 and self.total_points >= self.target_points

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DayRecord:
        return cls(
            date=str(d.get("date", "")),
            target_points=_number(d, "targetPoints", default=0.0),
            total_points=_number(d, "totalPoints", default=0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "targetPoints": self.target_points,
            "totalPoints": self.total_points,
            "metTarget": self.met_target,
        }


@dataclass
class History:
    days: list[DayRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> History:
        if not d or not isinstance(d, dict):
            return cls()
        days = [DayRecord.from_dict(e) for e in (d.get("days") or []) if isinstance(e, dict)]
        return cls(days=sorted(days, key=lambda r: r.date))

    def to_dict(self) -> dict[str, Any]:
        return {"days": [r.to_dict() for r in self.days]}

    def get(self, day: str) -> DayRecord | None:
        for record in self.days:
            if record.date == day:
                return record
        return None
