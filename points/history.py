"""Rolling per-day history used to derive streaks."""

from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path

from points.config import history_path
from points.fileio import dump_mapping, load_mapping
from points.models import ComputedDayProgress, DayRecord, History
from points.streak import count_streak


def load_history(root: Path | None = None) -> History:
    return History.from_dict(load_mapping(history_path(root)))


def save_history(history: History, root: Path | None = None) -> None:
    dump_mapping(history_path(root), history.to_dict())


def record_day(
    history: History,
    day: str,
    progress: ComputedDayProgress,
    target_points: float,
    keep: int = 90,
) -> DayRecord:
    """Insert or replace the record for *day*, keeping the newest *keep* days."""
    record = DayRecord(date=day, target_points=target_points, total_points=progress.total_points)
    by_day = {r.date: r for r in history.days}
    by_day[day] = record
    ordered = sorted(by_day.values(), key=lambda r: r.date)
    history.days = ordered[-keep:] if keep > 0 else ordered
    return record


def prior_consecutive_days(history: History, day: str) -> int:
    """Qualifying days in a row ending the day before *day*.

    The day itself is excluded: its own total depends on the bonus being
    resolved.
    """
    try:
        previous = date.fromisoformat(day) - timedelta(days=1)
    except (TypeError, ValueError):
        return 0
    return count_streak(history.days, previous.isoformat())
