"""End-to-end day evaluation: streak bonus, task scoring, aggregation.

    bonus    = resolve_bonus(day.prior_consecutive_days)
    tasks    = routines with bonus injected
    progress = aggregate(day with tasks)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from points.config import EngineConfig, load_config
from points.fileio import load_mapping
from points.history import load_history, prior_consecutive_days, record_day, save_history
from points.models import ComputedDayProgress, DaySnapshot, History
from points.progress import aggregate
from points.streak import apply_bonus, resolve_bonus

_LOGGER = logging.getLogger(__name__)


def new_day(day: str, config: EngineConfig | None = None) -> DaySnapshot:
    """An empty day carrying the configured default target."""
    if config is None:
        config = EngineConfig()
    return DaySnapshot(target_points=config.default_target_points, date=day)


def evaluate_day(day: DaySnapshot, config: EngineConfig | None = None) -> ComputedDayProgress:
    """Score a day, applying the streak bonus for its prior consecutive days."""
    if config is None:
        config = EngineConfig()
    bonus = resolve_bonus(day.prior_consecutive_days, config.streak_step, config.streak_cap)
    tasks = apply_bonus(day.tasks, day.prior_consecutive_days, config)
    progress = aggregate(replace(day, tasks=tasks))
    _LOGGER.debug(
        "Evaluated day %s: streak=%s bonus=%s total=%s ratio=%s",
        day.date or "?", day.prior_consecutive_days, bonus,
        progress.total_points, progress.progress_ratio,
    )
    return replace(progress, bonus=bonus)


def evaluate_with_history(
    day: DaySnapshot,
    history: History,
    config: EngineConfig | None = None,
) -> ComputedDayProgress:
    """Like evaluate_day, but the streak length comes from *history*."""
    if not day.date:
        return evaluate_day(day, config)
    streak = prior_consecutive_days(history, day.date)
    return evaluate_day(replace(day, prior_consecutive_days=streak), config)


def score_day_file(path: Path, config: EngineConfig | None = None) -> ComputedDayProgress:
    """Load a YAML or JSON day file and evaluate it."""
    return evaluate_day(DaySnapshot.from_dict(load_mapping(Path(path))), config)


def finalize_day(
    day: DaySnapshot,
    root: Path | None = None,
    config: EngineConfig | None = None,
) -> ComputedDayProgress:
    """Score *day* against the stored history, then record it there.

    Re-finalizing the same date replaces its earlier record.
    """
    if config is None:
        config = load_config(root)
    if not day.date:
        raise ValueError("finalize_day needs a dated DaySnapshot")
    history = load_history(root)
    progress = evaluate_with_history(day, history, config)
    record_day(history, day.date, progress, day.target_points, keep=config.history_days)
    save_history(history, root)
    _LOGGER.info(
        "Finalized %s: %s/%s points", day.date, progress.total_points, day.target_points
    )
    return progress
