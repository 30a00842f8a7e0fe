"""Shared test fixtures for points tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml

from points.models import TaskSnapshot


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with config, history and a day file."""
    root = tmp_path / "workspace"
    root.mkdir(parents=True)

    config = {
        "streak_step": 0.1,
        "streak_cap": 1.0,
        "default_target_points": 10,
        "history_days": 30,
    }
    (root / "config.yaml").write_text(
        yaml.dump(config, default_flow_style=False), encoding="utf-8"
    )

    # 2026-02-08 missed its target, 02-09 and 02-10 met theirs
    history = {
        "days": [
            {"date": "2026-02-08", "targetPoints": 10, "totalPoints": 4},
            {"date": "2026-02-09", "targetPoints": 10, "totalPoints": 12},
            {"date": "2026-02-10", "targetPoints": 10, "totalPoints": 10},
        ],
    }
    (root / "history.json").write_text(json.dumps(history, indent=2), encoding="utf-8")

    day = {
        "date": "2026-02-11",
        "targetPoints": 10,
        "priorConsecutiveDays": 2,
        "tasks": [
            {"title": "Meditate", "basePoints": 5, "target": 1, "max": 3, "completed": 1, "isRoutine": True},
            {"title": "Exercise", "basePoints": 6, "target": 2, "max": 4, "completed": 2, "reward": 2},
            {"title": "Study", "basePoints": 4, "target": 2, "max": 4, "completed": 1},
        ],
    }
    (root / "day.yaml").write_text(yaml.dump(day, default_flow_style=False), encoding="utf-8")

    os.environ["POINTS_ROOT"] = str(root)
    yield root
    if "POINTS_ROOT" in os.environ:
        del os.environ["POINTS_ROOT"]


@pytest.fixture
def routine() -> TaskSnapshot:
    return TaskSnapshot(title="Meditate", base_points=5, target=2, max=4, is_routine=True)


@pytest.fixture
def one_off() -> TaskSnapshot:
    return TaskSnapshot(title="File taxes", base_points=6, target=2, max=2)
