"""Workspace root, path helpers and engine configuration."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from points.fileio import dump_mapping, load_mapping

_LOGGER = logging.getLogger(__name__)


def workspace_root() -> Path:
    """Get the workspace root directory (holds config.yaml and history.json)."""
    return Path(
        os.environ.get("POINTS_ROOT", str(Path.home() / ".points"))
    ).expanduser().resolve()


# ── Path helpers ──────────────────────────────────────────────

def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "config.yaml"


def history_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "history.json"


# ── Engine configuration ──────────────────────────────────────


@dataclass
class EngineConfig:
    """Tunable constants for scoring, defaults and history retention."""

    streak_step: float = 0.1
    streak_cap: float = 1.0
    completion_bonus: bool = False
    default_target_points: float = 5.0
    default_task_points: float = 1.0
    default_task_target: int = 3
    default_task_max: int = 8
    history_days: int = 90

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> EngineConfig:
        """Build a config, falling back to defaults for missing or bad values."""
        config = cls()
        if not d or not isinstance(d, dict):
            return config
        for f in fields(cls):
            if f.name not in d:
                continue
            default = getattr(config, f.name)
            raw = d[f.name]
            try:
                if isinstance(default, bool):
                    value = _coerce_bool(raw)
                else:
                    value = type(default)(raw)
            except (TypeError, ValueError, OverflowError):
                _LOGGER.warning("Ignoring bad config value %s=%r", f.name, raw)
                continue
            if not isinstance(value, bool) and (not math.isfinite(value) or value < 0):
                _LOGGER.warning("Ignoring out-of-range config value %s=%r", f.name, raw)
                continue
            if f.name == "streak_cap" and value > 1.0:
                _LOGGER.warning("streak_cap %r above 1.0, using 1.0", raw)
                value = 1.0
            setattr(config, f.name, value)
        return config

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _coerce_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in {"true", "yes", "on", "1"}:
        return True
    if isinstance(raw, str) and raw.strip().lower() in {"false", "no", "off", "0"}:
        return False
    raise ValueError(f"Not a boolean: {raw!r}")


def load_config(root: Path | None = None) -> EngineConfig:
    """Load config.yaml from the workspace, defaulting when absent."""
    return EngineConfig.from_dict(load_mapping(config_path(root)))


def save_config(config: EngineConfig, root: Path | None = None) -> None:
    dump_mapping(config_path(root), config.to_dict())
