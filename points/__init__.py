"""Points core library: task scoring, streak bonuses and day progress.

Public API re-exports for convenient imports:
    from points import evaluate_day, compute_points, resolve_bonus, ...
"""

# Configuration & paths
from points.config import (
    EngineConfig,
    workspace_root,
    config_path,
    history_path,
    load_config,
    save_config,
)

# File I/O
from points.fileio import load_mapping, dump_mapping

# Errors
from points.errors import PointsError, InvalidTarget

# Models
from points.models import (
    TaskSnapshot,
    DaySnapshot,
    ComputedTaskPoints,
    ComputedDayProgress,
    DayRecord,
    History,
)

# Streaks
from points.streak import (
    resolve_bonus,
    completion_bonus,
    resolve_task_bonus,
    apply_bonus,
    count_streak,
)

# Scoring
from points.calculator import (
    effective_base,
    completion_ratio,
    compute_points,
    score_task,
)

# Aggregation
from points.progress import (
    progress_ratio,
    aggregate,
    summarize_day,
)

# History
from points.history import (
    load_history,
    save_history,
    record_day,
    prior_consecutive_days,
)

# Tasks
from points.tasks import (
    validate_task,
    new_task,
    increment_completion,
    decrement_completion,
    reset_completions,
    duplicate_task,
)

# Pipeline
from points.engine import (
    new_day,
    evaluate_day,
    evaluate_with_history,
    score_day_file,
    finalize_day,
)
