"""Loading and atomically saving the YAML/JSON mappings a workspace holds.

The format follows the file suffix: ``.yaml``/``.yml`` is YAML, anything
else JSON. A missing or blank file loads as an empty mapping.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = {".yaml", ".yml"}


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def load_mapping(path: Path) -> dict[str, Any]:
    """Parse *path* into a dict; a non-mapping document also yields {}."""
    path = Path(path)
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    result = yaml.safe_load(text) if _is_yaml(path) else json.loads(text)
    return result if isinstance(result, dict) else {}


def _encode(path: Path, data: dict[str, Any]) -> str:
    if _is_yaml(path):
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def dump_mapping(path: Path, data: dict[str, Any]) -> None:
    """Write *data* next to *path* under an exclusive lock, then rename over it.

    Readers never see a half-written history or config.
    """
    path = Path(path)
    content = _encode(path, data)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, staged = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=path.suffix)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        os.replace(staged, path)
    except BaseException:
        if os.path.exists(staged):
            os.unlink(staged)
        raise
