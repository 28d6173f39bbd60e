"""Workspace root, path helpers and user settings for pomotask."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pomotask.fileio import read_yaml


def workspace_root() -> Path:
    """Get the workspace root directory (holds persist.json, config.yaml, logs/)."""
    return Path(
        os.environ.get("POMOTASK_ROOT", str(Path.home() / ".pomotask"))
    ).expanduser().resolve()


# ── Path helpers ──────────────────────────────────────────────

def persist_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "persist.json"


def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "config.yaml"


def log_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "logs"


# ── Settings ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Settings:
    """User-tunable behaviour read from config.yaml.

    Timer durations are fixed; see pomotask.timer.
    """

    allow_pause_at_zero: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            allow_pause_at_zero=_as_bool(d.get("allow_pause_at_zero"), True),
            log_level=str(d.get("log_level", "INFO")).strip().upper() or "INFO",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "allow_pause_at_zero": self.allow_pause_at_zero,
            "log_level": self.log_level,
        }


def _as_bool(value: Any, default: bool) -> bool:
    """Accept only real YAML booleans; anything else keeps the default."""
    return value if isinstance(value, bool) else default


def load_settings(root: Path | None = None) -> Settings:
    """Load settings from config.yaml, defaulting when absent."""
    return Settings.from_dict(read_yaml(config_path(root)))
