"""Shared test fixtures for pomotask tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml

from pomotask.dispatcher import initial_state
from pomotask.models import RootState, Task
from pomotask.timer import new_timer


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with a config and a saved snapshot."""
    root = tmp_path / "workspace"
    root.mkdir(parents=True)

    config = {
        "allow_pause_at_zero": False,
        "log_level": "debug",
    }
    (root / "config.yaml").write_text(
        yaml.dump(config, default_flow_style=False), encoding="utf-8"
    )

    snapshot = {
        "tasks": [
            {"id": 4, "name": "write report", "done": False},
            {"id": 7, "name": "water plants", "done": True},
            {"id": 9, "name": "call dentist", "done": False},
        ],
        "next_id": 10,
    }
    (root / "persist.json").write_text(
        json.dumps(snapshot, indent=2), encoding="utf-8"
    )

    # Set env var
    os.environ["POMOTASK_ROOT"] = str(root)
    yield root
    # Cleanup
    if "POMOTASK_ROOT" in os.environ:
        del os.environ["POMOTASK_ROOT"]


@pytest.fixture
def state() -> RootState:
    """Fresh seed state, as at process start."""
    return initial_state()


@pytest.fixture
def empty_state() -> RootState:
    return RootState(timer=new_timer(), tasks=[], next_id=1, cursor=0)


@pytest.fixture
def three_tasks() -> RootState:
    return RootState(
        timer=new_timer(),
        tasks=[
            Task(id=1, name="a"),
            Task(id=2, name="b", done=True),
            Task(id=3, name="c"),
        ],
        next_id=4,
        cursor=0,
    )
