"""Typed dataclasses for the pomotask data model.

Persisted models use from_dict/to_dict for JSON serialization.
Unknown keys are ignored; missing optional keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


# ── Enums ─────────────────────────────────────────────────────


class Mode(str, Enum):
    WORK = "work"
    BREAK = "break"

    def other(self) -> Mode:
        return Mode.BREAK if self is Mode.WORK else Mode.WORK


class Focus(str, Enum):
    """Who owns the keyboard: the global keymap or the task-name editor."""

    NORMAL = "normal"
    CAPTURING = "capturing"


# ── Tasks ─────────────────────────────────────────────────────


@dataclass
class Task:
    id: int
    name: str
    done: bool = False

    @classmethod
    def from_dict(cls, d: Any) -> Task:
        """Decode one persisted task; raises ValueError on a malformed record."""
        if not isinstance(d, dict):
            raise ValueError(f"Task record must be an object, got {type(d).__name__}")
        task_id = d.get("id")
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"Task id must be an integer: {task_id!r}")
        name = d.get("name", "")
        if not isinstance(name, str):
            raise ValueError(f"Task name must be a string: {name!r}")
        done = d.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"Task done must be a boolean: {done!r}")
        return cls(id=task_id, name=name, done=done)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "done": self.done}


@dataclass(frozen=True)
class Snapshot:
    """Complete persisted representation: the task list plus the id counter.

    Holds its own copies of the tasks; mutating the live list never
    changes a snapshot already taken.
    """

    tasks: tuple[Task, ...] = ()
    next_id: int = 1

    @classmethod
    def of(cls, tasks: list[Task], next_id: int) -> Snapshot:
        return cls(tasks=tuple(replace(t) for t in tasks), next_id=next_id)

    @classmethod
    def from_dict(cls, d: Any) -> Snapshot:
        """Decode a persisted snapshot, repairing a missing or non-positive next_id."""
        if not isinstance(d, dict):
            raise ValueError(f"Snapshot must be an object, got {type(d).__name__}")
        raw_tasks = d.get("tasks") or []
        if not isinstance(raw_tasks, list):
            raise ValueError("Snapshot tasks must be a list")
        tasks = tuple(Task.from_dict(t) for t in raw_tasks)

        next_id = d.get("next_id")
        if next_id is not None and (not isinstance(next_id, int) or isinstance(next_id, bool)):
            raise ValueError(f"next_id must be an integer: {next_id!r}")
        if next_id is None or next_id <= 0:
            next_id = max((t.id for t in tasks), default=0) + 1
        return cls(tasks=tasks, next_id=next_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "next_id": self.next_id,
        }


# ── Timer ─────────────────────────────────────────────────────


@dataclass
class TimerState:
    mode: Mode = Mode.WORK
    seconds_remaining: int = 0
    running: bool = True


# ── Input capture ─────────────────────────────────────────────


@dataclass
class InputCapture:
    """Line buffer for a task name being typed; position is the caret index."""

    buffer: str = ""
    position: int = 0

    def clear(self) -> None:
        self.buffer = ""
        self.position = 0


# ── Root state ────────────────────────────────────────────────


@dataclass
class RootState:
    timer: TimerState = field(default_factory=TimerState)
    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1
    cursor: int = 0
    focus: Focus = Focus.NORMAL
    input: InputCapture = field(default_factory=InputCapture)
    last_error: Exception | None = None
    last_save_sequence: int = 0
    quitting: bool = False

    @property
    def capturing(self) -> bool:
        return self.focus is Focus.CAPTURING

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.tasks, self.next_id)
