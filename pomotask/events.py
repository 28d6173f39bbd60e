"""Inbound events and outbound commands of the dispatcher.

Events are delivered one at a time; commands are executed by whoever runs
the loop (see pomotask.tui) and may feed new events back in.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pomotask.models import Snapshot
from pomotask.persistence import LoadResult, SaveResult


# ── Events ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class KeyPress:
    """A key in Textual naming ("q", "enter", "ctrl+c", "space", ...).

    character is the printable text the key produces, if any; single-char
    keys default to themselves.
    """

    key: str
    character: str | None = None

    def __post_init__(self) -> None:
        if self.character is None and len(self.key) == 1:
            object.__setattr__(self, "character", self.key)


@dataclass(frozen=True)
class Loaded:
    result: LoadResult


@dataclass(frozen=True)
class Saved:
    result: SaveResult


Event = Union[Tick, KeyPress, Loaded, Saved]


# ── Commands ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ScheduleTick:
    delay: float = 1.0


@dataclass(frozen=True)
class RunLoad:
    path: Path


@dataclass(frozen=True)
class RunSave:
    snapshot: Snapshot


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[ScheduleTick, RunLoad, RunSave, Quit]
