"""Snapshot persistence for pomotask.

load() and save() never raise for I/O or decoding problems; failures come
back as LoadError/SaveError values inside the result so the caller can
surface them without interrupting the event loop. Both are blocking and are
meant to run on a worker thread.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path

from pomotask.fileio import read_json, write_json_atomic
from pomotask.models import Snapshot, Task

logger = logging.getLogger(__name__)


# ── Errors ────────────────────────────────────────────────────


class PersistenceError(Exception):
    """Base for non-fatal persistence failures."""

    verb = "access"

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{self.verb} failed: {cause}")


class LoadError(PersistenceError):
    verb = "load"


class SaveError(PersistenceError):
    verb = "save"


# ── Results ───────────────────────────────────────────────────


@dataclass(frozen=True)
class LoadResult:
    tasks: tuple[Task, ...] = ()
    next_id: int = 1
    error: LoadError | None = None
    found: bool = False
    # False when the file exists but has no "tasks" list (absent or null)
    has_tasks: bool = False

    @property
    def snapshot(self) -> Snapshot:
        return Snapshot(tasks=self.tasks, next_id=self.next_id)


@dataclass(frozen=True)
class SaveResult:
    error: SaveError | None = None
    skipped: bool = False
    # 0 when the save was not numbered by a Persistence
    sequence: int = 0


# ── Operations ────────────────────────────────────────────────


def load(path: Path) -> LoadResult:
    """Read a snapshot from disk.

    Missing file -> empty list, next_id 1, no error.
    No "tasks" key (or null) -> has_tasks is False; callers keep what they have.
    Malformed or unreadable -> empty list carrying a LoadError.
    """
    try:
        data = read_json(path)
    except FileNotFoundError:
        logger.debug("No snapshot at %s", path)
        return LoadResult()
    except (OSError, ValueError) as e:
        logger.warning("Could not read snapshot %s: %s", path, e)
        return LoadResult(error=LoadError(path, e), found=True)

    try:
        snapshot = Snapshot.from_dict(data)
    except ValueError as e:
        logger.warning("Malformed snapshot %s: %s", path, e)
        return LoadResult(error=LoadError(path, e), found=True)

    has_tasks = data.get("tasks") is not None
    logger.debug("Loaded %d task(s) from %s", len(snapshot.tasks), path)
    return LoadResult(
        tasks=snapshot.tasks, next_id=snapshot.next_id, found=True, has_tasks=has_tasks
    )


def save(path: Path, snapshot: Snapshot) -> SaveResult:
    """Overwrite the snapshot file atomically with the full snapshot."""
    try:
        write_json_atomic(path, snapshot.to_dict())
    except (OSError, TypeError, ValueError) as e:
        logger.warning("Could not save snapshot %s: %s", path, e)
        return SaveResult(error=SaveError(path, e))
    logger.debug("Saved %d task(s) to %s", len(snapshot.tasks), path)
    return SaveResult()


@dataclass
class Persistence:
    """Serializes saves to one path, last writer wins.

    Each save is numbered when it is submitted. Writes take turns on a lock;
    a save that reaches the lock after a newer one has already been written
    is skipped, so an older snapshot never overwrites a newer one. In-flight
    writes are never cancelled and there is no timeout.
    """

    path: Path
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _counter: int = 0
    _written: int = 0

    def next_sequence(self) -> int:
        """Number a save. Call from the dispatching thread, in issue order."""
        self._counter += 1
        return self._counter

    def load(self) -> LoadResult:
        return load(self.path)

    def save(self, snapshot: Snapshot, sequence: int | None = None) -> SaveResult:
        if sequence is None:
            sequence = self.next_sequence()
        with self._lock:
            if sequence < self._written:
                logger.debug("Skipping stale save #%d (already wrote #%d)", sequence, self._written)
                return SaveResult(skipped=True, sequence=sequence)
            result = replace(save(self.path, snapshot), sequence=sequence)
            if result.error is None:
                self._written = sequence
            return result
