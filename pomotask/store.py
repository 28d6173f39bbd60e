"""Task list mutations on the root state.

Every mutator keeps two invariants: the cursor is a valid index into the
task list (0 when the list is empty), and next_id is strictly greater than
every id in the list. Each returns True when persisted state changed, which
is the caller's cue to issue a save.
"""

from __future__ import annotations

from pomotask.models import RootState, Snapshot, Task


def append(state: RootState, name: str) -> bool:
    """Add a new task at the end and move the cursor onto it.

    Blank names are rejected without consuming an id.
    """
    if not name.strip():
        return False
    state.tasks.append(Task(id=state.next_id, name=name, done=False))
    state.next_id += 1
    state.cursor = len(state.tasks) - 1
    return True


def toggle_at(state: RootState, index: int) -> bool:
    if not _valid(state, index):
        return False
    task = state.tasks[index]
    task.done = not task.done
    return True


def remove_at(state: RootState, index: int) -> bool:
    if not _valid(state, index):
        return False
    del state.tasks[index]
    if state.cursor >= len(state.tasks) and state.cursor > 0:
        state.cursor -= 1
    return True


def move_cursor(state: RootState, delta: int) -> None:
    if not state.tasks:
        return
    state.cursor = max(0, min(len(state.tasks) - 1, state.cursor + delta))


def replace_tasks(state: RootState, snapshot: Snapshot) -> None:
    """Install a loaded snapshot as the live task list."""
    state.tasks = [Task(id=t.id, name=t.name, done=t.done) for t in snapshot.tasks]
    highest = max((t.id for t in state.tasks), default=0)
    state.next_id = max(snapshot.next_id, highest + 1)
    if not state.tasks:
        state.cursor = 0
    else:
        state.cursor = max(0, min(len(state.tasks) - 1, state.cursor))


def _valid(state: RootState, index: int) -> bool:
    return 0 <= index < len(state.tasks)
