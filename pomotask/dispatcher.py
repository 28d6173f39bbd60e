"""Root state machine: one event in, state mutated, commands out.

dispatch() is the only writer of RootState. It never blocks; file I/O is
requested through RunLoad/RunSave commands whose results come back later as
Loaded/Saved events.

Routing, first match wins:
    1. nothing at all once quitting
    2. Tick -> timer, always re-armed
    3. keys while capturing -> task-name editor (ctrl+c still quits)
    4. keys otherwise -> global keymap
    5. Loaded/Saved -> persistence outcomes, in either focus
    6. anything else is ignored
"""

from __future__ import annotations

import logging
from pathlib import Path

from pomotask import capture, store, timer
from pomotask.events import (
    Command,
    Event,
    KeyPress,
    Loaded,
    Quit,
    RunLoad,
    RunSave,
    Saved,
    ScheduleTick,
    Tick,
)
from pomotask.models import RootState, Task
from pomotask.workspace import Settings

logger = logging.getLogger(__name__)

HARD_ABORT = "ctrl+c"

KEYMAP: dict[str, str] = {
    "q": "quit",
    "escape": "quit",
    "ctrl+c": "quit",
    "p": "pause",
    "r": "reset",
    "m": "switch_mode",
    "a": "add",
    "k": "up",
    "up": "up",
    "j": "down",
    "down": "down",
    "space": "toggle",
    "enter": "toggle",
    "d": "delete",
    "delete": "delete",
}

SEED_TASKS = (
    ("do anything", True),
    ("go to sleep", False),
)


def initial_state() -> RootState:
    """Built-in state shown until (and unless) a saved snapshot loads."""
    tasks = [Task(id=i, name=name, done=done) for i, (name, done) in enumerate(SEED_TASKS, start=1)]
    return RootState(
        timer=timer.new_timer(),
        tasks=tasks,
        next_id=len(tasks) + 1,
        cursor=0,
    )


def startup_commands(path: Path) -> list[Command]:
    return [ScheduleTick(), RunLoad(path)]


def dispatch(state: RootState, event: Event, settings: Settings | None = None) -> list[Command]:
    if settings is None:
        settings = Settings()
    if state.quitting:
        return []

    if isinstance(event, Tick):
        if timer.tick(state.timer):
            logger.debug("Timer switched to %s", state.timer.mode.value)
        return [ScheduleTick()]

    if isinstance(event, KeyPress):
        if state.capturing:
            return _on_capture_key(state, event)
        return _on_key(state, event, settings)

    if isinstance(event, Loaded):
        return _on_loaded(state, event)

    if isinstance(event, Saved):
        return _on_saved(state, event)

    return []


# ── Keyboard ──────────────────────────────────────────────────


def _on_capture_key(state: RootState, event: KeyPress) -> list[Command]:
    if event.key == HARD_ABORT:
        return _quit(state)
    if event.key in capture.CONFIRM_KEYS:
        if capture.confirm(state):
            logger.debug("Added task #%d", state.tasks[-1].id)
            return [_save(state)]
        return []
    if event.key in capture.CANCEL_KEYS:
        capture.end(state)
        return []
    capture.edit(state, event.key, event.character)
    return []


def _on_key(state: RootState, event: KeyPress, settings: Settings) -> list[Command]:
    action = KEYMAP.get(event.key)
    if action is None:
        return []

    if action == "quit":
        return _quit(state)
    if action == "pause":
        timer.toggle_pause(state.timer, allow_at_zero=settings.allow_pause_at_zero)
    elif action == "reset":
        timer.reset(state.timer)
    elif action == "switch_mode":
        timer.switch_mode(state.timer)
    elif action == "add":
        capture.begin(state)
    elif action == "up":
        store.move_cursor(state, -1)
    elif action == "down":
        store.move_cursor(state, +1)
    elif action == "toggle":
        if store.toggle_at(state, state.cursor):
            return [_save(state)]
    elif action == "delete":
        if store.remove_at(state, state.cursor):
            return [_save(state)]
    return []


def _quit(state: RootState) -> list[Command]:
    state.quitting = True
    return [Quit()]


def _save(state: RootState) -> RunSave:
    return RunSave(state.snapshot())


# ── Persistence outcomes ──────────────────────────────────────


def _on_loaded(state: RootState, event: Loaded) -> list[Command]:
    result = event.result
    if result.error is not None:
        state.last_error = result.error
        return []
    if result.found and result.has_tasks:
        store.replace_tasks(state, result.snapshot)
        logger.debug("Installed %d loaded task(s), next id %d", len(state.tasks), state.next_id)
    return []


def _on_saved(state: RootState, event: Saved) -> list[Command]:
    result = event.result
    if result.sequence and result.sequence < state.last_save_sequence:
        # a newer save has already reported; its outcome stands
        return []
    state.last_save_sequence = max(state.last_save_sequence, result.sequence)
    state.last_error = result.error
    return []
