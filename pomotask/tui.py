#!/usr/bin/env python3
"""pomotask TUI — the Textual front-end that drives the dispatcher.

The app owns the terminal, the one-second clock and the worker threads.
It holds the single RootState, turns key presses and timer callbacks into
events, and carries out whatever commands dispatch() returns.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from pomotask.dispatcher import dispatch, initial_state, startup_commands
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
from pomotask.logging_setup import setup_logging
from pomotask.models import Snapshot
from pomotask.persistence import Persistence
from pomotask.render import render
from pomotask.workspace import Settings, load_settings, log_dir, persist_path, workspace_root

logger = logging.getLogger(__name__)


CSS = """
Screen {
    background: $surface;
}

#view {
    height: 1fr;
    padding: 1 2;
}
"""


def to_key_press(key: str, character: str | None) -> KeyPress:
    """Translate a Textual key event into a dispatcher KeyPress."""
    if character is not None and not character.isprintable():
        character = None
    return KeyPress(key=key, character=character)


class PomotaskApp(App):
    """Work/break timer with a to-do list."""

    TITLE = "pomotask"
    CSS = CSS
    AUTO_FOCUS = None

    ENABLE_COMMAND_PALETTE = False

    # Every key goes through dispatch(). ctrl+c is the one hard-abort key;
    # ctrl+q would otherwise be Textual's own quit, so it is forwarded as a
    # plain key, which dispatch() ignores.
    BINDINGS = [
        Binding("ctrl+c", "hard_abort", "Quit", show=False, priority=True),
        Binding("ctrl+q", "forward_key('ctrl+q')", show=False, priority=True),
    ]

    def __init__(self, root: Path, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.state = initial_state()
        self.persistence = Persistence(persist_path(root))

    def compose(self) -> ComposeResult:
        yield Static(render(self.state), id="view")

    def on_mount(self) -> None:
        self._execute(startup_commands(self.persistence.path))

    # ── Event intake ──────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.deliver(to_key_press(event.key, event.character))

    def action_hard_abort(self) -> None:
        self.deliver(KeyPress("ctrl+c"))

    def action_forward_key(self, key: str) -> None:
        self.deliver(KeyPress(key))

    def _on_tick(self) -> None:
        self.deliver(Tick())

    def deliver(self, event: Event) -> None:
        if self.state.quitting:
            return
        commands = dispatch(self.state, event, self.settings)
        self.query_one("#view", Static).update(render(self.state))
        self._execute(commands)

    # ── Command execution ─────────────────────────────────────

    def _execute(self, commands: list[Command]) -> None:
        for command in commands:
            if isinstance(command, ScheduleTick):
                self.set_timer(command.delay, self._on_tick)
            elif isinstance(command, RunLoad):
                self._run_load()
            elif isinstance(command, RunSave):
                self._run_save(command.snapshot, self.persistence.next_sequence())
            elif isinstance(command, Quit):
                self.exit(message=render(self.state))

    @work(thread=True)
    def _run_load(self) -> None:
        result = self.persistence.load()
        self._post_back(Loaded(result))

    @work(thread=True)
    def _run_save(self, snapshot: Snapshot, sequence: int) -> None:
        result = self.persistence.save(snapshot, sequence)
        self._post_back(Saved(result))

    def _post_back(self, event: Event) -> None:
        try:
            self.call_from_thread(self.deliver, event)
        except RuntimeError:
            # Saves still in flight at exit are not awaited.
            logger.debug("App closed before %s was delivered", type(event).__name__)


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    root = workspace_root()
    try:
        root.mkdir(parents=True, exist_ok=True)
        settings = load_settings(root)
        log_file = setup_logging(log_dir=log_dir(root), level=settings.log_level)
    except OSError as e:
        print(f"Cannot prepare workspace {root}: {e}")
        print("Set POMOTASK_ROOT to a writable directory.")
        sys.exit(1)

    logger.info("Starting pomotask in %s (log: %s)", root, log_file)
    app = PomotaskApp(root, settings)
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
