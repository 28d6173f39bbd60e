"""Task-name entry: the modal state that borrows the keyboard.

While capturing, every key lands here. enter commits, escape cancels, and
everything else edits a single line of text.
"""

from __future__ import annotations

from pomotask import store
from pomotask.models import Focus, RootState

CHAR_LIMIT = 200
PLACEHOLDER = "input something"

CONFIRM_KEYS = {"enter"}
CANCEL_KEYS = {"escape"}


def begin(state: RootState) -> None:
    state.focus = Focus.CAPTURING
    state.input.clear()


def end(state: RootState) -> None:
    state.input.clear()
    state.focus = Focus.NORMAL


def confirm(state: RootState) -> bool:
    """Commit the buffer as a new task. Returns True if a task was added."""
    added = store.append(state, state.input.buffer)
    end(state)
    return added


def edit(state: RootState, key: str, character: str | None = None) -> None:
    """Apply one editing keystroke to the buffer. Unknown keys are ignored."""
    buf = state.input
    text, pos = buf.buffer, buf.position

    if key == "backspace":
        if pos > 0:
            text = text[: pos - 1] + text[pos:]
            pos -= 1
    elif key == "delete":
        text = text[:pos] + text[pos + 1 :]
    elif key == "left":
        pos = max(0, pos - 1)
    elif key == "right":
        pos = min(len(text), pos + 1)
    elif key in ("home", "ctrl+a"):
        pos = 0
    elif key in ("end", "ctrl+e"):
        pos = len(text)
    elif key == "ctrl+u":
        text, pos = text[pos:], 0
    elif key == "ctrl+k":
        text = text[:pos]
    elif character and character.isprintable():
        room = CHAR_LIMIT - len(text)
        if room <= 0:
            return
        character = character[:room]
        text = text[:pos] + character + text[pos:]
        pos += len(character)

    buf.buffer, buf.position = text, pos
