"""Plain-text projection of the root state. Pure: reads state, returns a string."""

from __future__ import annotations

from pomotask.capture import PLACEHOLDER
from pomotask.models import RootState, Task
from pomotask.timer import format_remaining

TITLE = "Pomodoro"
FAREWELL = "Bye!"
EMPTY_LIST = "there is no tasks"
CARET = "|"

IDLE_HINT = (
    "Press 'a' to add a new task\n"
    "\n"
    "Press 'k'/'j' to navigate | 'enter'/'space' to complete task | 'd' to delete"
)
CAPTURE_HINT = "(Enter to add, Esc to cancel)"
KEY_HELP = "Keys: 'p' pause | 'r' reset | 'm' mode | 'q' quit"


def render(state: RootState) -> str:
    if state.quitting:
        return FAREWELL

    status = "running" if state.timer.running else "not running"
    lines = [
        TITLE,
        "",
        f"Mode: {state.timer.mode.value}",
        f"Time: {format_remaining(state.timer.seconds_remaining)} ({status})",
        "",
        "Tasks:",
    ]
    if state.tasks:
        lines.extend(task_line(t, i == state.cursor) for i, t in enumerate(state.tasks))
    else:
        lines.append(EMPTY_LIST)

    lines.append("")
    if state.capturing:
        lines += ["add a task:", input_line(state), CAPTURE_HINT]
    else:
        lines.append(IDLE_HINT)
    lines += ["", KEY_HELP]

    if state.last_error is not None:
        lines += ["", f"Error: {state.last_error}"]
    return "\n".join(lines)


def task_line(task: Task, selected: bool) -> str:
    mark = "[X]" if task.done else "[ ]"
    line = f"ID: {task.id} | title: {task.name} | done: {mark}"
    return f"{line} <" if selected else line


def input_line(state: RootState) -> str:
    buf = state.input
    if not buf.buffer:
        return f"> {CARET}{PLACEHOLDER}"
    return f"> {buf.buffer[: buf.position]}{CARET}{buf.buffer[buf.position :]}"
