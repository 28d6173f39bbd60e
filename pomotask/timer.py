"""Work/break countdown sub-machine.

Advanced once per tick by the dispatcher. There is no terminal state: the
countdown alternates between work and break until the program quits.
"""

from __future__ import annotations

from pomotask.models import Mode, TimerState

WORK_SECONDS = 25 * 60
BREAK_SECONDS = 5 * 60

DURATIONS = {
    Mode.WORK: WORK_SECONDS,
    Mode.BREAK: BREAK_SECONDS,
}


def duration(mode: Mode) -> int:
    return DURATIONS[mode]


def new_timer() -> TimerState:
    """Fresh work period at full duration, already running."""
    return TimerState(mode=Mode.WORK, seconds_remaining=WORK_SECONDS, running=True)


def tick(timer: TimerState) -> bool:
    """Advance one second. Returns True if the mode flipped on this tick.

    A paused timer, or one already at zero, is left untouched.
    """
    if not timer.running or timer.seconds_remaining <= 0:
        return False
    timer.seconds_remaining -= 1
    if timer.seconds_remaining == 0:
        _flip(timer)
        return True
    return False


def toggle_pause(timer: TimerState, allow_at_zero: bool = True) -> bool:
    """Pause or resume. Returns False if the toggle was refused."""
    if not allow_at_zero and timer.seconds_remaining == 0:
        return False
    timer.running = not timer.running
    return True


def reset(timer: TimerState) -> None:
    """Restart the current mode from its full duration."""
    timer.seconds_remaining = duration(timer.mode)
    timer.running = True


def switch_mode(timer: TimerState) -> None:
    """Jump to the other mode immediately, regardless of time left."""
    _flip(timer)
    timer.running = True


def _flip(timer: TimerState) -> None:
    timer.mode = timer.mode.other()
    timer.seconds_remaining = duration(timer.mode)


def format_remaining(seconds: int) -> str:
    """Format seconds as MM:SS."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"
