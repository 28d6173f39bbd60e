"""Tests for pomotask/capture.py — task-name entry and line editing."""

from pomotask.capture import CHAR_LIMIT, begin, confirm, edit, end
from pomotask.models import Focus


def _type(state, text):
    for ch in text:
        edit(state, "space" if ch == " " else ch, ch)


def test_begin_and_end(state):
    begin(state)
    assert state.focus is Focus.CAPTURING
    _type(state, "abc")
    end(state)
    assert state.focus is Focus.NORMAL
    assert state.input.buffer == ""
    assert state.input.position == 0


def test_typing_inserts_at_caret(state):
    begin(state)
    _type(state, "buy milk")
    assert state.input.buffer == "buy milk"
    assert state.input.position == 8


def test_cursor_movement_and_insert(state):
    begin(state)
    _type(state, "ac")
    edit(state, "left")
    _type(state, "b")
    assert state.input.buffer == "abc"
    edit(state, "home")
    assert state.input.position == 0
    edit(state, "left")
    assert state.input.position == 0
    edit(state, "end")
    edit(state, "right")
    assert state.input.position == 3


def test_backspace_and_delete(state):
    begin(state)
    _type(state, "abcd")
    edit(state, "backspace")
    assert state.input.buffer == "abc"
    edit(state, "home")
    edit(state, "backspace")
    assert state.input.buffer == "abc"
    edit(state, "delete")
    assert state.input.buffer == "bc"
    assert state.input.position == 0


def test_kill_to_start_and_end(state):
    begin(state)
    _type(state, "hello world")
    for _ in range(5):
        edit(state, "left")
    edit(state, "ctrl+k")
    assert state.input.buffer == "hello "
    edit(state, "ctrl+u")
    assert state.input.buffer == ""
    assert state.input.position == 0


def test_non_printable_and_unknown_keys_ignored(state):
    begin(state)
    _type(state, "x")
    edit(state, "tab", "\t")
    edit(state, "f5")
    assert state.input.buffer == "x"


def test_char_limit(state):
    begin(state)
    _type(state, "z" * (CHAR_LIMIT + 10))
    assert len(state.input.buffer) == CHAR_LIMIT


def test_confirm_adds_task(state):
    before = state.next_id
    begin(state)
    _type(state, "stretch")
    assert confirm(state) is True
    assert state.tasks[-1].id == before
    assert state.tasks[-1].name == "stretch"
    assert state.focus is Focus.NORMAL
    assert state.input.buffer == ""


def test_confirm_empty_discards(state):
    before = list(state.tasks)
    begin(state)
    assert confirm(state) is False
    assert state.tasks == before
    assert state.focus is Focus.NORMAL


def test_capture_does_not_touch_timer(state):
    timer_before = (state.timer.mode, state.timer.seconds_remaining, state.timer.running)
    begin(state)
    _type(state, "prmdq")
    assert (state.timer.mode, state.timer.seconds_remaining, state.timer.running) == timer_before
    assert len(state.tasks) == 2
