"""Unit tests for UIState class."""
from __future__ import annotations

from aac_board.tui.state import HISTORY_LIMIT, UIState


def test_uistate_initial_state():
    state = UIState()
    assert state.spoken == []
    assert list(state.session_history) == []
    assert state.dirty is False
    assert state.sentence() == ""


def test_uistate_speak_builds_sentence():
    state = UIState()
    state.speak("I want")
    state.speak("french fries")
    assert state.spoken == ["I want", "french fries"]
    assert state.sentence() == "I want french fries"


def test_uistate_dirty_flag():
    state = UIState()
    state.mark_dirty()
    assert state.dirty is True
    state.mark_saved()
    assert state.dirty is False


def test_uistate_history():
    state = UIState()
    state.add_to_history("main_menu")
    state.add_to_history("board")
    assert list(state.session_history) == ["main_menu", "board"]


def test_uistate_history_keeps_only_recent_visits():
    state = UIState()
    for i in range(HISTORY_LIMIT + 10):
        state.add_to_history(f"screen_{i}")

    assert len(state.session_history) == HISTORY_LIMIT
    assert state.session_history[0] == "screen_10"
    assert state.session_history[-1] == f"screen_{HISTORY_LIMIT + 9}"
