"""Unit tests for Navigator class."""
from __future__ import annotations

from aac_board.tui.navigator import Navigator


def test_navigator_initial_state():
    nav = Navigator()
    assert nav.current() == "main_menu"
    assert nav.depth() == 1
    assert nav.breadcrumbs() == "Home"


def test_navigator_push_and_pop():
    nav = Navigator()
    nav.push("board")
    assert nav.current() == "board"
    assert nav.breadcrumbs() == "Home > Board"

    assert nav.pop() == "board"
    assert nav.current() == "main_menu"


def test_navigator_pop_at_root():
    nav = Navigator()
    assert nav.pop() is None
    assert nav.depth() == 1


def test_navigator_home():
    nav = Navigator()
    nav.push("add_category")
    nav.push("help")
    nav.home()
    assert nav.current() == "main_menu"
    assert nav.breadcrumbs() == "Home"


def test_navigator_unknown_screen_label():
    nav = Navigator()
    nav.push("unknown_screen")
    assert nav.breadcrumbs() == "Home > unknown_screen"
