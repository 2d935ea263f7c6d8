"""Tests for the board, edit, and save screens (no prompts involved)."""
from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from aac_board.board import BoardState
from aac_board.tui.components import IMAGE, board_choices, image_label
from aac_board.tui.navigator import Navigator
from aac_board.tui.router import Router
from aac_board.tui.screens import main as main_screen
from aac_board.tui.screens.board import handle_board_choice
from aac_board.tui.screens.edit import add_category_to_board, add_item_to_category
from aac_board.tui.screens.save import save_board
from aac_board.tui.state import UIState


@pytest.fixture
def router(sample_text: str, tmp_path: Path) -> Router:
    return Router(
        console=Console(width=200),
        settings=MagicMock(),
        state=UIState(),
        nav=Navigator(),
        board=BoardState.from_text(sample_text),
        board_path=tmp_path / "out" / "board.txt",
    )


def test_board_choices_at_root_show_category_names(router: Router):
    titles = [c.title for c in board_choices(router.board) if getattr(c, "value", None)]
    assert titles[0] == "▸ food  (img/food/plate.png)"
    values = [getattr(c, "value", None) for c in board_choices(router.board)]
    assert values[0] == (IMAGE, "img/food/plate.png")
    assert values[-2:] == ["back", "home"]


def test_image_label_inside_category_shows_text(router: Router):
    router.board.select("img/food/plate.png")
    assert image_label(router.board, "img/food/icons8-watermelon-96.png") == (
        "watermelon  (img/food/icons8-watermelon-96.png)"
    )


def test_handle_choice_opens_category_then_speaks(router: Router):
    assert handle_board_choice(router, (IMAGE, "img/food/plate.png")) is None
    assert router.board.get_category() == "food"
    assert router.state.spoken == []

    assert handle_board_choice(router, (IMAGE, "img/food/icons8-french-fries-96.png")) is None
    assert router.state.spoken == ["french fries"]


def test_handle_choice_back_closes_category_first(router: Router):
    router.board.select("img/clothing/hanger.png")
    assert handle_board_choice(router, "back") is None
    assert router.board.is_at_root()
    assert handle_board_choice(router, "back") == "back"


def test_handle_choice_cancel_and_home(router: Router):
    assert handle_board_choice(router, None) == "back"
    assert handle_board_choice(router, "home") == "home"


def test_images_named_like_nav_commands_are_selectable(router: Router):
    router.board = BoardState.from_text("home cat\n>back spoken back\n")

    choice = board_choices(router.board)[0].value
    assert choice == (IMAGE, "home")
    assert handle_board_choice(router, choice) is None
    assert router.board.get_category() == "cat"

    assert handle_board_choice(router, (IMAGE, "back")) is None
    assert router.state.spoken == ["spoken back"]
    assert router.board.get_category() == "cat"


def test_handle_choice_unknown_id_stays(router: Router, capsys):
    assert handle_board_choice(router, (IMAGE, "img/nothing.png")) is None
    assert "img/nothing.png" in capsys.readouterr().out


def test_edit_helpers_mark_board_dirty(router: Router):
    add_category_to_board(router, "img/toys/box.png", "toys")
    add_item_to_category(router, "img/toys/box.png", "img/toys/ball.png", "ball")

    board = router.board
    assert router.state.dirty is True
    assert board.is_at_root()
    assert board.get_category_by_id("img/toys/box.png").select("img/toys/ball.png") == "ball"
    assert board.holding.get_image_ids() == []


def test_save_board_writes_file_and_clears_dirty(router: Router):
    router.state.mark_dirty()
    assert save_board(router) is True
    assert router.state.dirty is False
    assert BoardState.load(router.board_path).get_image_ids() == router.board.get_image_ids()


def test_save_board_reports_failure(router: Router, tmp_path: Path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    router.board_path = blocker / "board.txt"
    router.state.mark_dirty()

    assert save_board(router) is False
    assert router.state.dirty is True
    assert "Save failed" in capsys.readouterr().out


def test_confirm_exit_without_changes(router: Router):
    assert main_screen.confirm_exit(router) == "exit"


def test_confirm_exit_saves_when_confirmed(router: Router, monkeypatch):
    router.state.mark_dirty()
    monkeypatch.setattr(
        main_screen.questionary, "confirm", lambda *a, **k: MagicMock(ask=lambda: True)
    )
    assert main_screen.confirm_exit(router) == "exit"
    assert router.board_path.exists()
