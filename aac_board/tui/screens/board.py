"""The board itself: categories at the root, spoken items inside them."""
from __future__ import annotations

import questionary
from rich.markup import escape

from ...errors import NotFound
from ..components import BRAND_STYLE, board_choices, render_breadcrumbs, render_spoken
from ..router import Router, register_screen


def handle_board_choice(router: Router, choice: tuple[str, str] | str | None) -> str | None:
    """Apply one menu choice to the board.

    `choice` is an `(IMAGE, image_id)` pair from `board_choices` or a
    navigation command. Back closes the open category before leaving the
    screen.
    """
    board = router.board
    if isinstance(choice, tuple):
        _, image_id = choice
        try:
            text = board.select(image_id)
        except NotFound as e:
            router.console.print(f"[red]✗[/red] {escape(str(e))}")
            return None
        if text:
            router.state.speak(text)
            render_spoken(router.console, text)
        return None

    if choice is None:
        return "back"
    if choice == "back":
        if board.is_at_root():
            return "back"
        board.reset()
        return None
    return choice


@register_screen("board")
def show_board(router: Router) -> str | None:
    render_breadcrumbs(router)
    if router.state.spoken:
        router.console.print(f"[dim]Said:[/dim] {escape(router.state.sentence())}\n")

    board = router.board
    if not board.get_image_ids():
        router.console.print("[yellow]⚠[/yellow] Nothing here yet. Add a category or item from the main menu.\n")

    prompt = board.get_category() or "Choose a category"
    choice = questionary.select(
        prompt,
        choices=board_choices(board),
        style=BRAND_STYLE,
    ).ask()
    return handle_board_choice(router, choice)
