"""Main menu screen, the entry point for the interactive board."""
from __future__ import annotations

import questionary

from ..components import BRAND_STYLE, render_header
from ..router import Router, register_screen
from .save import save_board


@register_screen("main_menu")
def show_main_menu(router: Router) -> str | None:
    router.console.clear()
    render_header(router)

    CHOICES = [
        questionary.Choice("Open board", value="board"),
        questionary.Separator("── Edit ──"),
        questionary.Choice("Add category", value="add_category"),
        questionary.Choice("Add item", value="add_item"),
        questionary.Choice("Save", value="save"),
        questionary.Separator("── System ──"),
        questionary.Choice("Help", value="help"),
        questionary.Separator(""),
        questionary.Choice("Exit", value="exit"),
    ]

    choice = questionary.select(
        "What would you like to do?",
        choices=CHOICES,
        style=BRAND_STYLE,
    ).ask()

    if choice is None or choice == "exit":
        return confirm_exit(router)
    return choice


def confirm_exit(router: Router) -> str | None:
    """Offer to save unsaved changes before leaving."""
    if not router.state.dirty:
        return "exit"
    answer = questionary.confirm("Save changes before exiting?", default=True, style=BRAND_STYLE).ask()
    if answer is None:
        # Cancelled: stay in the menu.
        return None
    if answer and not save_board(router):
        return None
    return "exit"
