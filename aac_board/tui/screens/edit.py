"""Screens that change the board: add categories and items."""
from __future__ import annotations

import questionary
from questionary import Choice
from rich.markup import escape

from ...errors import BoardError
from ..components import BRAND_STYLE, render_breadcrumbs, render_error
from ..router import Router, register_screen


def _non_empty_id(value: str) -> bool | str:
    if not value.strip():
        return "Required"
    if any(ch.isspace() for ch in value):
        return "Image ids cannot contain spaces"
    return True


def add_category_to_board(router: Router, image_id: str, name: str) -> None:
    router.board.add_category(image_id, name)
    router.state.mark_dirty()
    router.console.print(f"[green]✓[/green] Category added: [cyan]{escape(image_id)}[/cyan] {escape(name)}")


def add_item_to_category(router: Router, category_id: str, image_id: str, text: str) -> None:
    """Open `category_id` and add the item there, then return to the root."""
    board = router.board
    board.reset()
    board.select(category_id)
    board.add_item(image_id, text)
    board.reset()
    router.state.mark_dirty()
    router.console.print(
        f"[green]✓[/green] Item added to [cyan]{escape(category_id)}[/cyan]: {escape(image_id)}"
    )


@register_screen("add_category")
def show_add_category(router: Router) -> str | None:
    render_breadcrumbs(router)
    image_id = questionary.text("Category image id:", validate=_non_empty_id, style=BRAND_STYLE).ask()
    if image_id is None:
        return "back"
    name = questionary.text("Category name:", style=BRAND_STYLE).ask()
    if name is None:
        return "back"

    if router.board.has_category(image_id):
        replace = questionary.confirm(
            f"{image_id} already exists. Replace it (its items are dropped)?",
            default=False,
            style=BRAND_STYLE,
        ).ask()
        if not replace:
            return "back"

    add_category_to_board(router, image_id, name)
    return "back"


@register_screen("add_item")
def show_add_item(router: Router) -> str | None:
    render_breadcrumbs(router)
    board = router.board
    if board.category_count() == 0:
        render_error(router.console, "No categories", "Items live inside a category.", "Add a category first")
        return "back"

    category_id = questionary.select(
        "Category:",
        choices=[
            Choice(title=f"{category.get_name() or image_id}  ({image_id})", value=image_id)
            for image_id, category in board.categories()
        ],
        style=BRAND_STYLE,
    ).ask()
    if category_id is None:
        return "back"
    image_id = questionary.text("Item image id:", validate=_non_empty_id, style=BRAND_STYLE).ask()
    if image_id is None:
        return "back"
    text = questionary.text("Spoken text:", style=BRAND_STYLE).ask()
    if text is None:
        return "back"

    try:
        add_item_to_category(router, category_id, image_id, text)
    except BoardError as e:
        render_error(router.console, "Could not add item", str(e))
    return "back"
