"""Reusable UI components for the interactive board."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary
from questionary import Choice, Separator
from rich.markup import escape
from rich.panel import Panel

if TYPE_CHECKING:
    from rich.console import Console

    from ..board import BoardState
    from .router import Router


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#00b4d8 bold"),
    ("question", "bold"),
    ("answer", "fg:#90e0ef bold"),
    ("highlighted", "fg:#00b4d8 bold"),
    ("pointer", "fg:#00b4d8 bold"),
    ("selected", "fg:#90e0ef"),
])


# ═══════════════════════════════════════════════════════════════════════════════
# NAVIGATION HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def nav_choices(include_separator: bool = True) -> list:
    """Standard Back/Home navigation choices.

    Append to every screen's menu for consistent navigation.
    """
    choices: list = []
    if include_separator:
        choices.append(Separator())
    choices.extend([
        Choice(title="← Back", value="back"),
        Choice(title="Home", value="home"),
    ])
    return choices


def image_label(board: BoardState, image_id: str) -> str:
    """Menu title for an image on the current screen.

    Categories show their name, items show the text they speak.
    """
    category = board.current
    if category is None:
        name = board.get_category_by_id(image_id).get_name()
        return f"▸ {name or image_id}  ({image_id})"
    return f"{category.select(image_id)}  ({image_id})"


# Tag for image choice values, so an image id such as "home" cannot be
# mistaken for a navigation command.
IMAGE = "image"


def board_choices(board: BoardState) -> list:
    """One choice per image on the current board screen, plus navigation.

    Image choices carry `(IMAGE, image_id)` values.
    """
    choices: list = [
        Choice(title=image_label(board, image_id), value=(IMAGE, image_id))
        for image_id in board.get_image_ids()
    ]
    return choices + nav_choices()


# ═══════════════════════════════════════════════════════════════════════════════
# RENDERING
# ═══════════════════════════════════════════════════════════════════════════════

def render_breadcrumbs(router: Router) -> None:
    """Render navigation breadcrumbs, including the open category."""
    breadcrumbs = router.nav.breadcrumbs()
    category = router.board.get_category()
    if category and router.nav.current() == "board":
        breadcrumbs += f" > {category}"
    router.console.print(f"[dim]{escape(breadcrumbs)}[/dim]\n")


def render_header(router: Router) -> None:
    """Context bar with the board file and category count."""
    dirty = "  [yellow]● unsaved[/yellow]" if router.state.dirty else ""
    content = (
        f"  [bold]Board[/bold] [dim]{escape(str(router.board_path))}[/dim]  "
        f"[bold]Categories[/bold] [cyan]{router.board.category_count()}[/cyan]{dirty}"
    )
    router.console.print(Panel.fit(content, border_style="dim"))
    router.console.print()


def render_spoken(console: Console, text: str) -> None:
    console.print(Panel.fit(f"[bold]🔊 {escape(text)}[/bold]", border_style="green"))


def render_error(console: Console, title: str, cause: str, action: str | None = None) -> None:
    """Render a friendly error panel with 3-part structure."""
    content = f"[bold red]✗ {escape(title)}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {escape(cause)}\n"
    if action:
        content += f"\n[dim]→ {action}[/dim]"
    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()
