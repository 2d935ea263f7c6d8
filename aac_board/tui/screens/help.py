"""Help screen."""
from __future__ import annotations

import questionary
from rich.panel import Panel

from ..components import BRAND_STYLE, nav_choices, render_breadcrumbs
from ..router import Router, register_screen


@register_screen("help")
def show_help(router: Router) -> str | None:
    router.console.clear()
    render_breadcrumbs(router)

    content = """[bold]Navigation[/bold]
  ↑/↓       Navigate menus
  Enter     Select option
  Ctrl+C    Back to the main menu

[bold]Using the board[/bold]
  Pick a category to open it, then pick items to speak them.
  ← Back closes the open category.

[bold]Board file[/bold]
  <image id> <category name>
  ><image id> <spoken text>

[bold]Command Line Usage[/bold]
  [cyan]aac-board[/cyan]                  Interactive board
  [cyan]aac-board show[/cyan]             List categories
  [cyan]aac-board speak ID...[/cyan]      Select images in order
  [cyan]aac-board check[/cyan]            Verify the board file
"""

    router.console.print(Panel.fit(content, title="Help", border_style="cyan"))
    router.console.print()

    action = questionary.select(
        "",
        choices=nav_choices(include_separator=False),
        style=BRAND_STYLE,
    ).ask()

    if action == "home":
        return "home"
    return "back"
