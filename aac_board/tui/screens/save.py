"""Save screen."""
from __future__ import annotations

from ...errors import BoardError
from ..components import render_breadcrumbs, render_error
from ..router import Router, register_screen


def save_board(router: Router) -> bool:
    """Write the board to its file. Returns True on success."""
    path = router.board_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        router.board.save(path)
    except (BoardError, OSError) as e:
        render_error(router.console, "Save failed", str(e), "Check the path and permissions")
        return False
    router.state.mark_saved()
    router.console.print(f"[green]✓[/green] Saved to [cyan]{path}[/cyan]")
    return True


@register_screen("save")
def show_save(router: Router) -> str | None:
    render_breadcrumbs(router)
    save_board(router)
    return "back"
