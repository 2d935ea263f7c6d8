"""Main router and screen registry for the interactive board."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from rich.console import Console

    from ..board import BoardState
    from ..settings import Settings
    from .navigator import Navigator
    from .state import UIState

log = logging.getLogger("aac_board.tui")


class Router:
    """Main navigation loop with screen dispatch.

    The router owns the loaded board and dispatches to registered screen
    functions based on the current navigation state.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        state: UIState,
        nav: Navigator,
        board: BoardState,
        board_path: Path,
    ):
        self.console = console
        self.settings = settings
        self.state = state
        self.nav = nav
        self.board = board
        self.board_path = board_path

    def run(self) -> None:
        """Run the main navigation loop.

        Dispatches to screen functions until "exit" is received.
        Handles navigation commands: exit, home, back, or screen_id.
        """
        while True:
            current_screen = self.nav.current()
            self.state.add_to_history(current_screen)

            screen_fn = SCREENS.get(current_screen)

            if screen_fn is None:
                self.console.print(
                    f"[yellow]Warning:[/yellow] Unknown screen '{current_screen}', "
                    "returning to main menu"
                )
                self.nav.home()
                continue

            try:
                result = screen_fn(self)
            except KeyboardInterrupt:
                self.console.print("\n[dim]👋 Interrupted. Returning to main menu...[/]")
                self.board.reset()
                self.nav.home()
                continue

            result = self._normalize_nav_result(result)
            log.debug("screen %s -> %s", current_screen, result)

            if result == "exit":
                self.console.print("\n[dim]👋 Goodbye![/]")
                break
            elif result == "home":
                self.board.reset()
                self.nav.home()
            elif result == "back":
                if self.nav.depth() > 1:
                    self.nav.pop()
                else:
                    self.nav.home()
            elif result:
                # A screen returning itself means "refresh"; pushing it again
                # would make Back appear broken.
                if result != current_screen:
                    self.nav.push(result)

    @staticmethod
    def _normalize_nav_result(result: str | None) -> str | None:
        """Blank results mean "stay on the current screen"."""
        if result is None:
            return None
        s = str(result).strip()
        return s or None


# Screen registry - maps screen IDs to handler functions
SCREENS: dict[str, Callable[[Router], str | None]] = {}


def register_screen(screen_id: str):
    """Decorator to register a screen function.

    Usage:
        @register_screen("main_menu")
        def show_main_menu(router: Router) -> str | None:
            ...
    """
    def decorator(fn: Callable[[Router], str | None]):
        SCREENS[screen_id] = fn
        return fn
    return decorator
