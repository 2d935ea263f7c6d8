"""Navigation stack manager for screen-based routing."""
from __future__ import annotations


class Navigator:
    """Stack-based screen navigation with breadcrumbs.

    - Push on enter: opening a screen pushes it on the stack
    - Pop on Back: returns to the previous screen
    - Reset on Home: clears the stack to ["main_menu"]
    """

    SCREEN_LABELS = {
        "main_menu": "Home",
        "board": "Board",
        "add_item": "Add Item",
        "add_category": "Add Category",
        "save": "Save",
        "help": "Help",
    }

    def __init__(self):
        self.stack: list[str] = ["main_menu"]

    def push(self, screen: str) -> None:
        self.stack.append(screen)

    def pop(self) -> str | None:
        """Go back to the previous screen.

        Returns:
            The screen that was popped, or None if at the main menu
        """
        if len(self.stack) > 1:
            return self.stack.pop()
        return None

    def home(self) -> None:
        self.stack = ["main_menu"]

    def current(self) -> str:
        return self.stack[-1]

    def breadcrumbs(self) -> str:
        """Breadcrumb path like "Home > Board"."""
        return " > ".join(self.SCREEN_LABELS.get(screen, screen) for screen in self.stack)

    def depth(self) -> int:
        return len(self.stack)
