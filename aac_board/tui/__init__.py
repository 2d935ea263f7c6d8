"""Interactive board for aac_board.

Provides a screen-based navigation system: a navigator stack, a router that
dispatches to registered screens, and per-session state.
"""
from .navigator import Navigator
from .router import Router
from .state import UIState

__all__ = ["Navigator", "Router", "UIState"]
