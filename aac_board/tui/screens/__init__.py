"""Screen modules for the interactive board."""
from __future__ import annotations

# Import all screen modules to register them with the router
from . import board, edit, help, main, save

__all__ = ["board", "edit", "help", "main", "save"]
