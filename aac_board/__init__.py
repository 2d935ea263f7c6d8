"""aac_board: a two-level communication board of categories and spoken items."""

from .board import ROOT, BoardState, InCategory, Root
from .category import Category
from .errors import BoardError, BoardFormatError, IOFailure, NotFound, NullKeyError
from .store import DEFAULT_CAPACITY, KeyValueStore

__all__ = [
    "BoardError",
    "BoardFormatError",
    "BoardState",
    "Category",
    "DEFAULT_CAPACITY",
    "IOFailure",
    "InCategory",
    "KeyValueStore",
    "NotFound",
    "NullKeyError",
    "ROOT",
    "Root",
]
