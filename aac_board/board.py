"""Two-level board navigation: categories at the root, items inside them."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .board_format import parse_text, format_text
from .category import Category
from .errors import IOFailure, NotFound
from .store import KeyValueStore

log = logging.getLogger("aac_board.board")

# Name of the category that receives items added while no category is open.
HOLDING_NAME = "unfiled"


@dataclass(frozen=True)
class Root:
    """Navigation state before any category is opened."""


@dataclass(frozen=True)
class InCategory:
    """Navigation state inside one category of the root index."""

    image_id: str
    category: Category


ROOT = Root()
NavState = Union[Root, InCategory]


class BoardState:
    """Categories of a communication board plus the current navigation state.

    Selecting a category id at the root opens that category silently;
    selecting an item id inside the open category returns its spoken text.

    Items added while at the root go to `holding`, a separate category that
    is neither navigable nor saved. Callers can inspect it to recover
    such items.
    """

    def __init__(self, categories: KeyValueStore[str, Category] | None = None):
        self._root: KeyValueStore[str, Category] = categories if categories is not None else KeyValueStore()
        self._state: NavState = ROOT
        self.holding = Category(HOLDING_NAME)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> BoardState:
        return cls(parse_text(text))

    @classmethod
    def load(cls, path: Path | str) -> BoardState:
        """Read a board file.

        Raises:
            IOFailure: if the file cannot be opened or decoded
            BoardFormatError: if a line is malformed
        """
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise IOFailure(f"cannot read board file {p}: {exc}", p) from exc
        board = cls.from_text(text)
        log.debug("Loaded board %s (%d categories)", p, board.category_count())
        return board

    def to_text(self) -> str:
        return format_text(self._root)

    def save(self, path: Path | str) -> None:
        """Write every category and its items to `path`.

        The text is fully rendered before the file is opened, so a board
        that cannot be serialized leaves an existing file untouched.

        Raises:
            IOFailure: if the file cannot be written
            BoardFormatError: if an id or text cannot be represented
        """
        p = Path(path)
        text = self.to_text()
        try:
            p.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise IOFailure(f"cannot write board file {p}: {exc}", p) from exc
        log.debug("Saved board %s (%d categories)", p, self.category_count())

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavState:
        return self._state

    @property
    def current(self) -> Category | None:
        if isinstance(self._state, InCategory):
            return self._state.category
        return None

    def is_at_root(self) -> bool:
        return isinstance(self._state, Root)

    def select(self, image_id: str) -> str:
        """Act on a selected image.

        Items of the open category win over root category ids with the same
        identifier.

        Returns:
            The item's text, or "" when the selection opened a category

        Raises:
            NotFound: if `image_id` is neither an item of the open category
                nor a category id
        """
        state = self._state
        if isinstance(state, InCategory) and state.category.has_image(image_id):
            return state.category.select(image_id)
        if self._root.has_key(image_id):
            self._state = InCategory(image_id, self._root.get(image_id))
            log.debug("Opened category %s", image_id)
            return ""
        raise NotFound(image_id, f"image {image_id!r} is not in the current category or the root index")

    def reset(self) -> None:
        self._state = ROOT

    def get_image_ids(self) -> list[str]:
        """Ids shown on the current screen: categories at the root, items otherwise."""
        category = self.current
        if category is None:
            return self._root.keys()
        return category.get_image_ids()

    def get_category(self) -> str:
        category = self.current
        return "" if category is None else category.get_name()

    def add_item(self, image_id: str, text: str) -> None:
        category = self.current
        if category is None:
            log.warning("No category open; adding %s to the %r holding category", image_id, HOLDING_NAME)
            category = self.holding
        category.add_item(image_id, text)

    def has_image(self, image_id: str) -> bool:
        category = self.current
        if category is None:
            category = self.holding
        return category.has_image(image_id)

    # ------------------------------------------------------------------
    # Category index
    # ------------------------------------------------------------------

    def add_category(self, image_id: str, name: str) -> Category:
        """Create an empty category, replacing any category with the same id."""
        category = Category(name)
        self._root.set(image_id, category)
        if isinstance(self._state, InCategory) and self._state.image_id == image_id:
            self._state = InCategory(image_id, category)
        return category

    def remove_category(self, image_id: str) -> None:
        if isinstance(self._state, InCategory) and self._state.image_id == image_id:
            self.reset()
        self._root.remove(image_id)

    def get_category_by_id(self, image_id: str) -> Category:
        return self._root.get(image_id)

    def has_category(self, image_id: str) -> bool:
        return self._root.has_key(image_id)

    def categories(self) -> list[tuple[str, Category]]:
        return self._root.items()

    def category_count(self) -> int:
        return self._root.size()
