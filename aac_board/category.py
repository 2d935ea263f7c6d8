"""One screen of selectable items."""
from __future__ import annotations

from .store import KeyValueStore


class Category:
    """A named set of items, each mapping an image id to the text it speaks."""

    def __init__(self, name: str):
        self._name = name
        self._items: KeyValueStore[str, str] = KeyValueStore()

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def add_item(self, image_id: str, text: str) -> None:
        """Add the item, or replace the text of an existing one."""
        self._items.set(image_id, text)

    def remove_item(self, image_id: str) -> None:
        self._items.remove(image_id)

    def get_image_ids(self) -> list[str]:
        return self._items.keys()

    def select(self, image_id: str) -> str:
        """Text spoken for `image_id`.

        Raises:
            NotFound: if the image is not in this category
        """
        return self._items.get(image_id)

    def has_image(self, image_id: str) -> bool:
        return self._items.has_key(image_id)

    def items(self) -> list[tuple[str, str]]:
        return self._items.items()

    def __len__(self) -> int:
        return self._items.size()

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, items={len(self)})"
