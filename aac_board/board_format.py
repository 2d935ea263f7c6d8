"""Line-oriented text format for persisted boards.

A board file lists each category as a header line followed by its items:

    img/food/plate.png food
    >img/food/fries.png french fries
    >img/food/watermelon.png watermelon
    img/clothing/hanger.png clothing
    >img/clothing/shirt.png collared shirt

Header lines are `<image id> <category name>`; item lines are `>` directly
followed by `<image id> <text>`. Only the first space separates the id, so
names and texts may contain spaces. Items belong to the nearest header above
them. Blank lines are ignored.
"""
from __future__ import annotations

from typing import Iterable

from .category import Category
from .errors import BoardFormatError
from .store import KeyValueStore

ITEM_PREFIX = ">"


def _split(body: str) -> tuple[str, str]:
    image_id, sep, rest = body.partition(" ")
    return image_id, rest if sep else ""


def _has_whitespace(image_id: str) -> bool:
    return any(ch.isspace() for ch in image_id)


def parse_lines(lines: Iterable[str]) -> KeyValueStore[str, Category]:
    """Build a root store of categories from board lines.

    Raises:
        BoardFormatError: on an item before any header, an item without
            text separator, or an empty image id
    """
    root: KeyValueStore[str, Category] = KeyValueStore()
    current: Category | None = None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        if line.startswith(ITEM_PREFIX):
            body = line[len(ITEM_PREFIX):]
            if current is None:
                raise BoardFormatError("item appears before any category", line_no, line)
            if " " not in body:
                raise BoardFormatError("item is missing its text", line_no, line)
            image_id, text = _split(body)
            if not image_id:
                raise BoardFormatError("item has an empty image id", line_no, line)
            if _has_whitespace(image_id):
                raise BoardFormatError("item image id contains whitespace", line_no, line)
            current.add_item(image_id, text)
            continue

        image_id, name = _split(line)
        if not image_id:
            raise BoardFormatError("category has an empty image id", line_no, line)
        if _has_whitespace(image_id):
            raise BoardFormatError("category image id contains whitespace", line_no, line)
        current = Category(name)
        root.set(image_id, current)

    return root


def parse_text(text: str) -> KeyValueStore[str, Category]:
    # Only \n ends a line; str.splitlines() would also break on \x0c, \u2028 etc.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return parse_lines(lines)


def _check_id(image_id: str, what: str) -> None:
    if not image_id or _has_whitespace(image_id):
        raise BoardFormatError(f"{what} image id {image_id!r} must be non-empty and contain no whitespace")


def _check_text(value: str, what: str) -> None:
    if "\n" in value or "\r" in value:
        raise BoardFormatError(f"{what} {value!r} must fit on one line")


def format_lines(root: KeyValueStore[str, Category]) -> list[str]:
    """Serialize a root store into board lines (without newlines).

    Raises:
        BoardFormatError: if an id or text cannot be written so that it
            reads back identically
    """
    out: list[str] = []
    for i in range(root.size()):
        cat_id, category = root.item_at(i)
        _check_id(cat_id, "category")
        if cat_id.startswith(ITEM_PREFIX):
            raise BoardFormatError(f"category image id {cat_id!r} must not start with {ITEM_PREFIX!r}")
        _check_text(category.get_name(), "category name")
        out.append(f"{cat_id} {category.get_name()}")

        for item_id, text in category.items():
            _check_id(item_id, "item")
            _check_text(text, "item text")
            out.append(f"{ITEM_PREFIX}{item_id} {text}")
    return out


def format_text(root: KeyValueStore[str, Category]) -> str:
    return "".join(f"{line}\n" for line in format_lines(root))
