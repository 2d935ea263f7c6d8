"""Tests for the board text format."""
from __future__ import annotations

import pytest

from aac_board.board_format import format_lines, format_text, parse_lines, parse_text
from aac_board.category import Category
from aac_board.errors import BoardFormatError
from aac_board.store import KeyValueStore


def test_parse_sample(sample_text: str):
    root = parse_text(sample_text)

    assert root.keys() == ["img/food/plate.png", "img/clothing/hanger.png"]
    food = root.get("img/food/plate.png")
    assert food.get_name() == "food"
    assert food.items() == [
        ("img/food/icons8-french-fries-96.png", "french fries"),
        ("img/food/icons8-watermelon-96.png", "watermelon"),
    ]
    assert root.get("img/clothing/hanger.png").select("img/clothing/collaredshirt.png") == "collared shirt"


def test_only_first_space_separates():
    root = parse_lines(["a.png my favourite  things", ">b.png I would like  some"])
    cat = root.get("a.png")
    assert cat.get_name() == "my favourite  things"
    assert cat.select("b.png") == "I would like  some"


def test_blank_lines_and_crlf_are_tolerated():
    root = parse_text("a.png alpha\r\n\r\n   \n>b.png bee\r\n")
    assert root.get("a.png").get_name() == "alpha"
    assert root.get("a.png").select("b.png") == "bee"


def test_header_without_name():
    root = parse_lines(["a.png"])
    assert root.get("a.png").get_name() == ""


def test_empty_text_after_space_is_allowed():
    root = parse_lines(["a.png alpha", ">b.png "])
    assert root.get("a.png").select("b.png") == ""


@pytest.mark.parametrize(
    "lines, line_no",
    [
        ([">b.png orphan"], 1),
        (["a.png alpha", ">b.png"], 2),
        (["a.png alpha", "", "> text"], 3),
        (["a.png alpha", ">"], 2),
        ([" alpha"], 1),
    ],
)
def test_malformed_lines(lines, line_no):
    with pytest.raises(BoardFormatError) as excinfo:
        parse_lines(lines)
    assert excinfo.value.line_no == line_no
    assert f"line {line_no}" in str(excinfo.value)


def test_repeated_header_replaces_category():
    root = parse_lines(["a.png first", ">x.png x", "a.png second", ">y.png y"])
    assert root.size() == 1
    cat = root.get("a.png")
    assert cat.get_name() == "second"
    assert cat.get_image_ids() == ["y.png"]


def test_format_writes_every_item_of_every_category():
    root: KeyValueStore[str, Category] = KeyValueStore()
    small = Category("small")
    small.add_item("s1.png", "one")
    big = Category("big")
    for i in range(3):
        big.add_item(f"b{i}.png", f"item {i}")
    root.set("small.png", small)
    root.set("big.png", big)

    assert format_lines(root) == [
        "small.png small",
        ">s1.png one",
        "big.png big",
        ">b0.png item 0",
        ">b1.png item 1",
        ">b2.png item 2",
    ]


def test_format_round_trip(sample_text: str):
    assert format_text(parse_text(sample_text)) == sample_text


def test_format_empty_root():
    assert format_text(KeyValueStore()) == ""


@pytest.mark.parametrize(
    "cat_id, name, item_id, text",
    [
        ("has space.png", "x", "i.png", "t"),
        (">sneaky.png", "x", "i.png", "t"),
        ("c.png", "two\nlines", "i.png", "t"),
        ("c.png", "x", "", "t"),
        ("c.png", "x", "i.png", "line\r\nbreak"),
    ],
)
def test_format_rejects_unrepresentable_values(cat_id, name, item_id, text):
    root: KeyValueStore[str, Category] = KeyValueStore()
    cat = Category(name)
    cat.add_item(item_id, text)
    root.set(cat_id, cat)

    with pytest.raises(BoardFormatError):
        format_lines(root)


@pytest.mark.parametrize("odd", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_text_with_unicode_line_separators_round_trips(odd):
    root: KeyValueStore[str, Category] = KeyValueStore()
    cat = Category(f"cat{odd}name")
    cat.add_item("i.png", f"hello{odd}world")
    cat.add_item("j.png", "a b")
    root.set("c.png", cat)

    reloaded = parse_text(format_text(root))

    assert reloaded.keys() == ["c.png"]
    again = reloaded.get("c.png")
    assert again.get_name() == f"cat{odd}name"
    assert again.items() == [("i.png", f"hello{odd}world"), ("j.png", "a b")]


@pytest.mark.parametrize(
    "lines, line_no",
    [
        (["a\tb.png food"], 1),
        (["a.png food", ">x\x0cy.png fries"], 2),
    ],
)
def test_whitespace_in_ids_is_rejected_when_reading(lines, line_no):
    with pytest.raises(BoardFormatError) as excinfo:
        parse_lines(lines)
    assert excinfo.value.line_no == line_no
    assert "whitespace" in str(excinfo.value)
