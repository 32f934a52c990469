"""Tests for batch parsing of shopping list files."""

import logging

import pytest

from shoplist.item.loader import parse_lines, read_shopping_list
from shoplist.item.parser import EXPECTED_COMMA
from shoplist.item.scanner import NUMBER_TOO_LARGE

LIST_TEXT = """\
// 今週の買い物
1 lb. Chicken Breasts, $4.99

Chicken Breasts $4.99
3 Apples, $1.00
"""


def test_parse_lines_skips_comments_and_blank_lines():
    shopping_list = parse_lines(LIST_TEXT.splitlines(keepends=True))

    assert [item.name for item in shopping_list.items] == ["Chicken Breasts", "Apples"]
    assert shopping_list.total_cents == 799


def test_bad_line_does_not_stop_the_batch(caplog):
    with caplog.at_level(logging.WARNING):
        shopping_list = parse_lines(LIST_TEXT.splitlines())

    assert len(shopping_list.items) == 2
    assert len(shopping_list.failures) == 1

    failure = shopping_list.failures[0]
    assert failure.line_number == 4
    assert failure.line == "Chicken Breasts $4.99"
    assert failure.reason == EXPECTED_COMMA
    assert "Chicken Breasts $4.99" in caplog.text


def test_windows_line_endings():
    shopping_list = parse_lines(["3 Apples, $1.00\r\n", "Bread, $2.50\r\n"])
    assert [item.name for item in shopping_list.items] == ["Apples", "Bread"]
    assert not shopping_list.failures


def test_read_shopping_list(tmp_path):
    path = tmp_path / "groceries.txt"
    path.write_text(LIST_TEXT, encoding="utf-8")

    shopping_list = read_shopping_list(path)

    assert shopping_list.source == str(path)
    assert len(shopping_list.items) == 2
    assert len(shopping_list.failures) == 1


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_shopping_list(tmp_path / "missing.txt")


def test_number_with_too_many_digits_does_not_stop_the_batch():
    lines = ["1" * 400 + " lb. Beef, $5.99/lb", "3 Apples, $1.00"]

    shopping_list = parse_lines(lines)

    assert [item.name for item in shopping_list.items] == ["Apples"]
    assert shopping_list.failures[0].line_number == 1
    assert shopping_list.failures[0].reason == NUMBER_TOO_LARGE
    assert shopping_list.total_cents == 300
