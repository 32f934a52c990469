"""Tests for column formatting, the text table and image rendering."""

import logging

import pytest
from PIL import Image

from shoplist.display import (
    format_item_columns,
    format_price,
    pick_unit,
    render_list_image,
    render_table,
    save_list_image,
)
from shoplist.item.models import ShoppingList
from shoplist.item.parser import parse_item
from shoplist.units import Unit


@pytest.mark.parametrize("cents, text", [
    (499, "$4.99"),
    (5, "$0.05"),
    (0, "$0.00"),
    (123456, "$1,234.56"),
    (-250, "-$2.50"),
])
def test_format_price(cents, text):
    assert format_price(cents) == text


@pytest.mark.parametrize("line, unit, count, total, per_unit", [
    ("1 lb. Chicken Breasts, $4.99", Unit.POUND, "1 lb.", "$4.99", "@ $4.99 / ea."),
    ("1 lb. Chicken Breasts, $4.99", Unit.KILOGRAM, "0.45 kg.", "$4.99", "@ $4.99 / ea."),
    ("3 Bananas, 3/$1.00", Unit.POUND, "3", "$1.00", "@ 3 / $1.00"),
    ("Ground Beef, $5.99/lb", Unit.POUND, "1", "$5.99", "@ $5.99 / lb."),
    ("2 lb. Ground Beef, $5.99/2 lb", Unit.POUND, "2 lb.", "$5.99", "@ $5.99 / 2 lb."),
    ("2 lb. Ground Beef, $5.99/2 lb", Unit.KILOGRAM, "0.91 kg.", "$5.99", "@ $5.99 / 0.91 kg."),
    ("Rice, $3.49/kg", Unit.POUND, "1", "$3.49", "@ $1.58 / lb."),
    ("8 oz. Cheddar, $6.99/lb", Unit.GRAM, "227 g.", "$3.50", "@ $15.41 / kg."),
    ("8 oz. Cheddar, $6.99/lb", Unit.OUNCE, "8 oz.", "$3.50", "@ $6.99 / lb."),
])
def test_format_item_columns(line, unit, count, total, per_unit):
    columns = format_item_columns(parse_item(line), unit)
    assert columns.count == count
    assert columns.total_price == total
    assert columns.per_unit == per_unit


def test_pick_unit():
    assert pick_unit("kg") is Unit.KILOGRAM
    assert pick_unit("oz") is Unit.OUNCE


def test_pick_unit_falls_back_to_pounds(caplog):
    with caplog.at_level(logging.WARNING):
        assert pick_unit("stone") is Unit.POUND
    assert "stone" in caplog.text


def test_render_table():
    items = [
        parse_item("1 lb. Chicken Breasts, $4.99"),
        parse_item("3 Apples, $1.00"),
    ]
    lines = render_table(items, Unit.POUND).split("\n")

    assert lines[0] == "Chicken Breasts     1 lb.     $4.99     @ $4.99 / ea."
    assert lines[1].startswith("Apples" + " " * 14 + "3")
    assert lines[2] == ""
    assert lines[3] == "Total: $7.99"


def test_render_table_empty():
    assert render_table([], Unit.POUND) == "\nTotal: $0.00"


def _sample_list():
    return ShoppingList(
        source="groceries.txt",
        items=[
            parse_item("1 lb. Chicken Breasts, $4.99"),
            parse_item("2 lb. Ground Beef, $5.99/2 lb"),
        ],
    )


def test_render_list_image():
    img = render_list_image(_sample_list(), Unit.KILOGRAM, font_size=16, width=600)
    assert isinstance(img, Image.Image)
    assert img.mode == "RGB"
    assert img.width == 600
    assert img.height > 100


def test_save_list_image(tmp_path):
    filepath = save_list_image(_sample_list(), Unit.POUND, output_dir=str(tmp_path / "out"))
    assert filepath == tmp_path / "out" / "shoplist_groceries.png"
    assert filepath.exists()
    with Image.open(filepath) as img:
        assert img.format == "PNG"
