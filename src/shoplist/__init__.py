"""shoplist - shopping list parser, price calculator and unit-converting display"""

__version__ = "0.1.0"

from shoplist.display import format_item_columns, pick_unit, render_table
from shoplist.item import (
    MalformedLineError,
    ShoppingList,
    ShoppingListItem,
    parse_item,
    read_shopping_list,
    total_price_cents,
)
from shoplist.units import CountType, System, Unit, convert_weight

__all__ = [
    "CountType",
    "MalformedLineError",
    "ShoppingList",
    "ShoppingListItem",
    "System",
    "Unit",
    "convert_weight",
    "format_item_columns",
    "parse_item",
    "pick_unit",
    "read_shopping_list",
    "render_table",
    "total_price_cents",
]
