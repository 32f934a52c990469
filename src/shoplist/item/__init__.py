"""買い物リスト行のパースと金額計算"""

from .loader import parse_lines, read_shopping_list
from .models import LineFailure, ShoppingList, ShoppingListItem
from .parser import MalformedLineError, parse_item
from .pricing import (
    ConvertedPerUnit,
    UnitInvariantError,
    converted_per_unit,
    display_weight,
    list_total_cents,
    total_price_cents,
)

__all__ = [
    "ConvertedPerUnit",
    "LineFailure",
    "MalformedLineError",
    "ShoppingList",
    "ShoppingListItem",
    "UnitInvariantError",
    "converted_per_unit",
    "display_weight",
    "list_total_cents",
    "parse_item",
    "parse_lines",
    "read_shopping_list",
    "total_price_cents",
]
