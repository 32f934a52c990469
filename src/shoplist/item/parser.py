"""買い物リストの1行を商品にパースする

行の書式:
    [数量][ 単位[.]] 商品名[ ],[ ][個数/]$ドル.セント[/[個数][ ]単位][.]

例:
    "1 lb. Chicken Breasts, $4.99"
    "3 Apples, 3/$1.00"
    "2 lb. Ground Beef, $5.99/2 lb"

2段階パース:
1. 価格部: 行末から 単位・個数・価格・数量割引 を切り出す
2. 数量部: 行頭から 数量・単位 を切り出す
残った部分がそのまま商品名になる。
"""

import logging
from dataclasses import dataclass

from shoplist.units import CountType

from .models import ShoppingListItem
from .scanner import (
    NUMBER_TOO_LARGE,
    Scanned,
    TextCursor,
    is_ascii_digit,
    is_whole,
    scan_int_from_back,
    scan_number_from_front,
    scan_price_from_back,
)

logger = logging.getLogger(__name__)

EXPECTED_SLASH = "expected slash before price"
EXPECTED_DOLLAR_SIGN = "expected dollar sign before price"
EXPECTED_UNIT_COUNT = "expected unit count before price"
EXPECTED_COMMA = "expected comma before price"
EXPECTED_UNIT = "expected unit of measurement after quantity"
EXPECTED_SPACE_AFTER_UNIT = "expected space after unit of measurement"
EXPECTED_NAME = "expected item name"
ZERO_UNIT_COUNT = "unit count must be greater than zero"

# 長いトークンから順に試す ("lbs" より先に "lb"、"kg" より先に "g" を試すと誤マッチする)
_WEIGHT_TOKENS = (
    ("lbs", CountType.POUND),
    ("lb", CountType.POUND),
    ("oz", CountType.OUNCE),
    ("kg", CountType.KILOGRAM),
    ("g", CountType.GRAM),
)
_PER_UNIT_TOKENS = _WEIGHT_TOKENS + (("ea", CountType.QUANTITY),)


class MalformedLineError(Exception):
    """行が書式に合わない"""
    def __init__(self, reason: str, line: str = ""):
        self.reason = reason
        self.line = line
        super().__init__(f"Malformed line [{reason}]: {line!r}")


@dataclass(frozen=True)
class _PriceTail:
    """行末から切り出した価格部"""
    price_cents: int
    per_unit_count: int
    per_unit_count_type: CountType

    @property
    def expects_quantity(self) -> bool:
        return (
            self.per_unit_count_type is CountType.QUANTITY
            or self.per_unit_count != 1
        )


@dataclass(frozen=True)
class _Lead:
    """行頭から切り出した数量部"""
    count: float
    count_type: CountType


def parse_item(line: str) -> ShoppingListItem:
    """1行を ShoppingListItem にパースする。

    Args:
        line: 買い物リストの1行 (改行を含まない)

    Returns:
        ShoppingListItem

    Raises:
        MalformedLineError: 書式に合わない行
    """
    cursor = TextCursor(line)

    tail = _read_price_tail(cursor, line)
    lead = _read_lead(cursor, line, tail.expects_quantity)

    name = cursor.view
    if not name:
        raise MalformedLineError(EXPECTED_NAME, line)

    return ShoppingListItem(
        name=name,
        price_cents_per_unit=tail.price_cents,
        count=lead.count,
        count_type=lead.count_type,
        per_unit_count=tail.per_unit_count,
        per_unit_count_type=tail.per_unit_count_type,
    )


def _take_scanned(scanned: Scanned, line: str) -> Scanned:
    if not scanned.ok:
        raise MalformedLineError(scanned.error, line)
    return scanned


def _read_per_unit_count(cursor: TextCursor, line: str) -> Scanned:
    scanned = _take_scanned(scan_int_from_back(cursor), line)
    if scanned.found:
        if scanned.value == 0:
            raise MalformedLineError(ZERO_UNIT_COUNT, line)
        cursor.drop_back(scanned.length)
    return scanned


def _read_price_tail(cursor: TextCursor, line: str) -> _PriceTail:
    """行末から "[個数/]$価格[/[個数][ ]単位][.]" を切り出す"""
    # 末尾のピリオドは省略可
    cursor.take_suffix(".")

    per_unit_count_type = cursor.take_first_suffix(_PER_UNIT_TOKENS)
    has_per_unit_count_type = per_unit_count_type is not None
    if not has_per_unit_count_type:
        per_unit_count_type = CountType.QUANTITY

    # 単位の前のスペースは省略可
    cursor.take_suffix(" ")

    per_unit_count = 1
    if has_per_unit_count_type:
        scanned = _read_per_unit_count(cursor, line)
        if scanned.found:
            per_unit_count = scanned.value
        if not cursor.take_suffix("/"):
            raise MalformedLineError(EXPECTED_SLASH, line)

    price = _take_scanned(scan_price_from_back(cursor), line)
    cursor.drop_back(price.length)

    if not cursor.take_suffix("$"):
        raise MalformedLineError(EXPECTED_DOLLAR_SIGN, line)

    # 数量割引: "3/$1.00"
    if not has_per_unit_count_type and cursor.take_suffix("/"):
        scanned = _read_per_unit_count(cursor, line)
        if not scanned.found:
            raise MalformedLineError(EXPECTED_UNIT_COUNT, line)
        per_unit_count = scanned.value
        per_unit_count_type = CountType.QUANTITY

    cursor.take_suffix(" ")
    if not cursor.take_suffix(","):
        raise MalformedLineError(EXPECTED_COMMA, line)

    return _PriceTail(
        price_cents=price.value,
        per_unit_count=per_unit_count,
        per_unit_count_type=per_unit_count_type,
    )


def _starts_with_number(cursor: TextCursor) -> bool:
    first = cursor.first()
    return first is not None and (is_ascii_digit(first) or first == ".")


def _read_lead(cursor: TextCursor, line: str, expects_quantity: bool) -> _Lead:
    """行頭から "[数量][ 単位[.] ]" を切り出す"""
    scanned = scan_number_from_front(cursor)

    if scanned.ok:
        count = scanned.value
        cursor.skip_front(scanned.length)
    elif scanned.error == NUMBER_TOO_LARGE:
        raise MalformedLineError(scanned.error, line)
    elif expects_quantity or not _starts_with_number(cursor):
        # 数量が書かれていない行は「1個」とみなす ("lb. Rice" のような単位は続けて読む)
        logger.debug("No leading quantity in %r; assuming 1", line)
        count = 1.0
    else:
        raise MalformedLineError(scanned.error, line)

    # 数量の後のスペースは省略可
    cursor.take_prefix(" ")

    count_type = cursor.take_first_prefix(_WEIGHT_TOKENS)
    if count_type is None:
        if not is_whole(count):
            raise MalformedLineError(EXPECTED_UNIT, line)
        return _Lead(count=count, count_type=CountType.QUANTITY)

    # 単位の後のピリオドは省略可、スペースは必須
    cursor.take_prefix(".")
    if not cursor.take_prefix(" "):
        raise MalformedLineError(EXPECTED_SPACE_AFTER_UNIT, line)

    return _Lead(count=count, count_type=count_type)
