"""
pricing.py — 商品ごとの合計金額と、表示単位に合わせた単価の計算

合計金額のルール:
  1. 単価が個数建て (QUANTITY) で数量割引 ("3/$1.00") あり → 価格 × (数量 / 割引個数)
  2. 購入数量か単価のどちらかが個数建て → 価格 × 数量
  3. 両方とも重量 → 購入重量を単価の単位に換算し、価格 × (換算重量 / 単価の個数)
"""

from dataclasses import dataclass
from typing import Iterable

from shoplist.units import (
    CountType,
    System,
    Unit,
    convert_weight,
    count_type_to_unit,
    unit_system,
)

from .models import ShoppingListItem
from .scanner import is_whole, round_cents, to_precision

# 表示時の小数点以下の桁数
_DISPLAY_PRECISION = {
    Unit.OUNCE: 1,
    Unit.POUND: 2,
    Unit.KILOGRAM: 2,
    Unit.GRAM: 0,
}

# 別の系に換算するときの相手単位
_CROSS_SYSTEM_PARTNER = {
    System.IMPERIAL: Unit.KILOGRAM,
    System.METRIC: Unit.POUND,
}


class UnitInvariantError(RuntimeError):
    """重量のはずの CountType に対応する単位が無い (パース済みの商品では起こらない)"""
    def __init__(self, count_type: CountType):
        self.count_type = count_type
        super().__init__(f"No unit of measurement for count type {count_type!r}")


@dataclass(frozen=True)
class ConvertedPerUnit:
    """表示単位に換算した単価"""
    per_unit_count: float
    unit: Unit
    price_cents_per_unit: int


def _require_unit(count_type: CountType) -> Unit:
    unit = count_type_to_unit(count_type)
    if unit is None:
        raise UnitInvariantError(count_type)
    return unit


def total_price_cents(item: ShoppingListItem) -> int:
    """商品の合計金額 (セント、1セント未満は四捨五入)"""
    price = item.price_cents_per_unit

    if (
        item.count_type is CountType.QUANTITY
        or item.per_unit_count_type is CountType.QUANTITY
    ):
        if (
            item.per_unit_count_type is CountType.QUANTITY
            and item.per_unit_count != 1
        ):
            return round_cents(price * (item.count / item.per_unit_count))
        return round_cents(price * item.count)

    unit = _require_unit(item.count_type)
    per_unit_unit = _require_unit(item.per_unit_count_type)

    weight = convert_weight(item.count, unit, per_unit_unit)
    return round_cents(price * (weight / item.per_unit_count))


def list_total_cents(items: Iterable[ShoppingListItem]) -> int:
    return sum(total_price_cents(item) for item in items)


def converted_per_unit(
    per_unit_count: int,
    unit: Unit,
    price_cents_per_unit: int,
    preferred_unit: Unit,
) -> ConvertedPerUnit:
    """単価を表示単位の系に合わせて換算する。

    同じ系なら何もしない。別の系なら imperial→kg, metric→lb に換算する。
    単価の個数が2以上 ("$5/2 lb") なら価格はそのままで個数を換算し、
    1以下 ("$5/lb") なら個数を1のまま価格を換算する。

    Args:
        per_unit_count: 単価の個数
        unit: 単価の単位
        price_cents_per_unit: 単価 (セント)
        preferred_unit: 表示したい単位

    Returns:
        ConvertedPerUnit
    """
    system = unit_system(unit)
    if system is unit_system(preferred_unit):
        return ConvertedPerUnit(
            per_unit_count=float(per_unit_count),
            unit=unit,
            price_cents_per_unit=price_cents_per_unit,
        )

    target = _CROSS_SYSTEM_PARTNER[system]
    converted_count = convert_weight(float(per_unit_count), unit, target)

    if per_unit_count > 1:
        return ConvertedPerUnit(
            per_unit_count=converted_count,
            unit=target,
            price_cents_per_unit=price_cents_per_unit,
        )

    ratio = per_unit_count / converted_count
    return ConvertedPerUnit(
        per_unit_count=float(per_unit_count),
        unit=target,
        price_cents_per_unit=round_cents(price_cents_per_unit * ratio),
    )


def display_weight(weight: float, unit: Unit) -> float:
    """表示用に重量を丸める。整数はそのまま。"""
    if is_whole(weight):
        return weight
    return to_precision(weight, _DISPLAY_PRECISION[unit])
