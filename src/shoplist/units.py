"""
重量単位モジュール

買い物リストで扱う単位 (oz / lb / kg / g) と数え方 (CountType) の定義、
単位間の相互変換、表記文字列との変換を行う。

変換はポンド・キログラムを軸に行う:
  oz ⇄ lb ⇄ kg ⇄ g
"""

from enum import Enum
from typing import Optional

# 1ポンドあたりのオンス数
OZ_PER_LB = 16
# 1ポンドあたりのキログラム数 (国際ポンドの定義値)
KG_PER_LB = 0.45359237
# 1キログラムあたりのグラム数
GRAM_PER_KG = 1000


class Unit(Enum):
    """重量単位"""
    OUNCE = "oz"
    POUND = "lb"
    KILOGRAM = "kg"
    GRAM = "g"


class System(Enum):
    """度量衡系"""
    IMPERIAL = "imperial"
    METRIC = "metric"


class CountType(Enum):
    """商品の数え方。重量単位のいずれか、または個数 (QUANTITY)。"""
    OUNCE = "oz"
    POUND = "lb"
    KILOGRAM = "kg"
    GRAM = "g"
    QUANTITY = "ea"


class UnknownUnitError(ValueError):
    """列挙外の単位が渡された (到達しないはずのケース)"""
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown unit: {value!r}")


_UNIT_SYSTEMS = {
    Unit.OUNCE: System.IMPERIAL,
    Unit.POUND: System.IMPERIAL,
    Unit.KILOGRAM: System.METRIC,
    Unit.GRAM: System.METRIC,
}

_UNIT_TO_COUNT_TYPE = {
    Unit.OUNCE: CountType.OUNCE,
    Unit.POUND: CountType.POUND,
    Unit.KILOGRAM: CountType.KILOGRAM,
    Unit.GRAM: CountType.GRAM,
}

_COUNT_TYPE_TO_UNIT = {v: k for k, v in _UNIT_TO_COUNT_TYPE.items()}


def unit_system(unit: Unit) -> System:
    """単位が属する度量衡系を返す"""
    try:
        return _UNIT_SYSTEMS[unit]
    except KeyError:
        raise UnknownUnitError(unit) from None


def count_type_to_unit(count_type: CountType) -> Optional[Unit]:
    """CountType を Unit に変換する。QUANTITY には対応する単位がないので None。"""
    if count_type is CountType.QUANTITY:
        return None
    try:
        return _COUNT_TYPE_TO_UNIT[count_type]
    except KeyError:
        raise UnknownUnitError(count_type) from None


def unit_to_count_type(unit: Unit) -> CountType:
    try:
        return _UNIT_TO_COUNT_TYPE[unit]
    except KeyError:
        raise UnknownUnitError(unit) from None


def unit_to_string(unit: Unit) -> str:
    """単位の略記 ("oz", "lb", "kg", "g")"""
    if not isinstance(unit, Unit):
        raise UnknownUnitError(unit)
    return unit.value


def count_type_to_string(count_type: CountType) -> str:
    """数え方の略記。個数は "ea"。"""
    if not isinstance(count_type, CountType):
        raise UnknownUnitError(count_type)
    return count_type.value


def string_to_unit(text: str) -> Optional[Unit]:
    """略記から単位を引く。大文字小文字は区別し、一致しなければ None。"""
    for unit in Unit:
        if unit.value == text:
            return unit
    return None


# ── 重量変換 ──

def ounces_to_pounds(ounces: float) -> float:
    return ounces / OZ_PER_LB


def pounds_to_ounces(pounds: float) -> float:
    return pounds * OZ_PER_LB


def pounds_to_kilograms(pounds: float) -> float:
    return pounds * KG_PER_LB


def kilograms_to_pounds(kilograms: float) -> float:
    return kilograms / KG_PER_LB


def grams_to_kilograms(grams: float) -> float:
    return grams / GRAM_PER_KG


def kilograms_to_grams(kilograms: float) -> float:
    return kilograms * GRAM_PER_KG


def _to_pivot(value: float, unit: Unit) -> float:
    """重量を各系の軸単位 (imperial→lb, metric→kg) に揃える"""
    if unit is Unit.OUNCE:
        return ounces_to_pounds(value)
    if unit is Unit.GRAM:
        return grams_to_kilograms(value)
    if unit in (Unit.POUND, Unit.KILOGRAM):
        return value
    raise UnknownUnitError(unit)


def _from_pivot(value: float, unit: Unit) -> float:
    """軸単位 (lb または kg) の重量を目的の単位に戻す"""
    if unit is Unit.OUNCE:
        return pounds_to_ounces(value)
    if unit is Unit.GRAM:
        return kilograms_to_grams(value)
    if unit in (Unit.POUND, Unit.KILOGRAM):
        return value
    raise UnknownUnitError(unit)


def convert_weight(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """重量を別の単位に変換する。

    同じ単位同士なら入力値をそのまま返す。
    異なる系をまたぐ場合は lb ⇄ kg を経由する
    (例: oz → lb → kg, g → kg → lb → oz)。

    Args:
        value: 変換元の重量
        from_unit: 変換元の単位
        to_unit: 変換先の単位

    Returns:
        変換後の重量
    """
    if from_unit is to_unit:
        return value

    pivot = _to_pivot(value, from_unit)

    from_system = unit_system(from_unit)
    to_system = unit_system(to_unit)
    if from_system is System.IMPERIAL and to_system is System.METRIC:
        pivot = pounds_to_kilograms(pivot)
    elif from_system is System.METRIC and to_system is System.IMPERIAL:
        pivot = kilograms_to_pounds(pivot)

    return _from_pivot(pivot, to_unit)
