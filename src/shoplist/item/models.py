"""買い物リスト データモデル定義"""

from dataclasses import dataclass, field

from shoplist.units import CountType


@dataclass(frozen=True)
class ShoppingListItem:
    """買い物リストの1行をパースした商品"""
    name: str
    price_cents_per_unit: int          # per_unit_count 単位あたりの価格 (セント)
    count: float                       # 購入する個数 or 重量
    count_type: CountType
    per_unit_count: int = 1            # "$5.00/2 lb" の 2
    per_unit_count_type: CountType = CountType.QUANTITY


@dataclass(frozen=True)
class LineFailure:
    """パースできなかった行"""
    line_number: int
    line: str
    reason: str


@dataclass
class ShoppingList:
    """1ファイル分の買い物リスト"""
    source: str = ""
    items: list[ShoppingListItem] = field(default_factory=list)
    failures: list[LineFailure] = field(default_factory=list)

    @property
    def total_cents(self) -> int:
        """全商品の合計金額 (セント)"""
        from .pricing import list_total_cents

        return list_total_cents(self.items)
