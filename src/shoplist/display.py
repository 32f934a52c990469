"""
買い物リストの表示

商品ごとの表示カラム (商品名 / 数量 / 合計 / 単価) を組み立て、
テキストの表、または画像としてレンダリングする。

表示単位 (preferred_unit) に合わせて重量と単価を換算する。
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, ImageDraw, ImageFont

from shoplist.item.models import ShoppingList, ShoppingListItem
from shoplist.item.pricing import (
    converted_per_unit,
    display_weight,
    list_total_cents,
    total_price_cents,
)
from shoplist.item.scanner import is_whole, to_precision
from shoplist.units import (
    CountType,
    Unit,
    convert_weight,
    count_type_to_string,
    count_type_to_unit,
    string_to_unit,
    unit_to_count_type,
    unit_to_string,
)

logger = logging.getLogger(__name__)

DEFAULT_UNIT = Unit.POUND

# カラム幅 (文字数)
NAME_WIDTH = 20
COUNT_WIDTH = 10
PRICE_WIDTH = 10
PER_UNIT_WIDTH = 24


@dataclass(frozen=True)
class ItemColumns:
    """1商品分の表示カラム"""
    name: str
    count: str
    total_price: str
    per_unit: str


def pick_unit(text: Optional[str]) -> Unit:
    """表示単位を選ぶ。認識できなければポンド。"""
    unit = string_to_unit(text) if text else None
    if unit is None:
        logger.warning('Invalid unit "%s"; using pounds', text)
        return DEFAULT_UNIT
    return unit


def format_number(num: float) -> str:
    """余計な 0 を付けずに数値を表示する ("2", "2.5", "0.91")"""
    return f"{num:g}"


def format_price(cents: int) -> str:
    """セントを "$1,234.56" 形式にする"""
    sign = "-" if cents < 0 else ""
    dollars, rem = divmod(abs(int(cents)), 100)
    return f"{sign}${dollars:,}.{rem:02d}"


def _format_count(item: ShoppingListItem, preferred_unit: Unit) -> str:
    unit = count_type_to_unit(item.count_type)
    if unit is None:
        return format_number(item.count)

    weight = convert_weight(item.count, unit, preferred_unit)
    shown = display_weight(weight, preferred_unit)
    return f"{format_number(shown)} {unit_to_string(preferred_unit)}."


def _format_per_unit(item: ShoppingListItem, preferred_unit: Unit) -> str:
    per_unit_unit = count_type_to_unit(item.per_unit_count_type)

    if per_unit_unit is None:
        if item.per_unit_count != 1:
            # 数量割引: "@ 3 / $1.00"
            return f"@ {item.per_unit_count} / {format_price(item.price_cents_per_unit)}"
        return (
            f"@ {format_price(item.price_cents_per_unit)} / "
            f"{count_type_to_string(CountType.QUANTITY)}."
        )

    converted = converted_per_unit(
        item.per_unit_count,
        per_unit_unit,
        item.price_cents_per_unit,
        preferred_unit,
    )

    count_str = ""
    if is_whole(converted.per_unit_count):
        if converted.per_unit_count > 1:
            count_str = f"{int(converted.per_unit_count)} "
    else:
        count_str = f"{format_number(to_precision(converted.per_unit_count, 2))} "

    unit_str = count_type_to_string(unit_to_count_type(converted.unit))
    return f"@ {format_price(converted.price_cents_per_unit)} / {count_str}{unit_str}."


def format_item_columns(item: ShoppingListItem, preferred_unit: Unit) -> ItemColumns:
    """商品を表示カラムに変換する。

    Args:
        item: パース済みの商品
        preferred_unit: 重量を表示する単位

    Returns:
        ItemColumns
    """
    return ItemColumns(
        name=item.name,
        count=_format_count(item, preferred_unit),
        total_price=format_price(total_price_cents(item)),
        per_unit=_format_per_unit(item, preferred_unit),
    )


def format_row(columns: ItemColumns) -> str:
    return (
        columns.name.ljust(NAME_WIDTH)
        + columns.count.ljust(COUNT_WIDTH)
        + columns.total_price.ljust(PRICE_WIDTH)
        + columns.per_unit.ljust(PER_UNIT_WIDTH)
    ).rstrip()


def format_total(items: Iterable[ShoppingListItem]) -> str:
    return f"Total: {format_price(list_total_cents(items))}"


def render_table(items: Iterable[ShoppingListItem], preferred_unit: Unit) -> str:
    """商品一覧をカラムを揃えたテキストの表にする。最後の行は合計。"""
    items = list(items)
    rows = [format_row(format_item_columns(item, preferred_unit)) for item in items]
    rows.append("")
    rows.append(format_total(items))
    return "\n".join(rows)


# ── 画像レンダリング ──

def render_list_image(
    shopping_list: ShoppingList,
    preferred_unit: Unit = DEFAULT_UNIT,
    font_size: int = 20,
    width: int = 720,
    padding: int = 20,
    bg_color: str = "white",
    text_color: str = "black",
) -> Image.Image:
    """買い物リストの表を画像にレンダリング。

    Args:
        shopping_list: ShoppingList
        preferred_unit: 重量を表示する単位
        font_size: フォントサイズ
        width: 画像幅 (px)
        padding: 余白 (px)

    Returns:
        PIL.Image
    """
    font = _find_font(font_size)
    bold_font = _find_font(int(font_size * 1.2), bold=True)

    line_height = font_size + 6
    bold_line_height = int(font_size * 1.2) + 8

    lines = render_table(shopping_list.items, preferred_unit).split("\n")
    total_line = lines.pop()

    total_height = padding + len(lines) * line_height + bold_line_height + padding
    if shopping_list.source:
        total_height += bold_line_height

    img = Image.new("RGB", (width, total_height), bg_color)
    draw = ImageDraw.Draw(img)
    y = padding

    # 見出し: ファイル名
    if shopping_list.source:
        draw.text((padding, y), Path(shopping_list.source).name, fill=text_color, font=bold_font)
        y += bold_line_height

    for line in lines:
        draw.text((padding, y), line, fill=text_color, font=font)
        y += line_height

    # 合計行は太字
    draw.text((padding, y), total_line, fill=text_color, font=bold_font)

    return img


def save_list_image(
    shopping_list: ShoppingList,
    preferred_unit: Unit = DEFAULT_UNIT,
    output_dir: str = ".",
    prefix: str = "shoplist",
    **render_kwargs,
) -> Path:
    """買い物リストを画像ファイルとして保存。

    Returns:
        保存先の Path
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    img = render_list_image(shopping_list, preferred_unit, **render_kwargs)

    # ファイル名: shoplist_groceries.png
    stem = Path(shopping_list.source).stem if shopping_list.source else "list"
    filepath = out / f"{prefix}_{stem}.png"
    img.save(str(filepath))
    return filepath


def _find_font(size: int, bold: bool = False):
    """利用可能な等幅フォントを探す。見つからなければ Pillow 内蔵フォント。"""
    if bold:
        font_paths = [
            # Linux
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationMono-Bold.ttf",
            # macOS
            "/System/Library/Fonts/Menlo.ttc",
        ]
    else:
        font_paths = [
            # Linux
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
            "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
            # macOS
            "/System/Library/Fonts/Menlo.ttc",
            "/Library/Fonts/Courier New.ttf",
        ]
    for path in font_paths:
        try:
            return ImageFont.truetype(path, size)
        except (OSError, IOError):
            continue
    return ImageFont.load_default()
