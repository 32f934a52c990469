"""買い物リストファイルの読み込み"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .models import LineFailure, ShoppingList
from .parser import MalformedLineError, parse_item

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"


def parse_lines(lines: Iterable[str], source: str = "") -> ShoppingList:
    """複数行をパースする。

    空行と "//" で始まるコメント行は読み飛ばす。
    パースできない行は警告を出して failures に記録し、次の行へ進む。
    """
    shopping_list = ShoppingList(source=source)

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        try:
            item = parse_item(line)
        except MalformedLineError as e:
            logger.warning(
                "Failed to parse line %d %r: %s; ignoring", line_number, line, e.reason
            )
            shopping_list.failures.append(
                LineFailure(line_number=line_number, line=line, reason=e.reason)
            )
            continue

        shopping_list.items.append(item)

    return shopping_list


def read_shopping_list(path: Union[str, Path]) -> ShoppingList:
    """買い物リストファイル (UTF-8, 1行1商品) を読み込む"""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Shopping list not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return parse_lines(f, source=str(path))
