#!/usr/bin/env python3
"""
買い物リスト集計サンプル

使い方:
1. (任意) .env ファイルに SHOPLIST_UNIT=kg などを設定
2. このスクリプトを実行: python example.py [買い物リストファイル]
"""

import os
import sys

from dotenv import load_dotenv

from shoplist import (
    MalformedLineError,
    parse_item,
    pick_unit,
    read_shopping_list,
    render_table,
    total_price_cents,
)
from shoplist.display import format_price, save_list_image

# .envファイルを読み込む
load_dotenv()

SHOPLIST_UNIT = os.getenv("SHOPLIST_UNIT", "lb")


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "sample_list.txt"
    preferred_unit = pick_unit(SHOPLIST_UNIT)

    # 1. 1行だけパース
    print("=== 1行パース ===")
    item = parse_item("2 lb. Ground Beef, $5.99/2 lb")
    print(item)
    print(f"合計: {format_price(total_price_cents(item))}")

    # 2. 書式エラー
    print("\n=== 書式エラー ===")
    try:
        parse_item("Chicken Breasts $4.99")
    except MalformedLineError as e:
        print(f"エラー: {e.reason}")

    # 3. ファイル全体を表示
    print(f"\n=== {path} ({preferred_unit.value}) ===")
    try:
        shopping_list = read_shopping_list(path)
    except FileNotFoundError as e:
        print(f"エラー: {e}")
        sys.exit(1)

    print(render_table(shopping_list.items, preferred_unit))
    for failure in shopping_list.failures:
        print(f"  [スキップ] {failure.line_number}行目: {failure.line} ({failure.reason})")

    # 4. 画像として保存
    print("\n=== 画像保存 ===")
    filepath = save_list_image(shopping_list, preferred_unit)
    print(f"保存しました: {filepath}")


if __name__ == "__main__":
    main()
