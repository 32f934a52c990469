#!/usr/bin/env python3
"""
買い物リスト CLI

Usage:
    shoplist show groceries.txt [--unit kg]
    shoplist total groceries.txt
    shoplist image groceries.txt [--unit g] [--output-dir out]
    shoplist bench [--iterations 100000]

.env の SHOPLIST_UNIT で表示単位の既定値 (lb / oz / kg / g) を変更できる。
"""

import argparse
import logging
import os
import sys
import time

from dotenv import load_dotenv

load_dotenv()

BENCH_LINE = "1 lb. Chicken Breasts, $4.99"


def _load_or_exit(path: str):
    from shoplist.item import read_shopping_list

    try:
        return read_shopping_list(path)
    except FileNotFoundError as e:
        print(f"エラー: ファイルが見つかりません: {e}", file=sys.stderr)
        sys.exit(1)


def _report_failures(shopping_list):
    if shopping_list.failures:
        print(
            f"{len(shopping_list.failures)} 行をスキップしました (パースエラー)",
            file=sys.stderr,
        )


def cmd_show(args):
    """買い物リストを表で表示"""
    from shoplist.display import pick_unit, render_table

    preferred_unit = pick_unit(args.unit)
    shopping_list = _load_or_exit(args.file)

    print(render_table(shopping_list.items, preferred_unit))
    _report_failures(shopping_list)


def cmd_total(args):
    """合計金額のみ表示"""
    from shoplist.display import format_total

    shopping_list = _load_or_exit(args.file)

    print(format_total(shopping_list.items))
    _report_failures(shopping_list)


def cmd_image(args):
    """買い物リストを画像として保存"""
    from shoplist.display import pick_unit, save_list_image

    preferred_unit = pick_unit(args.unit)
    shopping_list = _load_or_exit(args.file)

    filepath = save_list_image(
        shopping_list,
        preferred_unit,
        output_dir=args.output_dir,
        font_size=args.font_size,
    )
    print(f"保存しました: {filepath} ({len(shopping_list.items)} 品目)")
    _report_failures(shopping_list)


def cmd_bench(args):
    """パーサーの速度を計測"""
    from shoplist.item import parse_item

    # ウォームアップ
    for _ in range(min(args.iterations, 10000)):
        parse_item(args.line)

    t1 = time.perf_counter()
    for _ in range(args.iterations):
        parse_item(args.line)
    t2 = time.perf_counter()

    ns_per_parse = (t2 - t1) * 1e9 / args.iterations
    print(f"parse_item: {ns_per_parse:.2f}ns ({args.iterations} 回)")


def main(argv=None):
    logging.basicConfig(
        level=os.getenv("SHOPLIST_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s: %(message)s",
    )

    default_unit = os.getenv("SHOPLIST_UNIT", "lb")
    default_font_size = int(os.getenv("SHOPLIST_FONT_SIZE", "20"))

    parser = argparse.ArgumentParser(prog="shoplist", description="買い物リストの集計")
    subparsers = parser.add_subparsers(dest="command")

    # show コマンド
    p_show = subparsers.add_parser("show", help="買い物リストを表で表示")
    p_show.add_argument("file", help="買い物リストファイル")
    p_show.add_argument("--unit", default=default_unit, help=f"表示単位 (デフォルト: {default_unit})")

    # total コマンド
    p_total = subparsers.add_parser("total", help="合計金額を表示")
    p_total.add_argument("file", help="買い物リストファイル")

    # image コマンド
    p_image = subparsers.add_parser("image", help="買い物リストを画像として保存")
    p_image.add_argument("file", help="買い物リストファイル")
    p_image.add_argument("--unit", default=default_unit, help=f"表示単位 (デフォルト: {default_unit})")
    p_image.add_argument("--output-dir", default=".", help="保存先ディレクトリ (デフォルト: .)")
    p_image.add_argument("--font-size", type=int, default=default_font_size, help="フォントサイズ")

    # bench コマンド
    p_bench = subparsers.add_parser("bench", help="パーサーの速度を計測")
    p_bench.add_argument("--iterations", type=int, default=100000, help="繰り返し回数 (デフォルト: 100000)")
    p_bench.add_argument("--line", default=BENCH_LINE, help="パースする行")

    args = parser.parse_args(argv)

    if args.command == "show":
        cmd_show(args)
    elif args.command == "total":
        cmd_total(args)
    elif args.command == "image":
        cmd_image(args)
    elif args.command == "bench":
        cmd_bench(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
