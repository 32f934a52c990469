"""
行スキャナ

買い物リストの1行を前後から読み進めるためのカーソルと、数値の切り出し。
スキャナ関数は例外を投げず、結果 (Scanned) に失敗理由を載せて返す。
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, TypeVar, Union

T = TypeVar("T")

# スキャン失敗理由
EXPECTED_NUMBER_AT_START = "expected string to start with a number"
EXPECTED_NUMBER_AT_END = "expected string to end with a number"
TOO_MANY_DECIMAL_PLACES = "too many decimal places"
EXPECTED_DOLLARS_AND_CENTS = "expected price with dollars and cents"
TOO_MANY_CENT_DIGITS = "too many digits after decimal point in price"
NUMBER_TOO_LARGE = "number has too many digits"

# 小数部が何桁までなら「セント」として読めるか
CENT_DIGITS = 2

# 1つの数値に許す数字の桁数 (float で正確に扱える範囲)
MAX_DIGITS = 15


def char_byte_len(ch: str) -> int:
    """1文字の UTF-8 バイト長 (1〜4)"""
    return len(ch.encode("utf-8", "surrogatepass"))


def is_ascii_digit(ch: str) -> bool:
    """ASCII の 0-9 のみ数字とみなす (全角数字等は対象外)"""
    return "0" <= ch <= "9" and char_byte_len(ch) == 1


def is_whole(num: float) -> bool:
    return float(num).is_integer()


def to_precision(num: float, precision: int) -> float:
    """小数点以下 precision 桁に丸める (0.5 は0から遠い方へ)"""
    factor = 10 ** precision
    return math.copysign(math.floor(abs(num) * factor + 0.5), num) / factor


def cents_to_dollars(cents: int) -> float:
    return cents / 100


def round_cents(cents: float) -> int:
    """1セント未満を四捨五入する (0.5 は0から遠い方へ、表示の丸めと同じ規則)"""
    return int(to_precision(cents, 0))


@dataclass(frozen=True)
class Scanned:
    """スキャン結果。error が None なら成功。

    length は読み取った文字数。成功でも length == 0 (何も無かった) の場合がある。
    """
    value: Optional[Union[int, float]] = None
    length: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def found(self) -> bool:
        return self.ok and self.length > 0


class TextCursor:
    """元の文字列をコピーせずに前後から削っていくビュー"""

    __slots__ = ("text", "start", "end")

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None):
        self.text = text
        self.start = start
        self.end = len(text) if end is None else end

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"TextCursor({self.view!r})"

    @property
    def view(self) -> str:
        """現在残っている部分"""
        return self.text[self.start:self.end]

    def first(self) -> Optional[str]:
        return self.text[self.start] if self.start < self.end else None

    def startswith(self, token: str) -> bool:
        return self.text.startswith(token, self.start, self.end)

    def endswith(self, token: str) -> bool:
        return self.text.endswith(token, self.start, self.end)

    def skip_front(self, n: int) -> None:
        self.start = min(self.start + n, self.end)

    def drop_back(self, n: int) -> None:
        self.end = max(self.end - n, self.start)

    def take_prefix(self, token: str) -> bool:
        """先頭が token なら読み飛ばして True"""
        if token and self.startswith(token):
            self.skip_front(len(token))
            return True
        return False

    def take_suffix(self, token: str) -> bool:
        """末尾が token なら切り落として True"""
        if token and self.endswith(token):
            self.drop_back(len(token))
            return True
        return False

    def take_first_prefix(self, tokens: Iterable[tuple[str, T]]) -> Optional[T]:
        """(token, value) を順に試し、最初に一致した token の value を返す"""
        for token, value in tokens:
            if self.take_prefix(token):
                return value
        return None

    def take_first_suffix(self, tokens: Iterable[tuple[str, T]]) -> Optional[T]:
        for token, value in tokens:
            if self.take_suffix(token):
                return value
        return None


def scan_number_from_front(cursor: TextCursor) -> Scanned:
    """先頭の数値 (数字と高々1つの '.') を読む。カーソルは動かさない。

    数字が MAX_DIGITS 桁を超える数値は失敗 (NUMBER_TOO_LARGE) にする。
    """
    text = cursor.text
    length = 0
    decimal_count = 0

    for i in range(cursor.start, cursor.end):
        ch = text[i]
        if char_byte_len(ch) != 1:
            return Scanned(error=EXPECTED_NUMBER_AT_START)

        if is_ascii_digit(ch):
            length += 1
        elif ch == ".":
            if decimal_count > 0:
                return Scanned(error=TOO_MANY_DECIMAL_PLACES)
            if length == 0:
                return Scanned(error=EXPECTED_NUMBER_AT_START)
            decimal_count += 1
            length += 1
        elif length == 0:
            return Scanned(error=EXPECTED_NUMBER_AT_START)
        else:
            break

    if length == 0:
        return Scanned(error=EXPECTED_NUMBER_AT_START)
    if length - decimal_count > MAX_DIGITS:
        return Scanned(error=NUMBER_TOO_LARGE)

    number_str = text[cursor.start:cursor.start + length]
    return Scanned(value=float(number_str), length=length)


def scan_int_from_back(cursor: TextCursor) -> Scanned:
    """末尾の整数を読む。数字が無ければ length == 0 の成功を返す。"""
    text = cursor.text
    length = 0

    for i in range(cursor.end - 1, cursor.start - 1, -1):
        ch = text[i]
        if char_byte_len(ch) != 1:
            return Scanned(error=EXPECTED_NUMBER_AT_END)
        if not is_ascii_digit(ch):
            break
        length += 1

    if length == 0:
        return Scanned()
    if length > MAX_DIGITS:
        return Scanned(error=NUMBER_TOO_LARGE)

    return Scanned(value=int(text[cursor.end - length:cursor.end]), length=length)


def scan_price_from_back(cursor: TextCursor) -> Scanned:
    """末尾の価格 "ドル.セント" を後ろから読み、セント単位の整数で返す。

    小数部1桁は10セント単位として扱う ("4.5" → 450)。
    小数部が3桁以上ならセントとして読めないので失敗。
    """
    text = cursor.text
    fractional_len = 0
    whole_len = 0
    seen_decimal = False

    for i in range(cursor.end - 1, cursor.start - 1, -1):
        ch = text[i]
        if char_byte_len(ch) != 1:
            return Scanned(error=EXPECTED_NUMBER_AT_END)

        if is_ascii_digit(ch):
            if seen_decimal:
                whole_len += 1
            else:
                fractional_len += 1
        elif ch == ".":
            if seen_decimal:
                return Scanned(error=TOO_MANY_DECIMAL_PLACES)
            if fractional_len == 0:
                return Scanned(error=EXPECTED_NUMBER_AT_END)
            seen_decimal = True
        elif fractional_len == 0:
            return Scanned(error=EXPECTED_NUMBER_AT_END)
        else:
            break

    if fractional_len == 0:
        return Scanned(error=EXPECTED_NUMBER_AT_END)
    if not seen_decimal or whole_len == 0:
        return Scanned(error=EXPECTED_DOLLARS_AND_CENTS)
    if fractional_len > CENT_DIGITS:
        return Scanned(error=TOO_MANY_CENT_DIGITS)
    if whole_len > MAX_DIGITS:
        return Scanned(error=NUMBER_TOO_LARGE)

    fractional_start = cursor.end - fractional_len
    whole_start = fractional_start - 1 - whole_len
    fractional = int(text[fractional_start:cursor.end])
    whole = int(text[whole_start:fractional_start - 1])

    cents = whole * 100 + fractional * 10 ** (CENT_DIGITS - fractional_len)
    return Scanned(value=cents, length=fractional_len + 1 + whole_len)
