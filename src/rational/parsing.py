"""
Parsing — Разбор текстового формата 'числитель/знаменатель'

Допустимый формат: <знак?><цифры>/<знак?><цифры>
Вокруг каждой части допускаются пробелы. Любая другая форма считается ошибкой.
"""

import re
from typing import Final

from src.rational.errors import FractionParseError, ZeroDenominatorError
from src.rational.integer_math import fits_int

SEPARATOR: Final[str] = "/"

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)\s*")


def _parse_part(part: str, name: str, text: str) -> int:
    match = _INTEGER_PATTERN.fullmatch(part)
    if match is None:
        raise FractionParseError(f"Invalid {name} in {text!r}")

    value = int(match.group(1))
    if not fits_int(value):
        raise FractionParseError(f"{name.capitalize()} out of range in {text!r}")
    return value


def parse_ratio(text: str) -> tuple[int, int]:
    """
    Разбор строки 'a/b' в пару целых (без нормализации).

    Args:
        text: Строка вида '3/4', '-1/2', '5/-10'

    Returns:
        (numerator, denominator) как записаны в строке

    Raises:
        FractionParseError: Пустая строка, не ровно один '/', нецелые части,
            значения вне диапазона int
        ZeroDenominatorError: Знаменатель равен нулю

    Examples:
        >>> parse_ratio("3/4")
        (3, 4)
        >>> parse_ratio("5/-10")
        (5, -10)
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if not text.strip():
        raise FractionParseError("Fraction string cannot be empty")

    parts = text.split(SEPARATOR)
    if len(parts) != 2:
        raise FractionParseError(
            f"Invalid format {text!r}: expected 'numerator/denominator'"
        )

    numerator = _parse_part(parts[0], "numerator", text)
    denominator = _parse_part(parts[1], "denominator", text)

    if denominator == 0:
        raise ZeroDenominatorError(f"Denominator cannot be zero in {text!r}")

    return numerator, denominator


def format_ratio(numerator: int, denominator: int) -> str:
    """Каноническое текстовое представление: всегда 'n/d', даже при d == 1."""
    return f"{numerator}{SEPARATOR}{denominator}"
