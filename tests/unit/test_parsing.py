"""
Тесты для модуля Parsing

Проверяет:
1. Разбор валидных строк 'a/b' (знаки, пробелы вокруг частей)
2. Отклонение невалидных форм (FractionParseError)
3. Нулевой знаменатель (ZeroDenominatorError)
4. Каноническое форматирование 'n/d'
"""

import pytest

from src.rational.errors import (
    FractionParseError,
    InvalidArgumentError,
    ZeroDenominatorError,
)
from src.rational.parsing import format_ratio, parse_ratio


class TestParseRatio:
    """Тесты parse_ratio"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3/4", (3, 4)),
            ("-1/2", (-1, 2)),
            ("+5/-10", (5, -10)),
            (" 7 / 8 ", (7, 8)),
            ("0/9", (0, 9)),
            ("2147483647/1", (2_147_483_647, 1)),
            ("-2147483648/1", (-2_147_483_648, 1)),
        ],
    )
    def test_valid(self, text: str, expected: tuple[int, int]) -> None:
        """Строка разбирается без нормализации"""
        assert parse_ratio(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, text: str) -> None:
        """Пустая строка или только пробелы"""
        with pytest.raises(FractionParseError, match="cannot be empty"):
            parse_ratio(text)

    @pytest.mark.parametrize("text", ["12", "1/2/3", "1\\2", "1//2"])
    def test_wrong_separator_count(self, text: str) -> None:
        """Требуется ровно один '/'"""
        with pytest.raises(FractionParseError):
            parse_ratio(text)

    @pytest.mark.parametrize(
        "text", ["abc/2", "1/xyz", "1.5/2", "1/", "/2", "1_000/2", "1 2/3", "--1/2"]
    )
    def test_non_integer_parts(self, text: str) -> None:
        """Каждая часть должна быть целым вида [+-]digits"""
        with pytest.raises(FractionParseError, match="Invalid"):
            parse_ratio(text)

    def test_out_of_range(self) -> None:
        """Части вне диапазона int отклоняются"""
        with pytest.raises(FractionParseError, match="out of range"):
            parse_ratio("2147483648/1")
        with pytest.raises(FractionParseError, match="out of range"):
            parse_ratio("1/-2147483649")

    def test_zero_denominator(self) -> None:
        """'5/0' → ZeroDenominatorError"""
        with pytest.raises(ZeroDenominatorError):
            parse_ratio("5/0")

    def test_all_failures_are_invalid_argument(self) -> None:
        """Все ошибки разбора — InvalidArgumentError"""
        for text in ["", "abc/2", "5/0", "1/2/3"]:
            with pytest.raises(InvalidArgumentError):
                parse_ratio(text)

    def test_non_string_rejected(self) -> None:
        """Не строка → TypeError"""
        with pytest.raises(TypeError):
            parse_ratio(12)  # type: ignore[arg-type]


class TestFormatRatio:
    """Тесты format_ratio"""

    def test_always_includes_denominator(self) -> None:
        """Целое тоже форматируется с '/1'"""
        assert format_ratio(5, 1) == "5/1"

    def test_negative(self) -> None:
        """Знак в числителе"""
        assert format_ratio(-1, 2) == "-1/2"

    def test_round_trip(self) -> None:
        """parse_ratio(format_ratio(n, d)) == (n, d)"""
        assert parse_ratio(format_ratio(-17, 4)) == (-17, 4)
