"""
Integer Math — Fixed-width целочисленная арифметика для Fraction

Модуль содержит примитивы, на которых построена каноническая форма дроби:
- Диапазон знаковых 32-битных целых (INT_MIN..INT_MAX)
- Checked-арифметика: сложение, вычитание, умножение, смена знака
- GCD / LCM на абсолютных значениях
- Нормализация пары (numerator, denominator)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой результат вне [INT_MIN, INT_MAX] → FractionOverflowError
2. После normalize_pair: denominator > 0 и gcd(|n|, d) == 1
3. Ноль всегда нормализуется в (0, 1)
4. denominator == 0 → ZeroDenominatorError

ФОРМУЛЫ:
    gcd(0, n) = n
    lcm(a, b) = |a| / gcd(a, b) * |b|
"""

import math
from typing import Final

from src.rational.errors import FractionOverflowError, ZeroDenominatorError

# =============================================================================
# ДИАПАЗОН FIXED-WIDTH INT
# =============================================================================

# Разрядность числителя и знаменателя (знаковые целые)
INT_BITS: Final[int] = 32

INT_MIN: Final[int] = -(2 ** (INT_BITS - 1))
INT_MAX: Final[int] = 2 ** (INT_BITS - 1) - 1


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================


def fits_int(value: int) -> bool:
    """
    Проверка, помещается ли значение в fixed-width int.

    Args:
        value: Проверяемое целое

    Returns:
        True если INT_MIN <= value <= INT_MAX
    """
    return INT_MIN <= value <= INT_MAX


def checked_int(value: int, operation: str = "result") -> int:
    """
    Возвращает value, если оно помещается в диапазон, иначе выбрасывает ошибку.

    Args:
        value: Результат вычисления (Python int, без ограничения разрядности)
        operation: Имя операции для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        FractionOverflowError: Если value вне [INT_MIN, INT_MAX]

    Examples:
        >>> checked_int(2 ** 31 - 1)
        2147483647
        >>> checked_int(2 ** 31)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FractionOverflowError: ...
    """
    if not fits_int(value):
        raise FractionOverflowError(
            f"{operation} {value} outside {INT_BITS}-bit range [{INT_MIN}, {INT_MAX}]"
        )
    return value


def checked_add(a: int, b: int) -> int:
    return checked_int(a + b, "sum")


def checked_sub(a: int, b: int) -> int:
    return checked_int(a - b, "difference")


def checked_mul(a: int, b: int) -> int:
    return checked_int(a * b, "product")


def checked_neg(a: int) -> int:
    # -INT_MIN не помещается в диапазон
    return checked_int(-a, "negation")


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель на абсолютных значениях.

    Алгоритм Евклида (через math.gcd). gcd(0, n) = |n|.

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        gcd(|a|, |b|) >= 0
    """
    return math.gcd(abs(a), abs(b))


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное двух знаменателей.

    lcm(a, b) = |a| / gcd(a, b) * |b|. Сначала деление, затем проверка
    на диапазон только самого lcm.

    Args:
        a: Первый знаменатель (ненулевой)
        b: Второй знаменатель (ненулевой)

    Returns:
        lcm(a, b) > 0

    Raises:
        FractionOverflowError: Если lcm вне диапазона
    """
    return checked_int(abs(a) // gcd(a, b) * abs(b), "lcm")


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары к канонической форме.

    1. denominator == 0 → ZeroDenominatorError
    2. Деление на gcd(|numerator|, |denominator|)
    3. denominator < 0 → смена знака у обоих (после сокращения,
       поэтому (INT_MIN, -2) допустимо, а (INT_MIN, -1) нет)

    Операция идемпотентна: повторная нормализация ничего не меняет.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        (numerator, denominator) в канонической форме

    Raises:
        ZeroDenominatorError: Если denominator == 0
        FractionOverflowError: Если входные значения или смена знака вне диапазона

    Examples:
        >>> normalize_pair(2, 4)
        (1, 2)
        >>> normalize_pair(3, -6)
        (-1, 2)
        >>> normalize_pair(0, -7)
        (0, 1)
    """
    if denominator == 0:
        raise ZeroDenominatorError(f"Denominator cannot be zero (numerator={numerator})")

    checked_int(numerator, "numerator")
    checked_int(denominator, "denominator")

    divisor = gcd(numerator, denominator)
    numerator, denominator = numerator // divisor, denominator // divisor

    if denominator < 0:
        numerator = checked_neg(numerator)
        denominator = checked_neg(denominator)

    return numerator, denominator


def is_canonical(numerator: int, denominator: int) -> bool:
    """
    Проверка канонической формы без нормализации.

    Returns:
        True если denominator > 0 и gcd(|numerator|, denominator) == 1
    """
    return denominator > 0 and gcd(numerator, denominator) == 1
