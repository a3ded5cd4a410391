"""
Conversion — Конверсия float в рациональную пару (numerator, denominator)

Модуль реализует два алгоритма:
- Масштабирование степенями 10 для конечных десятичных дробей (0.345 → 345/1000)
- Аппроксимация continued fractions для остальных значений (1/3, pi, ...)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не конвертируются (NonFiniteValueError)
2. 0.0 и -0.0 → (0, 1)
3. Знак всегда переносится на числитель, знаменатель > 0
4. Время работы ограничено: не более log10(max_scale) шагов масштабирования
   и не более max_iterations итераций continued fractions

ФОРМУЛЫ (convergents):
    p_{-1} = 1, q_{-1} = 0
    p_0 = a_0,  q_0 = 1
    p_k = a_k * p_{k-1} + p_{k-2}
    q_k = a_k * q_{k-1} + q_{k-2}

Результат является best-effort аппроксимацией: он может отличаться от точного
значения на величину tolerance.
"""

import logging
import math

from src.rational.errors import NonFiniteValueError
from src.rational.integer_math import checked_int, fits_int, gcd
from src.rational.settings import DEFAULT_CONVERSION_SETTINGS, ConversionSettings

logger = logging.getLogger(__name__)


def _validate_finite(value: float) -> None:
    if not math.isfinite(value):
        raise NonFiniteValueError(f"Value must be finite, got {value}")


def _signed(numerator: int, denominator: int, negative: bool) -> tuple[int, int]:
    if negative:
        numerator = -numerator
    return checked_int(numerator, "numerator"), denominator


# =============================================================================
# КОНЕЧНЫЕ ДЕСЯТИЧНЫЕ ДРОБИ
# =============================================================================


def decimal_to_ratio(
    value: float,
    settings: ConversionSettings = DEFAULT_CONVERSION_SETTINGS,
) -> tuple[int, int]:
    """
    Конверсия float в пару (numerator, denominator).

    Алгоритм:
        1. value == 0 → (0, 1)
        2. Работаем с |value|, знак запоминаем
        3. scale = 1, 10, 100, ... пока |value| * scale не окажется в пределах
           tolerance от ближайшего целого или scale не достигнет max_scale
        4. Не достигли tolerance → continued_fraction_ratio
        5. Сокращаем на gcd; числитель всё ещё вне диапазона int
           → continued_fraction_ratio
        6. Возвращаем знак

    Scaled значение каждый раз вычисляется заново как |value| * scale,
    поэтому ошибки умножения не накапливаются.

    Args:
        value: Конечное float значение
        settings: Параметры конверсии (default: DEFAULT_CONVERSION_SETTINGS)

    Returns:
        (numerator, denominator), несократимая пара

    Raises:
        NonFiniteValueError: Если value NaN или Inf
        FractionOverflowError: Если целая часть |value| вне диапазона int

    Examples:
        >>> decimal_to_ratio(0.345)
        (69, 200)
        >>> decimal_to_ratio(-2.5)
        (-5, 2)
        >>> decimal_to_ratio(7.0)
        (7, 1)
    """
    _validate_finite(value)

    if value == 0:
        return 0, 1

    negative = value < 0
    magnitude = abs(value)
    tolerance = settings.tolerance

    scale = 1
    scaled = magnitude
    while abs(scaled - round(scaled)) > tolerance and scale < settings.max_scale:
        scale *= 10
        scaled = magnitude * scale

    if abs(scaled - round(scaled)) > tolerance:
        logger.debug(
            "No terminating decimal for %r up to scale %d, using continued fractions",
            value,
            scale,
        )
        return continued_fraction_ratio(value, settings)

    numerator = round(scaled)
    divisor = gcd(numerator, scale)
    numerator, scale = numerator // divisor, scale // divisor

    if not fits_int(-numerator if negative else numerator):
        logger.debug(
            "Numerator %d/%d for %r exceeds integer range, using continued fractions",
            numerator,
            scale,
            value,
        )
        return continued_fraction_ratio(value, settings)

    return _signed(numerator, scale, negative)


# =============================================================================
# CONTINUED FRACTIONS
# =============================================================================


def continued_fraction_ratio(
    value: float,
    settings: ConversionSettings = DEFAULT_CONVERSION_SETTINGS,
) -> tuple[int, int]:
    """
    Аппроксимация float рациональным числом через continued fractions.

    На каждой итерации вычисляется следующий convergent p/q. Если он
    воспроизводит |value| в пределах tolerance, возвращается сразу.
    Если лимит итераций исчерпан, возвращается последний convergent.
    Если следующий convergent не помещается в диапазон int, алгоритм
    останавливается на текущем.

    Args:
        value: Конечное float значение
        settings: Параметры конверсии (default: DEFAULT_CONVERSION_SETTINGS)

    Returns:
        (numerator, denominator) с denominator > 0

    Raises:
        NonFiniteValueError: Если value NaN или Inf
        FractionOverflowError: Если целая часть |value| вне диапазона int

    Examples:
        >>> continued_fraction_ratio(1 / 3)
        (1, 3)
        >>> continued_fraction_ratio(-0.75)
        (-3, 4)
    """
    _validate_finite(value)

    negative = value < 0
    magnitude = abs(value)
    tolerance = settings.tolerance

    whole = math.floor(magnitude)
    if abs(magnitude - whole) < tolerance:
        return _signed(whole, 1, negative)

    p_prev, q_prev = 1, 0
    p_curr, q_curr = checked_int(whole, "integer part"), 1
    remainder = magnitude - whole

    for iteration in range(settings.max_iterations):
        if abs(remainder) <= tolerance:
            break

        inverted = 1.0 / remainder
        term = math.floor(inverted)

        p_next = term * p_curr + p_prev
        q_next = term * q_curr + q_prev

        if not (fits_int(-p_next if negative else p_next) and fits_int(q_next)):
            logger.debug(
                "Convergent %d/%d for %r exceeds integer range, keeping %d/%d",
                p_next,
                q_next,
                value,
                p_curr,
                q_curr,
            )
            break

        if abs(magnitude - p_next / q_next) < tolerance:
            logger.debug(
                "Convergent %d/%d matches %r after %d iterations",
                p_next,
                q_next,
                value,
                iteration + 1,
            )
            return _signed(p_next, q_next, negative)

        p_prev, p_curr = p_curr, p_next
        q_prev, q_curr = q_curr, q_next
        remainder = inverted - term
    else:
        logger.debug(
            "Iteration limit %d reached for %r, best convergent %d/%d",
            settings.max_iterations,
            value,
            p_curr,
            q_curr,
        )

    return _signed(p_curr, q_curr, negative)
