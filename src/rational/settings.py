"""
ConversionSettings — Параметры конверсии десятичного числа в дробь

Immutable Pydantic модель с эвристическими константами конверсии.
Значения по умолчанию совпадают с модульными константами ниже.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# EPSILON-ПАРАМЕТРЫ КОНВЕРСИИ
# =============================================================================

# Толерантность: значение считается целым, если |x - round(x)| <= tolerance
# Также используется как критерий сходимости continued fractions
DECIMAL_TOLERANCE: Final[float] = 1e-15

# Максимальный множитель (степень 10) при поиске конечной десятичной дроби
# Выше этого порога → аппроксимация continued fractions
MAX_DECIMAL_SCALE: Final[int] = 1_000_000

# Максимальное число итераций continued fractions
MAX_CONTINUED_FRACTION_ITERATIONS: Final[int] = 20


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class ConversionSettings(BaseModel):
    """
    Настройки конверсии float → Fraction.

    Immutable модель (frozen=True); для других значений создаётся новый экземпляр.
    """

    tolerance: float = Field(
        DECIMAL_TOLERANCE, gt=0, description="Толерантность сравнения с целым"
    )
    max_scale: int = Field(
        MAX_DECIMAL_SCALE, ge=1, description="Предельный множитель (степень 10)"
    )
    max_iterations: int = Field(
        MAX_CONTINUED_FRACTION_ITERATIONS,
        ge=1,
        description="Лимит итераций continued fractions",
    )

    model_config = {"frozen": True}


DEFAULT_CONVERSION_SETTINGS: Final[ConversionSettings] = ConversionSettings()
