"""
Fraction — Immutable рациональное число

Immutable Pydantic модель: пара (numerator, denominator) в канонической форме.
Все операторы и методы возвращают новый экземпляр.

Способы конструирования (все проходят через normalize_pair):
- Fraction(3, 4)       — два целых
- Fraction(5)          — одно целое, эквивалентно (5, 1)
- Fraction("3/4")      — строка формата 'a/b'
- Fraction(0.345)      — конечное float значение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак всегда в числителе)
2. gcd(|numerator|, denominator) == 1, ноль хранится как (0, 1)
3. denominator == 0 → ZeroDenominatorError (в конструкторе и при делении)
4. Равные дроби имеют равный hash
5. Результаты арифметики проверяются на диапазон int
   (FractionOverflowError вместо wraparound). Сравнение точное и не переполняется

Смешанные операнды (int, float, str) сначала явно конвертируются
через Fraction.from_value, затем применяется операция Fraction × Fraction.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, model_validator

from src.rational.conversion import decimal_to_ratio
from src.rational.errors import ZeroDenominatorError
from src.rational.integer_math import (
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    lcm,
    normalize_pair,
)
from src.rational.parsing import format_ratio, parse_ratio
from src.rational.settings import DEFAULT_CONVERSION_SETTINGS, ConversionSettings


def _is_int(value: Any) -> bool:
    # bool является подклассом int, но не допустимый операнд
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operand(value: Any) -> bool:
    return isinstance(value, (Fraction, float, str)) or _is_int(value)


class Fraction(BaseModel):
    """
    Рациональное число с точной арифметикой и автоматическим сокращением.

    Immutable модель (frozen=True) для предотвращения случайных изменений.
    """

    numerator: int = Field(0, strict=True, description="Числитель (несёт знак)")
    denominator: int = Field(1, strict=True, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True}

    def __init__(
        self,
        numerator: "Fraction | int | float | str" = 0,
        denominator: Optional[int] = None,
    ) -> None:
        numerator, denominator = self._resolve(numerator, denominator)
        super().__init__(numerator=numerator, denominator=denominator)

    @classmethod
    def _resolve(cls, value: Any, denominator: Optional[int]) -> tuple[int, int]:
        if denominator is not None:
            if not (_is_int(value) and _is_int(denominator)):
                raise TypeError(
                    "Fraction(numerator, denominator) requires two integers, got "
                    f"{type(value).__name__} and {type(denominator).__name__}"
                )
            return normalize_pair(value, denominator)

        converted = cls.from_value(value)
        return converted.numerator, converted.denominator

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """
        Нормализация при model_validate({"numerator": ..., "denominator": ...}).

        Нецелые значения пропускаются дальше, их отклонит strict валидация полей.
        """
        if isinstance(data, dict):
            numerator = data.get("numerator", 0)
            denominator = data.get("denominator", 1)
            if _is_int(numerator) and _is_int(denominator):
                numerator, denominator = normalize_pair(numerator, denominator)
                return {**data, "numerator": numerator, "denominator": denominator}
        return data

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Fraction":
        """
        Копия с нормализацией.

        Базовый model_copy не вызывает валидаторы, поэтому поля из update
        проходят через конструктор заново.
        """
        if not update:
            return super().model_copy(deep=deep)
        unknown = set(update) - {"numerator", "denominator"}
        if unknown:
            raise TypeError(f"Unknown Fraction fields: {sorted(unknown)}")
        fields = {"numerator": self.numerator, "denominator": self.denominator, **update}
        return type(self)(fields["numerator"], fields["denominator"])

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> "Fraction":
        """Целое n → n/1."""
        if not _is_int(value):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(value, 1)

    @classmethod
    def from_string(cls, text: str) -> "Fraction":
        """
        Разбор строки 'a/b'.

        Raises:
            FractionParseError: Невалидный формат
            ZeroDenominatorError: Знаменатель равен нулю
        """
        return cls(*parse_ratio(text))

    @classmethod
    def from_float(
        cls,
        value: float,
        settings: ConversionSettings = DEFAULT_CONVERSION_SETTINGS,
    ) -> "Fraction":
        """
        Конверсия конечного float в дробь.

        Конечные десятичные дроби восстанавливаются точно (0.345 → 69/200),
        остальные аппроксимируются continued fractions.

        Args:
            value: Конечное float значение
            settings: Толерантность и лимиты конверсии

        Raises:
            NonFiniteValueError: Если value NaN или Inf
        """
        return cls(*decimal_to_ratio(value, settings))

    @classmethod
    def from_value(cls, value: "Fraction | int | float | str") -> "Fraction":
        """
        Явная конверсия операнда в Fraction.

        Используется всеми операторами для правого (или левого) операнда
        другого типа.

        Raises:
            TypeError: Тип операнда не поддерживается
        """
        if not _is_operand(value):
            raise TypeError(f"Unsupported operand type for Fraction: {type(value).__name__}")
        if isinstance(value, Fraction):
            return value
        if _is_int(value):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        return cls.from_string(value)

    @classmethod
    def _coerce(cls, value: Any) -> Optional["Fraction"]:
        if not _is_operand(value):
            return None
        return cls.from_value(value)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _common_numerators(self, other: "Fraction") -> tuple[int, int, int]:
        common = lcm(self.denominator, other.denominator)
        left = checked_mul(self.numerator, common // self.denominator)
        right = checked_mul(other.numerator, common // other.denominator)
        return left, right, common

    def __add__(self, other: Any) -> "Fraction":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right, common = self._common_numerators(other)
        return Fraction(checked_add(left, right), common)

    def __sub__(self, other: Any) -> "Fraction":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        left, right, common = self._common_numerators(other)
        return Fraction(checked_sub(left, right), common)

    def __mul__(self, other: Any) -> "Fraction":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fraction(
            checked_mul(self.numerator, other.numerator),
            checked_mul(self.denominator, other.denominator),
        )

    def __truediv__(self, other: Any) -> "Fraction":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.numerator == 0:
            raise ZeroDenominatorError(f"Cannot divide {self} by zero fraction {other}")
        return Fraction(
            checked_mul(self.numerator, other.denominator),
            checked_mul(self.denominator, other.numerator),
        )

    def __radd__(self, other: Any) -> "Fraction":
        return self.__add__(other)

    def __rsub__(self, other: Any) -> "Fraction":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other: Any) -> "Fraction":
        return self.__mul__(other)

    def __rtruediv__(self, other: Any) -> "Fraction":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def add(self, other: "Fraction | int | float | str") -> "Fraction":
        """Сложение с явной конверсией операнда, эквивалентно self + other."""
        return self + self.from_value(other)

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь d/n.

        Raises:
            ZeroDenominatorError: Для нулевой дроби
        """
        return Fraction(self.denominator, self.numerator)

    def __neg__(self) -> "Fraction":
        return Fraction(checked_neg(self.numerator), self.denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        if self.numerator >= 0:
            return self
        return -self

    # =========================================================================
    # СРАВНЕНИЕ И HASH
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (self.numerator, self.denominator) == (other.numerator, other.denominator)

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def compare_to(self, other: Optional["Fraction"]) -> int:
        """
        Трёхстороннее сравнение.

        Перекрёстное умножение n1 * d2 и n2 * d1 без ограничения разрядности:
        сравнение ничего не сохраняет, поэтому переполнения быть не может.

        Args:
            other: Дробь или None

        Returns:
            -1 если self < other
             0 если self == other
            +1 если self > other или other is None
        """
        if other is None:
            return 1
        if not isinstance(other, Fraction):
            raise TypeError(f"Cannot compare Fraction with {type(other).__name__}")
        if self == other:
            return 0
        left = self.numerator * other.denominator
        right = other.numerator * self.denominator
        return -1 if left < right else 1

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare_to(other) > 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self < other or self == other

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self > other or self == other

    # =========================================================================
    # КОНВЕРСИИ И ФОРМАТ
    # =========================================================================

    def __str__(self) -> str:
        return format_ratio(self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __int__(self) -> int:
        # Усечение к нулю
        if self.numerator < 0:
            return -(-self.numerator // self.denominator)
        return self.numerator // self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    @property
    def is_proper(self) -> bool:
        """|numerator| < |denominator|"""
        return abs(self.numerator) < abs(self.denominator)

    @property
    def is_improper(self) -> bool:
        """|numerator| >= |denominator| и дробь не целая вида n/1"""
        return abs(self.numerator) >= abs(self.denominator) and self.denominator != 1

    @property
    def is_whole(self) -> bool:
        """Дробь представляет целое число (numerator делится на denominator)."""
        return self.numerator % self.denominator == 0

    @property
    def is_apparent(self) -> bool:
        return self.is_whole

    @property
    def is_unit(self) -> bool:
        """|numerator| == 1"""
        return abs(self.numerator) == 1


FractionInput = Fraction | int | float | str
