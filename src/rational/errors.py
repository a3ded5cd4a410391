"""
Errors — Иерархия исключений для Fraction

Единственный вид ошибки на границе API: InvalidArgumentError.
Все остальные исключения (кроме переполнения) являются его подклассами,
поэтому вызывающий код может ловить одну ошибку.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки выбрасываются синхронно, при конструировании или делении
2. Ничего не подавляется и не приводится молча к другому значению
3. Переполнение fixed-width арифметики → FractionOverflowError (никогда wraparound)
"""


class InvalidArgumentError(ValueError):
    """Невалидный аргумент конструктора или операции."""

    pass


class ZeroDenominatorError(InvalidArgumentError, ZeroDivisionError):
    """
    Нулевой знаменатель.

    Возникает в любом конструкторе и при делении на нулевую дробь.
    Наследует ZeroDivisionError, чтобы `except ZeroDivisionError` тоже работал.
    """

    pass


class FractionParseError(InvalidArgumentError):
    """Строка не соответствует формату 'числитель/знаменатель'."""

    pass


class NonFiniteValueError(InvalidArgumentError):
    """Десятичное значение NaN или Inf."""

    pass


class FractionOverflowError(OverflowError):
    """
    Результат промежуточного вычисления вышел за диапазон fixed-width int.

    Числитель и знаменатель хранятся как знаковые 32-битные целые.
    Любое произведение, сумма или смена знака проверяется на диапазон.
    """

    pass
