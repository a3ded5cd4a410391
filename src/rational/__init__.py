"""
Rational numbers

Immutable дробь с точной fixed-width арифметикой, автоматическим сокращением
и конструированием из int, строки 'a/b' и float.
"""

import logging

# Errors
from src.rational.errors import (
    FractionOverflowError,
    FractionParseError,
    InvalidArgumentError,
    NonFiniteValueError,
    ZeroDenominatorError,
)

# Integer math
from src.rational.integer_math import (
    INT_BITS,
    INT_MAX,
    INT_MIN,
    checked_int,
    gcd,
    is_canonical,
    lcm,
    normalize_pair,
)

# Settings
from src.rational.settings import (
    DECIMAL_TOLERANCE,
    DEFAULT_CONVERSION_SETTINGS,
    MAX_CONTINUED_FRACTION_ITERATIONS,
    MAX_DECIMAL_SCALE,
    ConversionSettings,
)

# Parsing & conversion
from src.rational.parsing import format_ratio, parse_ratio
from src.rational.conversion import continued_fraction_ratio, decimal_to_ratio

# Fraction
from src.rational.fraction import Fraction, FractionInput

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "FractionOverflowError",
    "FractionParseError",
    "InvalidArgumentError",
    "NonFiniteValueError",
    "ZeroDenominatorError",
    # Integer math — Constants
    "INT_BITS",
    "INT_MAX",
    "INT_MIN",
    # Integer math — Functions
    "checked_int",
    "gcd",
    "is_canonical",
    "lcm",
    "normalize_pair",
    # Settings — Constants
    "DECIMAL_TOLERANCE",
    "DEFAULT_CONVERSION_SETTINGS",
    "MAX_CONTINUED_FRACTION_ITERATIONS",
    "MAX_DECIMAL_SCALE",
    # Settings — Types
    "ConversionSettings",
    # Parsing & conversion
    "continued_fraction_ratio",
    "decimal_to_ratio",
    "format_ratio",
    "parse_ratio",
    # Fraction
    "Fraction",
    "FractionInput",
]
