"""
Core math modules для ecash-validation

Точная десятичная арифметика для денежных сумм.
"""

# Decimal Arithmetic
from ecash_validation.core.math.decimal_arithmetic import (
    # Constants
    DECIMAL_CONTEXT_PRECISION,
    DECIMAL_EXACT_PRECISION,
    DECIMAL_MAX_ADJUSTED_EXPONENT,
    DECIMAL_PATTERN,
    DecimalInput,
    # Parsing
    is_valid_decimal,
    parse_decimal,
    sanitize_decimal,
    # Precision
    decimal_places,
    divide,
    exceeds_precision,
    quantize_half_up,
    # Formatting
    format_fixed,
    format_plain,
    # Exact operations
    exact_sum,
    # Denomination
    from_smallest_denomination,
    to_smallest_denomination,
)

__all__ = [
    "DECIMAL_CONTEXT_PRECISION",
    "DECIMAL_EXACT_PRECISION",
    "DECIMAL_MAX_ADJUSTED_EXPONENT",
    "DECIMAL_PATTERN",
    "DecimalInput",
    "is_valid_decimal",
    "parse_decimal",
    "sanitize_decimal",
    "decimal_places",
    "divide",
    "exceeds_precision",
    "quantize_half_up",
    "format_fixed",
    "format_plain",
    "exact_sum",
    "from_smallest_denomination",
    "to_smallest_denomination",
]
