"""
Decimal Arithmetic — Точная десятичная арифметика для денежных сумм

Модуль обеспечивает точность всех операций с суммами:
- Строгий парсинг входа (str / int / float / Decimal) в Decimal
- Отбраковка NaN/Inf и нечисловых строк
- Подсчёт знаков после запятой (без учёта хвостовых нулей)
- Округление ROUND_HALF_UP и форматирование с фиксированной точностью
- Конверсия satoshi ↔ нативные единицы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Native float никогда не участвует в вычислениях (float → str → Decimal)
2. NaN/Inf никогда не проходят парсинг
3. Округление всегда ROUND_HALF_UP
4. Все операции детерминированы и воспроизводимы
"""

import re
from decimal import ROUND_HALF_UP, Decimal, DecimalException, Inexact, localcontext
from typing import Final, Iterable, Union

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Точность контекста для деления (значащих цифр)
DECIMAL_CONTEXT_PRECISION: Final[int] = 60

# Допустимый порядок числа (adjusted exponent) по модулю
DECIMAL_MAX_ADJUSTED_EXPONENT: Final[int] = 1000

# Точность контекста для операций без округления (сумма, сдвиг порядка)
DECIMAL_EXACT_PRECISION: Final[int] = 4 * DECIMAL_MAX_ADJUSTED_EXPONENT

# Строковое представление десятичного числа: 10, -0.031, .5, 5., 5e-05
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
)

DecimalInput = Union[str, int, float, Decimal]


# =============================================================================
# ПАРСИНГ И САНИТИЗАЦИЯ
# =============================================================================


def parse_decimal(value: object) -> Decimal:
    """
    Строгий парсинг значения в конечный Decimal.

    float конвертируется через repr, чтобы получить ту же десятичную
    запись, что видит пользователь (20.0 → '20.0', 5e-05 → '5e-05').

    Args:
        value: str, int, float или Decimal

    Returns:
        Конечный Decimal

    Raises:
        ValueError: Если значение не является конечным десятичным числом

    Examples:
        >>> parse_decimal('10.94')
        Decimal('10.94')
        >>> parse_decimal(0.00005)
        Decimal('0.00005')
        >>> parse_decimal('Not a number')
        Traceback (most recent call last):
        ValueError: ...
    """
    # bool является подклассом int, но не суммой
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a decimal amount: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        if not DECIMAL_PATTERN.fullmatch(value):
            raise ValueError(f"Not a decimal string: {value!r}")
        result = Decimal(value)
    else:
        raise ValueError(f"Unsupported amount type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Decimal must be finite, got {value!r}")

    if abs(result.adjusted()) > DECIMAL_MAX_ADJUSTED_EXPONENT:
        raise ValueError(f"Decimal exponent out of range: {value!r}")

    return result


def is_valid_decimal(value: object) -> bool:
    """
    Проверка, является ли значение конечным десятичным числом.

    Args:
        value: Проверяемое значение

    Returns:
        True если parse_decimal() примет значение
    """
    try:
        parse_decimal(value)
    except ValueError:
        return False
    return True


def sanitize_decimal(value: object, fallback: Decimal | None = None) -> Decimal | None:
    """
    Санитизация: невалидный вход заменяется на fallback.

    Examples:
        >>> sanitize_decimal('3')
        Decimal('3')
        >>> sanitize_decimal(None, fallback=Decimal(0))
        Decimal('0')
    """
    try:
        return parse_decimal(value)
    except ValueError:
        return fallback


# =============================================================================
# ТОЧНОСТЬ
# =============================================================================


def decimal_places(value: Decimal) -> int:
    """
    Количество значащих знаков после запятой.

    Хвостовые нули не учитываются: '17.10' → 1, '1.0' → 0, '1E+3' → 0.

    Args:
        value: Конечный Decimal

    Returns:
        Число знаков после запятой (>= 0)
    """
    if value.is_zero():
        return 0
    _, digits, exponent = value.as_tuple()
    trailing_zeros = 0
    for digit in reversed(digits):
        if digit:
            break
        trailing_zeros += 1
    # Для конечных Decimal exponent всегда int
    return max(0, -(int(exponent) + trailing_zeros))


def exceeds_precision(value: Decimal, places: int) -> bool:
    """True если у value больше places знаков после запятой."""
    return decimal_places(value) > places


def quantize_half_up(value: Decimal, places: int) -> Decimal:
    """
    Округление до places знаков по правилу ROUND_HALF_UP.

    Raises:
        ValueError: Если places < 0 или результат не помещается в контекст
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_CONTEXT_PRECISION
        try:
            return value.quantize(quantum, rounding=ROUND_HALF_UP)
        except DecimalException as e:
            raise ValueError(f"Cannot quantize {value} to {places} places") from e


def divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Деление с расширенной точностью контекста.

    Raises:
        ValueError: Если denominator равен нулю
    """
    if denominator.is_zero():
        raise ValueError("Division by zero")

    with localcontext() as ctx:
        ctx.prec = DECIMAL_CONTEXT_PRECISION
        try:
            return numerator / denominator
        except DecimalException as e:
            raise ValueError(f"Cannot divide {numerator} by {denominator}") from e


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_fixed(value: Decimal, places: int) -> str:
    """
    Форматирование с ровно places знаками после запятой (ROUND_HALF_UP).

    Examples:
        >>> format_fixed(Decimal('1.094'), 8)
        '1.09400000'
        >>> format_fixed(Decimal('0.539892952'), 2)
        '0.54'
    """
    return f"{quantize_half_up(value, places):f}"


def format_plain(value: Decimal) -> str:
    """
    Кратчайшая запись без экспоненты и хвостовых нулей.

    Examples:
        >>> format_plain(Decimal('5.50'))
        '5.5'
        >>> format_plain(Decimal('5E+2'))
        '500'
    """
    if value.is_zero():
        return "0"
    with localcontext() as ctx:
        ctx.prec = DECIMAL_CONTEXT_PRECISION
        return f"{value.normalize():f}"


# =============================================================================
# ТОЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """
    Сумма без округления контекстом.

    Raises:
        ValueError: Если сумма не представима точно
    """
    total = Decimal(0)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_EXACT_PRECISION
        ctx.traps[Inexact] = True
        try:
            for value in values:
                total += value
        except DecimalException as e:
            raise ValueError("Sum is not exactly representable") from e
    return total


def _exact_scaleb(value: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = DECIMAL_EXACT_PRECISION
        ctx.traps[Inexact] = True
        try:
            return value.scaleb(places)
        except DecimalException as e:
            raise ValueError(f"Cannot scale {value} by 10^{places}") from e


# =============================================================================
# SATOSHI ↔ НАТИВНЫЕ ЕДИНИЦЫ
# =============================================================================


def from_smallest_denomination(amount_sats: DecimalInput, decimals: int) -> Decimal:
    """
    Конверсия: satoshi → нативные единицы.

    Examples:
        >>> from_smallest_denomination(550, 2)
        Decimal('5.50')
    """
    return _exact_scaleb(parse_decimal(amount_sats), -decimals)


def to_smallest_denomination(amount: DecimalInput, decimals: int) -> int:
    """
    Конверсия: нативные единицы → целые satoshi.

    Raises:
        ValueError: Если сумма имеет больше decimals знаков (дробные satoshi)
    """
    value = parse_decimal(amount)
    if exceeds_precision(value, decimals):
        raise ValueError(
            f"Amount {value} has more than {decimals} decimal places"
        )
    return int(_exact_scaleb(value, decimals))
