"""Amount Validator: проверка сумм отправки

Проверяет сумму, введённую пользователем в нативных единицах (XEC)
или в фиате, перед построением транзакции.

Порядок проверок (первое совпадение побеждает):
1. Не число → "Amount must be a number"
2. <= 0 → "Amount must be greater than 0"
3. Ниже dust-порога → "Send amount must be at least {dust} {ticker}"
4. Больше баланса → "Amount cannot exceed your {ticker} balance"
5. Больше cash_decimals знаков → "{ticker} transactions do not support more than {n} decimal places"

Фиатная сумма сначала конвертируется в нативные единицы через
fiat_to_crypto (ROUND_HALF_UP до cash_decimals знаков).

Тексты сообщений показываются в UI как есть.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ecash_validation.core.domain.currency import (
    DEFAULT_CURRENCY,
    XEC_CASH_DECIMALS,
    CurrencyConfig,
)
from ecash_validation.core.math.decimal_arithmetic import (
    DecimalInput,
    divide,
    exact_sum,
    exceeds_precision,
    format_fixed,
    format_plain,
    parse_decimal,
    sanitize_decimal,
)
from ecash_validation.validators.address import is_valid_xec_address

logger = logging.getLogger(__name__)


# =============================================================================
# REJECTION REASONS
# =============================================================================


class AmountRejection(str, Enum):
    """Машиночитаемые причины отказа."""

    NOT_A_NUMBER = "not_a_number"
    NOT_POSITIVE = "not_positive"
    BELOW_DUST = "below_dust"
    EXCEEDS_BALANCE = "exceeds_balance"
    EXCESS_PRECISION = "excess_precision"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AmountCheckResult:
    """Результат проверки суммы."""

    accepted: bool
    block_reason: AmountRejection | None

    # Сообщение для UI ('' если сумма принята)
    message: str

    # Сумма в нативных единицах (None если вход не число)
    tested_amount: Decimal | None
    is_fiat: bool


# =============================================================================
# FIAT CONVERSION
# =============================================================================


def fiat_to_crypto(
    fiat_amount: DecimalInput,
    exchange_rate: DecimalInput,
    precision: int = XEC_CASH_DECIMALS,
) -> str:
    """Конверсия фиатной суммы в нативные единицы.

    crypto = fiat_amount / exchange_rate, ROUND_HALF_UP до precision знаков,
    ровно precision знаков после запятой (с дополнением нулями).

    Args:
        fiat_amount: сумма в фиате
        exchange_rate: курс (фиат за 1 нативную единицу), > 0
        precision: количество знаков после запятой

    Returns:
        Десятичная строка, например fiat_to_crypto('10.94', 10, 8) == '1.09400000'

    Raises:
        ValueError: если вход не число или курс не положительный
    """
    amount = parse_decimal(fiat_amount)
    rate = parse_decimal(exchange_rate)
    if rate <= 0:
        raise ValueError(f"exchange_rate must be positive, got {exchange_rate!r}")

    return format_fixed(divide(amount, rate), precision)


# =============================================================================
# AMOUNT VALIDATOR
# =============================================================================


class AmountValidator:
    """Проверка суммы отправки против баланса, dust-порога и точности.

    Stateless: конфигурация актива неизменяема, экземпляр можно
    разделять между вызывающими.
    """

    def __init__(self, currency: CurrencyConfig | None = None):
        """Инициализация валидатора.

        Args:
            currency: конфигурация актива (опционально, используется DEFAULT_CURRENCY)
        """
        self.currency = currency or DEFAULT_CURRENCY

    def evaluate(
        self,
        amount: object,
        currency_code: str,
        exchange_rate: object,
        available_balance: object,
    ) -> AmountCheckResult:
        """Оценка суммы отправки.

        Args:
            amount: сумма из формы (строка или число)
            currency_code: нативный тикер или фиатный код
            exchange_rate: курс фиата за 1 нативную единицу (только для фиата)
            available_balance: доступный баланс в нативных единицах

        Returns:
            AmountCheckResult с решением
        """
        ticker = self.currency.ticker
        is_fiat = currency_code != ticker

        # 1. Не число
        try:
            if is_fiat:
                tested = parse_decimal(
                    fiat_to_crypto(amount, exchange_rate, self.currency.cash_decimals)
                )
            else:
                tested = parse_decimal(amount)
        except ValueError:
            return self._blocked_result(
                AmountRejection.NOT_A_NUMBER, "Amount must be a number", None, is_fiat
            )

        # 2. Не положительная
        if tested <= 0:
            return self._blocked_result(
                AmountRejection.NOT_POSITIVE, "Amount must be greater than 0", tested, is_fiat
            )

        # 3. Ниже dust
        dust = self.currency.dust_amount
        if tested < dust:
            return self._blocked_result(
                AmountRejection.BELOW_DUST,
                f"Send amount must be at least {format_plain(dust)} {ticker}",
                tested,
                is_fiat,
            )

        # 4. Больше баланса (невалидный баланс трактуется как нулевой)
        balance = sanitize_decimal(available_balance, fallback=Decimal(0))
        if tested > balance:
            return self._blocked_result(
                AmountRejection.EXCEEDS_BALANCE,
                f"Amount cannot exceed your {ticker} balance",
                tested,
                is_fiat,
            )

        # 5. Точность
        if exceeds_precision(tested, self.currency.cash_decimals):
            return self._blocked_result(
                AmountRejection.EXCESS_PRECISION,
                f"{ticker} transactions do not support more than "
                f"{self.currency.cash_decimals} decimal places",
                tested,
                is_fiat,
            )

        return AmountCheckResult(
            accepted=True,
            block_reason=None,
            message="",
            tested_amount=tested,
            is_fiat=is_fiat,
        )

    def _blocked_result(
        self,
        reason: AmountRejection,
        message: str,
        tested: Decimal | None,
        is_fiat: bool,
    ) -> AmountCheckResult:
        logger.debug("Amount rejected: reason=%s tested=%s fiat=%s", reason.value, tested, is_fiat)
        return AmountCheckResult(
            accepted=False,
            block_reason=reason,
            message=message,
            tested_amount=tested,
            is_fiat=is_fiat,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def evaluate_amount_input(
    amount: object,
    currency_code: str,
    exchange_rate: object,
    available_balance: object,
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> AmountCheckResult:
    return AmountValidator(currency).evaluate(
        amount, currency_code, exchange_rate, available_balance
    )


def should_reject_amount_input(
    amount: object,
    currency_code: str,
    exchange_rate: object,
    available_balance: object,
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> bool | str:
    """Проверка суммы для формы отправки.

    Returns:
        False если сумма принята, иначе текст ошибки для UI
    """
    result = evaluate_amount_input(
        amount, currency_code, exchange_rate, available_balance, currency
    )
    if result.accepted:
        return False
    return result.message


def is_valid_xec_send_amount(
    amount: object,
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> bool:
    """True если amount (строка или число) не ниже dust-порога."""
    value = sanitize_decimal(amount)
    if value is None:
        return False
    return value >= currency.dust_amount


def is_valid_send_to_many(
    multi_send_input: object,
    available_balance: object,
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> bool:
    """Проверка ввода для отправки нескольким получателям.

    Формат: по одной строке 'address, amount' на получателя.
    Каждый адрес должен быть XEC адресом, каждая сумма не ниже dust
    и не точнее cash_decimals, сумма всех строк не больше баланса.

    Args:
        multi_send_input: текст из формы
        available_balance: доступный баланс в нативных единицах

    Returns:
        True если все строки валидны и общая сумма покрывается балансом
    """
    if not isinstance(multi_send_input, str):
        return False

    balance = sanitize_decimal(available_balance)
    if balance is None:
        return False

    lines = [line.strip() for line in multi_send_input.splitlines() if line.strip()]
    if not lines:
        return False

    amounts: list[Decimal] = []
    for line_number, line in enumerate(lines, start=1):
        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 2:
            logger.debug("Send-to-many line %d: expected 'address, amount'", line_number)
            return False

        address, raw_amount = parts
        if not is_valid_xec_address(address, currency):
            logger.debug("Send-to-many line %d: invalid address", line_number)
            return False

        amount = sanitize_decimal(raw_amount)
        if (
            amount is None
            or not is_valid_xec_send_amount(amount, currency)
            or exceeds_precision(amount, currency.cash_decimals)
        ):
            logger.debug("Send-to-many line %d: invalid amount %r", line_number, raw_amount)
            return False

        amounts.append(amount)

    try:
        total = exact_sum(amounts)
    except ValueError:
        logger.debug("Send-to-many total is not exactly representable")
        return False
    return total <= balance
