"""Token Parameter Validator: параметры genesis токена и token stats

Предикаты по одному на поле формы genesis:
- name         — непустая строка, не длиннее 68 символов
- ticker       — строка 1..12 символов
- decimals     — строка '0'..'9'
- initial qty  — 0 < qty < 100 млрд, знаков после запятой не больше decimals
- document URL — пустая строка или домен (http/https/www опционально), <= 68 символов

Token stats декодируются как tagged variant: запись проверяется против
JSON Schema каждого поколения в фиксированном порядке
(POST_FORK → BATON_LESS → PRE_FORK). Частичные записи не принимаются.
"""

import logging
import re
from collections.abc import Mapping
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, StrictStr, ValidationInfo, field_validator

from ecash_validation.core.contracts.validators import (
    ContractValidator,
    TokenStatsBatonLessValidator,
    TokenStatsPostForkValidator,
    TokenStatsPreForkValidator,
)
from ecash_validation.core.domain.currency import DEFAULT_CURRENCY, CurrencyConfig
from ecash_validation.core.math.decimal_arithmetic import decimal_places, sanitize_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

TOKEN_DECIMALS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]")

# protocol? (domain | ipv4) port? path* query? fragment?
TOKEN_DOCUMENT_URL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(https?://)?"
    r"((([a-z0-9]([a-z0-9-]*[a-z0-9])?)\.)+[a-z]{2,}"
    r"|(([0-9]{1,3}\.){3}[0-9]{1,3}))"
    r"(:[0-9]+)?(/[-a-z0-9%_.~+]*)*"
    r"(\?[;&a-z0-9%_.~+=-]*)?"
    r"(#[-a-z0-9_]*)?",
    re.IGNORECASE | re.ASCII,
)


# =============================================================================
# GENESIS FIELD PREDICATES
# =============================================================================


def is_valid_token_name(name: object, currency: CurrencyConfig = DEFAULT_CURRENCY) -> bool:
    return isinstance(name, str) and 0 < len(name) <= currency.token_name_max_length


def is_valid_token_ticker(ticker: object, currency: CurrencyConfig = DEFAULT_CURRENCY) -> bool:
    return isinstance(ticker, str) and 0 < len(ticker) <= currency.token_ticker_max_length


def is_valid_token_decimals(decimals: object, currency: CurrencyConfig = DEFAULT_CURRENCY) -> bool:
    """True для строки с одной цифрой от '0' до token_max_decimals."""
    if not isinstance(decimals, str) or not TOKEN_DECIMALS_PATTERN.fullmatch(decimals):
        return False
    return int(decimals) <= currency.token_max_decimals


def is_valid_token_initial_qty(
    qty: object,
    decimals: object,
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> bool:
    """Проверка начальной эмиссии токена.

    Порядок проверок:
    1. decimals валиден
    2. qty — число
    3. qty > 0
    4. qty < token_max_genesis_qty (100 млрд)
    5. знаков после запятой (без хвостовых нулей) не больше decimals

    Args:
        qty: начальное количество (строка из формы)
        decimals: количество знаков токена (строка '0'..'9')

    Returns:
        True если эмиссия допустима
    """
    if not is_valid_token_decimals(decimals, currency):
        return False

    value = sanitize_decimal(qty)
    if value is None or value <= 0:
        return False

    if value >= currency.token_max_genesis_qty:
        return False

    return decimal_places(value) <= int(decimals)


def is_valid_token_document_url(url: object, currency: CurrencyConfig = DEFAULT_CURRENCY) -> bool:
    """Пустая строка допустима (URL необязателен); иначе домен не длиннее лимита."""
    if not isinstance(url, str):
        return False
    if url == "":
        return True
    if len(url) > currency.token_document_url_max_length:
        return False
    return TOKEN_DOCUMENT_URL_PATTERN.fullmatch(url) is not None


# =============================================================================
# TOKEN STATS
# =============================================================================


class TokenStatsGeneration(str, Enum):
    """Поколение записи token stats."""

    POST_FORK = "post_fork"
    BATON_LESS = "baton_less"
    PRE_FORK = "pre_fork"


# Фиксированный порядок: от самой специфичной схемы к самой общей
_TOKEN_STATS_VARIANTS: Final[tuple[tuple[TokenStatsGeneration, ContractValidator], ...]] = (
    (TokenStatsGeneration.POST_FORK, TokenStatsPostForkValidator()),
    (TokenStatsGeneration.BATON_LESS, TokenStatsBatonLessValidator()),
    (TokenStatsGeneration.PRE_FORK, TokenStatsPreForkValidator()),
)


def classify_token_stats(stats: object) -> TokenStatsGeneration | None:
    """Определение поколения token stats.

    Returns:
        Первое поколение, схеме которого запись соответствует полностью,
        или None если не подходит ни одно
    """
    if not isinstance(stats, Mapping):
        return None

    record = dict(stats)
    for generation, validator in _TOKEN_STATS_VARIANTS:
        if validator.is_valid(record):
            return generation

    logger.debug(
        "Token stats rejected: %s",
        _TOKEN_STATS_VARIANTS[-1][1].first_error(record),
    )
    return None


def is_valid_token_stats(stats: object) -> bool:
    return classify_token_stats(stats) is not None


# =============================================================================
# GENESIS MODEL
# =============================================================================


def _currency_from(info: ValidationInfo) -> CurrencyConfig:
    if info.context and "currency" in info.context:
        return info.context["currency"]
    return DEFAULT_CURRENCY


class TokenGenesisParams(BaseModel):
    """
    Параметры genesis токена, прошедшие все проверки полей.

    Immutable модель (frozen=True). Ошибки всех полей собираются
    в один pydantic.ValidationError.
    """

    name: StrictStr = Field(..., description="Название токена")
    ticker: StrictStr = Field(..., description="Тикер токена")
    decimals: StrictStr = Field(..., description="Количество знаков ('0'..'9')")
    initial_qty: StrictStr = Field(..., description="Начальная эмиссия")
    document_url: StrictStr = Field("", description="URL документа (необязательный)")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str, info: ValidationInfo) -> str:
        currency = _currency_from(info)
        if not is_valid_token_name(v, currency):
            raise ValueError(
                f"token name must be 1-{currency.token_name_max_length} characters"
            )
        return v

    @field_validator("ticker")
    @classmethod
    def validate_ticker(cls, v: str, info: ValidationInfo) -> str:
        currency = _currency_from(info)
        if not is_valid_token_ticker(v, currency):
            raise ValueError(
                f"token ticker must be 1-{currency.token_ticker_max_length} characters"
            )
        return v

    @field_validator("decimals")
    @classmethod
    def validate_decimals(cls, v: str, info: ValidationInfo) -> str:
        currency = _currency_from(info)
        if not is_valid_token_decimals(v, currency):
            raise ValueError(
                f"token decimals must be an integer from 0 to {currency.token_max_decimals}"
            )
        return v

    @field_validator("initial_qty")
    @classmethod
    def validate_initial_qty(cls, v: str, info: ValidationInfo) -> str:
        decimals = info.data.get("decimals")
        # Ошибка decimals уже записана валидатором decimals
        if decimals is None:
            return v

        currency = _currency_from(info)
        if not is_valid_token_initial_qty(v, decimals, currency):
            raise ValueError(
                f"initial quantity must be greater than 0, below "
                f"{currency.token_max_genesis_qty} and have at most {decimals} decimal places"
            )
        return v

    @field_validator("document_url")
    @classmethod
    def validate_document_url(cls, v: str, info: ValidationInfo) -> str:
        currency = _currency_from(info)
        if not is_valid_token_document_url(v, currency):
            raise ValueError(
                f"document URL must be a domain of at most "
                f"{currency.token_document_url_max_length} characters"
            )
        return v


def validate_token_genesis(
    name: object,
    ticker: object,
    decimals: object,
    initial_qty: object,
    document_url: object = "",
    currency: CurrencyConfig = DEFAULT_CURRENCY,
) -> TokenGenesisParams:
    """Проверка всех полей genesis разом.

    Raises:
        pydantic.ValidationError: со списком всех невалидных полей
    """
    return TokenGenesisParams.model_validate(
        {
            "name": name,
            "ticker": ticker,
            "decimals": decimals,
            "initial_qty": initial_qty,
            "document_url": document_url,
        },
        context={"currency": currency},
    )
