"""
Currency — Конфигурация актива кошелька (XEC / eToken)

Неизменяемый контекст, который передаётся в каждый валидатор:
- тикеры нативного актива и токенов
- точность сумм (cash decimals) и dust-порог в satoshi
- префиксы адресов (нативный, токенный, чужие сети)
- допустимые фиат-валюты
- лимиты параметров genesis токена

Модуль не хранит изменяемого состояния: альтернативные конфигурации
создаются вызывающей стороной через model_copy(update=...).
"""

from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ АКТИВА
# =============================================================================

# Тикер нативного актива
XEC_TICKER: Final[str] = "XEC"

# Тикер токенов (SLP на eCash)
ETOKEN_TICKER: Final[str] = "eToken"

# Количество знаков после запятой для XEC (1 XEC = 100 satoshi)
XEC_CASH_DECIMALS: Final[int] = 2

# Минимальный экономически тратимый выход (satoshi)
XEC_DUST_SATS: Final[int] = 550

# Префиксы cashaddr
XEC_PREFIX: Final[str] = "ecash"
ETOKEN_PREFIX: Final[str] = "etoken"
FOREIGN_PREFIXES: Final[tuple[str, ...]] = ("bitcoincash", "simpleledger")

# Допустимые значения settings.fiatCurrency
SUPPORTED_FIAT_CURRENCIES: Final[tuple[str, ...]] = (
    "usd",
    "idr",
    "krw",
    "cny",
    "zar",
    "vnd",
    "cad",
    "nok",
    "eur",
    "gbp",
    "jpy",
    "try",
    "rub",
    "inr",
    "brl",
    "php",
    "ils",
    "clp",
    "twd",
    "hkd",
    "bhd",
    "sar",
    "aud",
    "nzd",
    "chf",
)


# =============================================================================
# ЛИМИТЫ TOKEN GENESIS
# =============================================================================

TOKEN_NAME_MAX_LENGTH: Final[int] = 68
TOKEN_TICKER_MAX_LENGTH: Final[int] = 12
TOKEN_DOCUMENT_URL_MAX_LENGTH: Final[int] = 68
TOKEN_MAX_DECIMALS: Final[int] = 9

# Жёсткий потолок эмиссии: 100 млрд (строго меньше)
TOKEN_MAX_GENESIS_QTY: Final[Decimal] = Decimal("100000000000")


# =============================================================================
# CURRENCY CONFIG
# =============================================================================


class CurrencyConfig(BaseModel):
    """
    Конфигурация актива, используемая всеми валидаторами.

    Immutable модель (frozen=True): один экземпляр безопасно
    разделяется между любым числом вызывающих.
    """

    ticker: str = Field(XEC_TICKER, min_length=1, description="Тикер нативного актива")
    token_ticker: str = Field(ETOKEN_TICKER, min_length=1, description="Тикер токенов")
    cash_decimals: int = Field(
        XEC_CASH_DECIMALS, ge=0, le=18, description="Знаков после запятой в нативных суммах"
    )
    dust_sats: int = Field(XEC_DUST_SATS, ge=0, description="Dust-порог в satoshi")

    prefix: str = Field(XEC_PREFIX, min_length=1, description="Префикс нативных адресов")
    token_prefix: str = Field(ETOKEN_PREFIX, min_length=1, description="Префикс токенных адресов")
    foreign_prefixes: tuple[str, ...] = Field(
        FOREIGN_PREFIXES, description="Известные префиксы чужих сетей"
    )

    fiat_currencies: tuple[str, ...] = Field(
        SUPPORTED_FIAT_CURRENCIES, min_length=1, description="Допустимые фиат-коды (lowercase)"
    )

    token_name_max_length: int = Field(TOKEN_NAME_MAX_LENGTH, gt=0)
    token_ticker_max_length: int = Field(TOKEN_TICKER_MAX_LENGTH, gt=0)
    token_document_url_max_length: int = Field(TOKEN_DOCUMENT_URL_MAX_LENGTH, gt=0)
    token_max_decimals: int = Field(TOKEN_MAX_DECIMALS, ge=0, le=9)
    token_max_genesis_qty: Decimal = Field(TOKEN_MAX_GENESIS_QTY, gt=0)

    model_config = {"frozen": True}  # Immutable

    @field_validator("prefix", "token_prefix")
    @classmethod
    def validate_prefix_lowercase(cls, v: str) -> str:
        """Префиксы cashaddr сравниваются в нижнем регистре."""
        if v != v.lower():
            raise ValueError(f"address prefix must be lowercase, got {v!r}")
        return v

    @field_validator("fiat_currencies")
    @classmethod
    def normalize_fiat_codes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(code.lower() for code in v)

    @property
    def dust_amount(self) -> Decimal:
        """Dust-порог в нативных единицах (550 sats → 5.5 XEC)."""
        return Decimal(self.dust_sats).scaleb(-self.cash_decimals)


# Конфигурация по умолчанию (eCash mainnet)
DEFAULT_CURRENCY: Final[CurrencyConfig] = CurrencyConfig()
