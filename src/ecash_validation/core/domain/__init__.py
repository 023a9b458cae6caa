"""
Domain models and value objects.

Contains the asset configuration (CurrencyConfig) and wallet settings model.
"""

from ecash_validation.core.domain.currency import (
    DEFAULT_CURRENCY,
    ETOKEN_PREFIX,
    ETOKEN_TICKER,
    FOREIGN_PREFIXES,
    SUPPORTED_FIAT_CURRENCIES,
    TOKEN_DOCUMENT_URL_MAX_LENGTH,
    TOKEN_MAX_DECIMALS,
    TOKEN_MAX_GENESIS_QTY,
    TOKEN_NAME_MAX_LENGTH,
    TOKEN_TICKER_MAX_LENGTH,
    XEC_CASH_DECIMALS,
    XEC_DUST_SATS,
    XEC_PREFIX,
    XEC_TICKER,
    CurrencyConfig,
)
from ecash_validation.core.domain.settings import CashtabSettings

__all__ = [
    # Currency config
    "XEC_TICKER",
    "ETOKEN_TICKER",
    "XEC_CASH_DECIMALS",
    "XEC_DUST_SATS",
    "XEC_PREFIX",
    "ETOKEN_PREFIX",
    "FOREIGN_PREFIXES",
    "SUPPORTED_FIAT_CURRENCIES",
    "TOKEN_NAME_MAX_LENGTH",
    "TOKEN_TICKER_MAX_LENGTH",
    "TOKEN_DOCUMENT_URL_MAX_LENGTH",
    "TOKEN_MAX_DECIMALS",
    "TOKEN_MAX_GENESIS_QTY",
    "CurrencyConfig",
    "DEFAULT_CURRENCY",
    # Settings model
    "CashtabSettings",
]
