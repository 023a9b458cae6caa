"""
ecash-validation — pre-transaction validation for eCash (XEC) wallets.

Pure, stateless checks run before a send or token genesis is built:
amounts, cashaddr addresses, token genesis parameters, token stats,
UTXO records and wallet settings.
"""

from ecash_validation.core.domain.currency import DEFAULT_CURRENCY, CurrencyConfig
from ecash_validation.validators import (
    classify_address,
    classify_token_stats,
    decode_utxo_batch,
    evaluate_amount_input,
    fiat_to_crypto,
    is_valid_bch_api_utxo_object,
    is_valid_cashtab_settings,
    is_valid_etoken_address,
    is_valid_send_to_many,
    is_valid_token_decimals,
    is_valid_token_document_url,
    is_valid_token_initial_qty,
    is_valid_token_name,
    is_valid_token_stats,
    is_valid_token_ticker,
    is_valid_utxo,
    is_valid_xec_address,
    is_valid_xec_send_amount,
    should_reject_amount_input,
    validate_token_genesis,
)

__version__ = "0.1.0"

__all__ = [
    "CurrencyConfig",
    "DEFAULT_CURRENCY",
    "should_reject_amount_input",
    "evaluate_amount_input",
    "fiat_to_crypto",
    "is_valid_xec_send_amount",
    "is_valid_send_to_many",
    "classify_address",
    "is_valid_xec_address",
    "is_valid_etoken_address",
    "is_valid_token_name",
    "is_valid_token_ticker",
    "is_valid_token_decimals",
    "is_valid_token_initial_qty",
    "is_valid_token_document_url",
    "is_valid_token_stats",
    "classify_token_stats",
    "validate_token_genesis",
    "is_valid_utxo",
    "is_valid_bch_api_utxo_object",
    "decode_utxo_batch",
    "is_valid_cashtab_settings",
]
