"""Validators — проверки пользовательского ввода и внешних данных.

- Amount:   сумма отправки (XEC или фиат), dust, баланс, точность
- Address:  cashaddr классификация (ecash / etoken / чужие сети)
- Token:    параметры genesis токена, token stats
- UTXO:     записи UTXO и ответы индексатора
- Settings: сохранённые настройки кошелька
"""

from .address import (
    AddressClassification,
    AddressKind,
    AddressValidator,
    classify_address,
    is_valid_etoken_address,
    is_valid_xec_address,
)
from .amount import (
    AmountCheckResult,
    AmountRejection,
    AmountValidator,
    evaluate_amount_input,
    fiat_to_crypto,
    is_valid_send_to_many,
    is_valid_xec_send_amount,
    should_reject_amount_input,
)
from .settings import is_valid_cashtab_settings
from .token import (
    TokenGenesisParams,
    TokenStatsGeneration,
    classify_token_stats,
    is_valid_token_decimals,
    is_valid_token_document_url,
    is_valid_token_initial_qty,
    is_valid_token_name,
    is_valid_token_stats,
    is_valid_token_ticker,
    validate_token_genesis,
)
from .utxo import (
    LEGACY_UNWRAP_KEY,
    UtxoBatchDecoding,
    UtxoBatchShape,
    decode_utxo_batch,
    is_valid_bch_api_utxo_object,
    is_valid_utxo,
)

__all__ = [
    # Address
    "AddressClassification",
    "AddressKind",
    "AddressValidator",
    "classify_address",
    "is_valid_xec_address",
    "is_valid_etoken_address",
    # Amount
    "AmountCheckResult",
    "AmountRejection",
    "AmountValidator",
    "evaluate_amount_input",
    "fiat_to_crypto",
    "should_reject_amount_input",
    "is_valid_xec_send_amount",
    "is_valid_send_to_many",
    # Settings
    "is_valid_cashtab_settings",
    # Token
    "TokenGenesisParams",
    "TokenStatsGeneration",
    "classify_token_stats",
    "is_valid_token_name",
    "is_valid_token_ticker",
    "is_valid_token_decimals",
    "is_valid_token_initial_qty",
    "is_valid_token_document_url",
    "is_valid_token_stats",
    "validate_token_genesis",
    # UTXO
    "LEGACY_UNWRAP_KEY",
    "UtxoBatchDecoding",
    "UtxoBatchShape",
    "decode_utxo_batch",
    "is_valid_utxo",
    "is_valid_bch_api_utxo_object",
]
