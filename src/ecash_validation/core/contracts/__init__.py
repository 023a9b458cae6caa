"""
Contract Validation Module

Модуль для валидации JSON контрактов внешних данных (UTXO, token stats).
"""

from .validators import (
    AddressUtxosContractValidator,
    ContractValidator,
    SchemaLoader,
    TokenStatsBatonLessValidator,
    TokenStatsPostForkValidator,
    TokenStatsPreForkValidator,
    UtxoContractValidator,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UtxoContractValidator",
    "AddressUtxosContractValidator",
    "TokenStatsPreForkValidator",
    "TokenStatsPostForkValidator",
    "TokenStatsBatonLessValidator",
]
