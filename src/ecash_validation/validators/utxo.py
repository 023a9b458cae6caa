"""UTXO Structural Validator: проверка UTXO и ответов индексатора

UTXO валиден, если содержит tx_hash (str), tx_pos (int), height (int),
value (int) — см. core/contracts/schema/utxo.json.

Batch декодируется как tagged variant, формы проверяются по порядку:
1. FLAT            — непустой список UTXO
2. ADDRESS_GROUPED — непустой список {address, utxos: [UTXO, ...]} (bch-api)
3. LEGACY_WRAPPED  — объект с ключом unwrap_key (по умолчанию 'utxos'),
                     значение которого — непустой список UTXO

Разворачивается только ключ unwrap_key: объект-обёртка с другими ключами
(например hydratedUtxoDetails со списком внутри slpUtxos) отклоняется,
даже если на уровень глубже лежит валидный список.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from ecash_validation.core.contracts.validators import (
    AddressUtxosContractValidator,
    UtxoContractValidator,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Ключ, который разворачивается у legacy-объекта
LEGACY_UNWRAP_KEY: Final[str] = "utxos"

_UTXO_CONTRACT: Final[UtxoContractValidator] = UtxoContractValidator()
_ADDRESS_UTXOS_CONTRACT: Final[AddressUtxosContractValidator] = AddressUtxosContractValidator()


# =============================================================================
# RESULT
# =============================================================================


class UtxoBatchShape(str, Enum):
    """Распознанная форма batch."""

    FLAT = "flat"
    ADDRESS_GROUPED = "address_grouped"
    LEGACY_WRAPPED = "legacy_wrapped"


@dataclass(frozen=True)
class UtxoBatchDecoding:
    """Результат декодирования batch."""

    shape: UtxoBatchShape | None
    block_reason: str

    # Все UTXO batch в исходном порядке (пусто при отказе)
    utxos: tuple[Mapping[str, Any], ...]

    @property
    def is_valid(self) -> bool:
        return self.shape is not None


# =============================================================================
# UTXO
# =============================================================================


def is_valid_utxo(utxo: object) -> bool:
    """True если запись содержит все обязательные поля правильных типов."""
    if not isinstance(utxo, Mapping):
        return False
    return _UTXO_CONTRACT.is_valid(dict(utxo))


def _is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _invalid_utxo_index(utxos: list | tuple) -> int | None:
    for index, utxo in enumerate(utxos):
        if not is_valid_utxo(utxo):
            return index
    return None


# =============================================================================
# BATCH DECODING
# =============================================================================


def _rejected(reason: str) -> UtxoBatchDecoding:
    logger.debug("UTXO batch rejected: %s", reason)
    return UtxoBatchDecoding(shape=None, block_reason=reason, utxos=())


def _decode_flat(batch: list | tuple) -> UtxoBatchDecoding | None:
    if _invalid_utxo_index(batch) is not None:
        return None
    return UtxoBatchDecoding(shape=UtxoBatchShape.FLAT, block_reason="", utxos=tuple(batch))


def _decode_address_grouped(batch: list | tuple) -> UtxoBatchDecoding | str:
    utxos: list[Mapping[str, Any]] = []
    for group_index, group in enumerate(batch):
        if not isinstance(group, Mapping) or not _ADDRESS_UTXOS_CONTRACT.is_valid(dict(group)):
            return f"element {group_index} is neither a utxo nor an address utxo bucket"

        bad_index = _invalid_utxo_index(group["utxos"])
        if bad_index is not None:
            return f"element {group_index}: invalid utxo at index {bad_index}"
        utxos.extend(group["utxos"])

    return UtxoBatchDecoding(
        shape=UtxoBatchShape.ADDRESS_GROUPED, block_reason="", utxos=tuple(utxos)
    )


def decode_utxo_batch(
    batch: object,
    unwrap_key: str | None = LEGACY_UNWRAP_KEY,
) -> UtxoBatchDecoding:
    """Декодирование ответа индексатора с UTXO.

    Args:
        batch: список UTXO, список {address, utxos} или legacy-объект
        unwrap_key: ключ legacy-объекта (None отключает legacy форму)

    Returns:
        UtxoBatchDecoding; исключения не выбрасываются
    """
    if batch is None:
        return _rejected("batch is missing")

    if isinstance(batch, Mapping):
        if unwrap_key is None or unwrap_key not in batch:
            return _rejected(f"object without '{unwrap_key}' key")

        inner = batch[unwrap_key]
        if not _is_sequence(inner) or not inner:
            return _rejected(f"'{unwrap_key}' is not a non-empty sequence")

        bad_index = _invalid_utxo_index(inner)
        if bad_index is not None:
            return _rejected(f"'{unwrap_key}': invalid utxo at index {bad_index}")

        return UtxoBatchDecoding(
            shape=UtxoBatchShape.LEGACY_WRAPPED, block_reason="", utxos=tuple(inner)
        )

    if not _is_sequence(batch):
        return _rejected(f"unsupported batch type {type(batch).__name__}")

    if not batch:
        return _rejected("empty sequence")

    flat = _decode_flat(batch)
    if flat is not None:
        return flat

    grouped = _decode_address_grouped(batch)
    if isinstance(grouped, UtxoBatchDecoding):
        return grouped
    return _rejected(grouped)


def is_valid_bch_api_utxo_object(
    batch: object,
    unwrap_key: str | None = LEGACY_UNWRAP_KEY,
) -> bool:
    return decode_utxo_batch(batch, unwrap_key).is_valid
