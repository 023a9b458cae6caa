"""Address Validator: классификация адресов по сети и checksum

Классы адресов:
- NATIVE    — cashaddr с валидным checksum для префикса ecash
- TOKEN     — cashaddr с валидным checksum для префикса etoken
- FOREIGN   — чужая сеть (bitcoincash, simpleledger, неизвестный префикс, legacy base58)
- MALFORMED — не декодируется ни для одной известной сети

Правила:
- Префикс, если указан, должен совпасть с сетью; иначе checksum не проверяется
  для других сетей (etoken:... никогда не станет NATIVE)
- Адрес без префикса декодируется по очереди для каждой известной сети;
  класс определяет сеть, для которой сошёлся checksum
- Checksum считается по префиксу сети + payload, поэтому одинаковый хэш
  под разными префиксами даёт разные строки
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ecash_validation.core.codec.cashaddr import (
    CashAddrDecodeError,
    CashAddrNetwork,
    CashAddrType,
    decode_cashaddr,
    split_prefix,
)
from ecash_validation.core.domain.currency import DEFAULT_CURRENCY, CurrencyConfig

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Legacy P2PKH/P2SH адрес в base58 (1... / 3...)
LEGACY_BASE58_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[13][1-9A-HJ-NP-Za-km-z]{25,34}$"
)


# =============================================================================
# RESULT
# =============================================================================


class AddressKind(str, Enum):
    """Класс адреса после декодирования."""

    NATIVE = "native"
    TOKEN = "token"
    FOREIGN = "foreign"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class AddressClassification:
    """Результат классификации адреса."""

    kind: AddressKind

    # Сеть, для которой сошёлся checksum (None если не декодирован)
    prefix: str | None
    address_type: CashAddrType | None
    hash: bytes | None

    # Причина для FOREIGN/MALFORMED ('' для успешно декодированных)
    block_reason: str

    @property
    def is_decoded(self) -> bool:
        return self.hash is not None


# =============================================================================
# ADDRESS VALIDATOR
# =============================================================================


class AddressValidator:
    """Классификатор адресов для заданной конфигурации актива.

    Порядок сетей фиксирован: нативная, токенная, затем чужие.
    """

    def __init__(self, currency: CurrencyConfig | None = None):
        """Инициализация валидатора.

        Args:
            currency: конфигурация актива (опционально, используется DEFAULT_CURRENCY)
        """
        self.currency = currency or DEFAULT_CURRENCY
        self.networks: tuple[tuple[AddressKind, CashAddrNetwork], ...] = (
            (AddressKind.NATIVE, CashAddrNetwork(prefix=self.currency.prefix)),
            (AddressKind.TOKEN, CashAddrNetwork(prefix=self.currency.token_prefix)),
            *(
                (AddressKind.FOREIGN, CashAddrNetwork(prefix=prefix))
                for prefix in self.currency.foreign_prefixes
            ),
        )

    def classify(self, address: object) -> AddressClassification:
        """Классификация адреса.

        Args:
            address: строка адреса (с префиксом или без), None допускается

        Returns:
            AddressClassification; исключения не выбрасываются
        """
        if not isinstance(address, str) or not address:
            return self._rejected(AddressKind.MALFORMED, "empty_or_not_string")

        if LEGACY_BASE58_PATTERN.match(address):
            return self._rejected(AddressKind.FOREIGN, "legacy_base58")

        try:
            prefix, _ = split_prefix(address.lower())
        except CashAddrDecodeError as e:
            return self._rejected(AddressKind.MALFORMED, str(e))

        if prefix is None:
            candidates = self.networks
        else:
            candidates = tuple(
                (kind, network) for kind, network in self.networks if network.prefix == prefix
            )
            if not candidates:
                return self._rejected(AddressKind.FOREIGN, f"unknown_prefix: {prefix}")

        last_error = ""
        for kind, network in candidates:
            try:
                decoded = decode_cashaddr(address, network)
            except CashAddrDecodeError as e:
                last_error = str(e)
                continue

            return AddressClassification(
                kind=kind,
                prefix=decoded.prefix,
                address_type=decoded.address_type,
                hash=decoded.hash,
                block_reason="",
            )

        return self._rejected(AddressKind.MALFORMED, last_error)

    def is_valid_for(self, address: object, kind: AddressKind) -> bool:
        return self.classify(address).kind == kind

    def _rejected(self, kind: AddressKind, reason: str) -> AddressClassification:
        logger.debug("Address rejected: kind=%s reason=%s", kind.value, reason)
        return AddressClassification(
            kind=kind,
            prefix=None,
            address_type=None,
            hash=None,
            block_reason=reason,
        )


_DEFAULT_VALIDATOR: Final[AddressValidator] = AddressValidator()


def _validator_for(currency: CurrencyConfig) -> AddressValidator:
    if currency is DEFAULT_CURRENCY:
        return _DEFAULT_VALIDATOR
    return AddressValidator(currency)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def classify_address(
    address: object, currency: CurrencyConfig = DEFAULT_CURRENCY
) -> AddressClassification:
    return _validator_for(currency).classify(address)


def is_valid_xec_address(address: object, currency: CurrencyConfig = DEFAULT_CURRENCY) -> bool:
    """True только для адресов нативного актива (ecash:... или без префикса)."""
    return _validator_for(currency).is_valid_for(address, AddressKind.NATIVE)


def is_valid_etoken_address(address: object, currency: CurrencyConfig = DEFAULT_CURRENCY) -> bool:
    """True только для токенных адресов (etoken:... или без префикса)."""
    return _validator_for(currency).is_valid_for(address, AddressKind.TOKEN)
