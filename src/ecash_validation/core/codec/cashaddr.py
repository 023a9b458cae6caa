"""
CashAddr — Декодер адресов формата cashaddr

Единый декодер, параметризованный сетью {prefix, charset, generators}.
Вызывается по одному разу на каждую целевую классификацию
(ecash / etoken / чужие сети), поэтому граница accept/reject
у всех валидаторов адресов одна и та же.

Формат:
    [prefix:]payload
    payload = base32(version_byte || hash) || checksum(8 символов)

Checksum — BCH-код (polymod) по:
    expand(prefix) || 0 || payload_values || checksum_values
Валидный адрес даёт polymod == 0. Любая замена одного символа
(включая префикс, участвующий в checksum) детектируется.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Sequence


# =============================================================================
# ПАРАМЕТРЫ ФОРМАТА
# =============================================================================

CHARSET: Final[str] = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

GENERATORS: Final[tuple[int, ...]] = (
    0x98F2BC8E61,
    0x79B76D99E2,
    0xF33E5FB3C4,
    0xAE2EABE2A8,
    0x1E4F43E470,
)

# Длина checksum в 5-битных символах
CHECKSUM_LENGTH: Final[int] = 8

# Размер хэша по младшим 3 битам version byte
HASH_SIZE_BITS: Final[tuple[int, ...]] = (160, 192, 224, 256, 320, 384, 448, 512)

# Минимальная длина payload: version byte + 160-битный хэш = 34 символа
MIN_PAYLOAD_LENGTH: Final[int] = 34 + CHECKSUM_LENGTH

PREFIX_SEPARATOR: Final[str] = ":"


# =============================================================================
# ТИПЫ
# =============================================================================


class CashAddrDecodeError(ValueError):
    """Строка не является корректным cashaddr для заданной сети."""


class CashAddrType(int, Enum):
    """Тип адреса из version byte."""

    P2PKH = 0
    P2SH = 1


@dataclass(frozen=True)
class CashAddrNetwork:
    """Параметры сети для декодера."""

    prefix: str
    charset: str = CHARSET
    generators: tuple[int, ...] = GENERATORS


@dataclass(frozen=True)
class DecodedCashAddr:
    """Результат успешного декодирования."""

    prefix: str
    address_type: CashAddrType
    hash: bytes

    @property
    def hash_size_bits(self) -> int:
        return len(self.hash) * 8


# =============================================================================
# CHECKSUM
# =============================================================================


def polymod(values: Iterable[int], generators: Sequence[int] = GENERATORS) -> int:
    """
    BCH polymod по 5-битным значениям.

    Returns:
        0 для последовательности с корректным checksum
    """
    c = 1
    for d in values:
        c0 = c >> 35
        c = ((c & 0x07FFFFFFFF) << 5) ^ d
        for i, generator in enumerate(generators):
            if (c0 >> i) & 1:
                c ^= generator
    return c ^ 1


def expand_prefix(prefix: str) -> list[int]:
    """Младшие 5 бит каждого символа префикса + разделитель 0."""
    return [ord(ch) & 0x1F for ch in prefix] + [0]


def verify_checksum(prefix: str, values: Sequence[int], network: CashAddrNetwork) -> bool:
    return polymod(expand_prefix(prefix) + list(values), network.generators) == 0


# =============================================================================
# ПРЕОБРАЗОВАНИЕ БИТ
# =============================================================================


def convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    """
    Перегруппировка бит (5 → 8 при декодировании).

    При pad=False остаток должен быть короче from_bits и состоять из нулей.

    Raises:
        CashAddrDecodeError: Если значение вне диапазона или padding некорректен
    """
    acc = 0
    bits = 0
    result: list[int] = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1

    for value in data:
        if value < 0 or value >> from_bits:
            raise CashAddrDecodeError(f"Value {value} out of range for {from_bits} bits")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((acc >> bits) & maxv)

    if pad:
        if bits:
            result.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        raise CashAddrDecodeError("Invalid padding in payload")

    return result


# =============================================================================
# ДЕКОДЕР
# =============================================================================


def split_prefix(address: str) -> tuple[str | None, str]:
    """
    Разделение 'prefix:payload'.

    Returns:
        (prefix или None, payload)

    Raises:
        CashAddrDecodeError: Если разделителей больше одного
    """
    if address.count(PREFIX_SEPARATOR) > 1:
        raise CashAddrDecodeError("Address contains more than one prefix separator")
    if PREFIX_SEPARATOR in address:
        prefix, payload = address.split(PREFIX_SEPARATOR)
        return prefix, payload
    return None, address


def decode_cashaddr(address: str, network: CashAddrNetwork) -> DecodedCashAddr:
    """
    Декодирование и проверка адреса для конкретной сети.

    Порядок проверок:
    1. Тип и регистр (только целиком lower или целиком upper)
    2. Префикс (если указан) совпадает с network.prefix
    3. Символы payload из network.charset, длина payload
    4. Checksum по network.prefix + payload
    5. Version byte и длина хэша

    Args:
        address: Адрес с префиксом или без
        network: Параметры целевой сети

    Returns:
        DecodedCashAddr

    Raises:
        CashAddrDecodeError: На любом нарушении формата
    """
    if not isinstance(address, str) or not address:
        raise CashAddrDecodeError("Address must be a non-empty string")

    if address.lower() != address and address.upper() != address:
        raise CashAddrDecodeError("Mixed-case address")
    address = address.lower()

    prefix, payload = split_prefix(address)
    if prefix is not None and prefix != network.prefix:
        raise CashAddrDecodeError(
            f"Prefix mismatch: expected {network.prefix!r}, got {prefix!r}"
        )

    if len(payload) < MIN_PAYLOAD_LENGTH:
        raise CashAddrDecodeError(f"Payload too short: {len(payload)} chars")

    values: list[int] = []
    for ch in payload:
        index = network.charset.find(ch)
        if index < 0:
            raise CashAddrDecodeError(f"Invalid character {ch!r} in payload")
        values.append(index)

    if not verify_checksum(network.prefix, values, network):
        raise CashAddrDecodeError(f"Invalid checksum for prefix {network.prefix!r}")

    data = convert_bits(values[:-CHECKSUM_LENGTH], 5, 8, pad=False)
    version = data[0]

    # Старший бит version byte зарезервирован
    if version & 0x80:
        raise CashAddrDecodeError(f"Reserved bit set in version byte {version:#04x}")

    type_bits = (version >> 3) & 0x0F
    try:
        address_type = CashAddrType(type_bits)
    except ValueError:
        raise CashAddrDecodeError(f"Unknown address type {type_bits}")

    hash_bytes = bytes(data[1:])
    expected_bits = HASH_SIZE_BITS[version & 0x07]
    if len(hash_bytes) * 8 != expected_bits:
        raise CashAddrDecodeError(
            f"Hash length {len(hash_bytes) * 8} bits does not match version byte ({expected_bits} bits)"
        )

    return DecodedCashAddr(prefix=network.prefix, address_type=address_type, hash=hash_bytes)
