"""
Address codecs.

Декодирование адресов с проверкой checksum; не зависит от конфигурации актива.
"""

from .cashaddr import (
    CHARSET,
    GENERATORS,
    CashAddrDecodeError,
    CashAddrNetwork,
    CashAddrType,
    DecodedCashAddr,
    convert_bits,
    decode_cashaddr,
    expand_prefix,
    polymod,
    split_prefix,
    verify_checksum,
)

__all__ = [
    "CHARSET",
    "GENERATORS",
    "CashAddrDecodeError",
    "CashAddrNetwork",
    "CashAddrType",
    "DecodedCashAddr",
    "convert_bits",
    "decode_cashaddr",
    "expand_prefix",
    "polymod",
    "split_prefix",
    "verify_checksum",
]
