"""
Unit tests: CashAddr Codec

Проверка декодера, параметризованного сетью:
- Один и тот же хэш под разными префиксами
- Checksum привязан к префиксу
- Регистр, длина, алфавит, padding
"""

import pytest

from ecash_validation.core.codec import (
    CashAddrDecodeError,
    CashAddrNetwork,
    CashAddrType,
    convert_bits,
    decode_cashaddr,
    expand_prefix,
    split_prefix,
)


# =============================================================================
# FIXTURES
# =============================================================================

ECASH = CashAddrNetwork(prefix="ecash")
ETOKEN = CashAddrNetwork(prefix="etoken")
BITCOINCASH = CashAddrNetwork(prefix="bitcoincash")

# Один хэш, закодированный для трёх сетей
ECASH_PAYLOAD = "qz2708636snqhsxu8wnlka78h6fdp77ar59jrf5035"
ETOKEN_PAYLOAD = "qz2708636snqhsxu8wnlka78h6fdp77ar5tv2tzg4r"
BITCOINCASH_PAYLOAD = "qz2708636snqhsxu8wnlka78h6fdp77ar5ulhz04hr"


# =============================================================================
# HELPERS
# =============================================================================


class TestHelpers:
    def test_expand_prefix(self) -> None:
        assert expand_prefix("ecash") == [5, 3, 1, 19, 8, 0]

    def test_split_prefix(self) -> None:
        assert split_prefix("ecash:" + ECASH_PAYLOAD) == ("ecash", ECASH_PAYLOAD)
        assert split_prefix(ECASH_PAYLOAD) == (None, ECASH_PAYLOAD)

    def test_split_prefix_rejects_double_separator(self) -> None:
        with pytest.raises(CashAddrDecodeError):
            split_prefix("ecash:ecash:" + ECASH_PAYLOAD)

    def test_convert_bits_with_padding(self) -> None:
        assert convert_bits([255], 8, 5, pad=True) == [31, 28]

    def test_convert_bits_rejects_out_of_range(self) -> None:
        with pytest.raises(CashAddrDecodeError):
            convert_bits([32], 5, 8, pad=False)

    def test_convert_bits_rejects_excess_padding(self) -> None:
        with pytest.raises(CashAddrDecodeError):
            convert_bits([31], 5, 8, pad=False)

    def test_decode_error_is_value_error(self) -> None:
        assert issubclass(CashAddrDecodeError, ValueError)


# =============================================================================
# DECODING
# =============================================================================


class TestDecodeCashAddr:
    @pytest.mark.parametrize(
        "network, payload",
        [
            (ECASH, ECASH_PAYLOAD),
            (ETOKEN, ETOKEN_PAYLOAD),
            (BITCOINCASH, BITCOINCASH_PAYLOAD),
        ],
    )
    def test_decodes_with_and_without_prefix(self, network, payload) -> None:
        with_prefix = decode_cashaddr(f"{network.prefix}:{payload}", network)
        without_prefix = decode_cashaddr(payload, network)

        assert with_prefix == without_prefix
        assert with_prefix.prefix == network.prefix
        assert with_prefix.address_type is CashAddrType.P2PKH
        assert with_prefix.hash_size_bits == 160

    def test_same_hash_under_every_prefix(self) -> None:
        hashes = {
            decode_cashaddr(ECASH_PAYLOAD, ECASH).hash,
            decode_cashaddr(ETOKEN_PAYLOAD, ETOKEN).hash,
            decode_cashaddr(BITCOINCASH_PAYLOAD, BITCOINCASH).hash,
        }
        assert len(hashes) == 1

    def test_checksum_bound_to_prefix(self) -> None:
        """Payload etoken не проходит checksum для ecash."""
        with pytest.raises(CashAddrDecodeError, match="checksum"):
            decode_cashaddr(ETOKEN_PAYLOAD, ECASH)

    def test_prefix_mismatch(self) -> None:
        with pytest.raises(CashAddrDecodeError, match="Prefix mismatch"):
            decode_cashaddr("etoken:" + ETOKEN_PAYLOAD, ECASH)

    def test_uppercase_accepted(self) -> None:
        decoded = decode_cashaddr(("ecash:" + ECASH_PAYLOAD).upper(), ECASH)
        assert decoded == decode_cashaddr(ECASH_PAYLOAD, ECASH)

    def test_mixed_case_rejected(self) -> None:
        with pytest.raises(CashAddrDecodeError, match="Mixed-case"):
            decode_cashaddr("ecash:Qz2708636snqhsxu8wnlka78h6fdp77ar59jrf5035", ECASH)

    def test_character_outside_charset(self) -> None:
        """'b', 'i', 'o', '1' не входят в алфавит."""
        with pytest.raises(CashAddrDecodeError, match="Invalid character"):
            decode_cashaddr("qz2708636snqhsxu8wnlka78h6fdp77ar59jrf503b", ECASH)

    def test_too_short(self) -> None:
        with pytest.raises(CashAddrDecodeError, match="too short"):
            decode_cashaddr("ecash:qz2708636snq", ECASH)

    @pytest.mark.parametrize("address", ["", None, 42])
    def test_not_a_string(self, address) -> None:
        with pytest.raises(CashAddrDecodeError):
            decode_cashaddr(address, ECASH)

    def test_single_substitution_detected(self) -> None:
        mutated = ECASH_PAYLOAD[:10] + ("q" if ECASH_PAYLOAD[10] != "q" else "p") + ECASH_PAYLOAD[11:]
        with pytest.raises(CashAddrDecodeError):
            decode_cashaddr(mutated, ECASH)
