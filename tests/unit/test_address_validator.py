"""
Unit tests: Address Validator

Проверка классификации адресов:
- NATIVE / TOKEN только с валидным checksum для своего префикса
- FOREIGN для bitcoincash, simpleledger, неизвестных префиксов и legacy base58
- MALFORMED для всего, что не декодируется
"""

import pytest

from ecash_validation.core.codec import CHARSET, CashAddrType
from ecash_validation.core.domain import DEFAULT_CURRENCY
from ecash_validation.validators.address import (
    AddressKind,
    AddressValidator,
    classify_address,
    is_valid_etoken_address,
    is_valid_xec_address,
)


# =============================================================================
# TEST VECTORS
# =============================================================================

XEC_ADDRESS = "ecash:qz2708636snqhsxu8wnlka78h6fdp77ar59jrf5035"
XEC_PAYLOAD = "qz2708636snqhsxu8wnlka78h6fdp77ar59jrf5035"
ETOKEN_ADDRESS = "etoken:qz2708636snqhsxu8wnlka78h6fdp77ar5tv2tzg4r"
ETOKEN_PAYLOAD = "qz2708636snqhsxu8wnlka78h6fdp77ar5tv2tzg4r"
BCH_ADDRESS = "bitcoincash:qz2708636snqhsxu8wnlka78h6fdp77ar5ulhz04hr"
BCH_PAYLOAD = "qz2708636snqhsxu8wnlka78h6fdp77ar5ulhz04hr"
SLP_ADDRESS = "simpleledger:qrujw0wrzncyxw8q3d0xkfet4jafrqhk6csev0v6y3"
LEGACY_ADDRESS = "1Efd9z9GRVJK2r73nUpFmBnsKUmfXNm2y2"


# =============================================================================
# XEC ADDRESSES
# =============================================================================


class TestIsValidXecAddress:
    def test_prefixed_address(self) -> None:
        assert is_valid_xec_address(XEC_ADDRESS) is True

    def test_prefixless_address(self) -> None:
        assert is_valid_xec_address(XEC_PAYLOAD) is True

    def test_uppercase_address(self) -> None:
        assert is_valid_xec_address(XEC_ADDRESS.upper()) is True

    @pytest.mark.parametrize(
        "address",
        [ETOKEN_ADDRESS, ETOKEN_PAYLOAD, BCH_ADDRESS, BCH_PAYLOAD, SLP_ADDRESS, LEGACY_ADDRESS],
    )
    def test_other_networks_rejected(self, address) -> None:
        assert is_valid_xec_address(address) is False

    def test_token_payload_under_native_prefix(self) -> None:
        """Checksum etoken не сходится для префикса ecash."""
        assert is_valid_xec_address("ecash:" + ETOKEN_PAYLOAD) is False

    @pytest.mark.parametrize(
        "address",
        [
            None,
            "",
            42,
            "ecash:",
            "ecash:qz2708636snq",
            "ecash:ecash:" + XEC_PAYLOAD,
            "ecash:Qz2708636snqhsxu8wnlka78h6fdp77ar59jrf5035",
            "Not an address",
        ],
    )
    def test_malformed_rejected(self, address) -> None:
        assert is_valid_xec_address(address) is False


# =============================================================================
# ETOKEN ADDRESSES
# =============================================================================


class TestIsValidEtokenAddress:
    def test_prefixed_address(self) -> None:
        assert is_valid_etoken_address(ETOKEN_ADDRESS) is True

    def test_prefixless_address(self) -> None:
        assert is_valid_etoken_address(ETOKEN_PAYLOAD) is True

    def test_native_payload_under_token_prefix(self) -> None:
        assert is_valid_etoken_address("etoken:" + XEC_PAYLOAD) is False

    @pytest.mark.parametrize("address", [XEC_ADDRESS, XEC_PAYLOAD, BCH_ADDRESS, SLP_ADDRESS, LEGACY_ADDRESS])
    def test_other_networks_rejected(self, address) -> None:
        assert is_valid_etoken_address(address) is False


# =============================================================================
# CHECKSUM MUTATION
# =============================================================================


def _mutations(address: str, start: int):
    """Все замены одного символа payload на другой символ алфавита."""
    for position in range(start, len(address)):
        for ch in CHARSET:
            if ch != address[position]:
                yield address[:position] + ch + address[position + 1 :]


@pytest.mark.parametrize(
    "address, start",
    [
        (XEC_ADDRESS, len("ecash:")),
        (ETOKEN_ADDRESS, len("etoken:")),
    ],
)
def test_single_character_substitution_rejected_by_both(address, start) -> None:
    """Любая замена одного символа делает адрес невалидным для обеих сетей."""
    for mutated in _mutations(address, start):
        assert is_valid_xec_address(mutated) is False, mutated
        assert is_valid_etoken_address(mutated) is False, mutated


# =============================================================================
# CLASSIFICATION
# =============================================================================


class TestClassifyAddress:
    def test_native(self) -> None:
        result = classify_address(XEC_ADDRESS)

        assert result.kind is AddressKind.NATIVE
        assert result.prefix == "ecash"
        assert result.address_type is CashAddrType.P2PKH
        assert result.is_decoded
        assert result.block_reason == ""

    def test_token_and_native_share_hash(self) -> None:
        assert classify_address(ETOKEN_ADDRESS).hash == classify_address(XEC_ADDRESS).hash

    @pytest.mark.parametrize("address, prefix", [(BCH_ADDRESS, "bitcoincash"), (BCH_PAYLOAD, "bitcoincash"), (SLP_ADDRESS, "simpleledger")])
    def test_known_foreign_networks_are_decoded(self, address, prefix) -> None:
        result = classify_address(address)

        assert result.kind is AddressKind.FOREIGN
        assert result.prefix == prefix
        assert result.is_decoded

    def test_legacy_base58_is_foreign(self) -> None:
        result = classify_address(LEGACY_ADDRESS)

        assert result.kind is AddressKind.FOREIGN
        assert result.block_reason == "legacy_base58"
        assert not result.is_decoded

    def test_unknown_prefix_is_foreign(self) -> None:
        result = classify_address("bchtest:" + XEC_PAYLOAD)

        assert result.kind is AddressKind.FOREIGN
        assert "bchtest" in result.block_reason

    def test_bad_checksum_is_malformed(self) -> None:
        result = classify_address("ecash:" + ETOKEN_PAYLOAD)

        assert result.kind is AddressKind.MALFORMED
        assert "checksum" in result.block_reason


def test_custom_currency_prefixes() -> None:
    """Префиксы берутся из CurrencyConfig."""
    cfg = DEFAULT_CURRENCY.model_copy(
        update={"prefix": "bitcoincash", "foreign_prefixes": ("ecash",)}
    )
    validator = AddressValidator(cfg)

    assert validator.is_valid_for(BCH_ADDRESS, AddressKind.NATIVE) is True
    assert validator.classify(XEC_ADDRESS).kind is AddressKind.FOREIGN
    assert is_valid_xec_address(BCH_PAYLOAD, cfg) is True
    assert is_valid_xec_address(XEC_ADDRESS, cfg) is False
