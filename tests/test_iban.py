"""Tests for the country-aware IBAN helpers."""

import pytest

from ibanspec import iban as iban_utils
from ibanspec.exceptions import InvalidBBANError, InvalidIBANError, UnknownCountryError

pytestmark = pytest.mark.unit


class TestElectronicFormat:
    def test_strips_separators_and_uppercases(self):
        assert iban_utils.electronic_format(" gb82-west 1234.5698/7654 32\n") == (
            "GB82WEST12345698765432"
        )

    def test_already_electronic(self):
        assert iban_utils.electronic_format("DE89370400440532013000") == "DE89370400440532013000"


class TestPrintFormat:
    def test_groups_of_four(self):
        assert iban_utils.print_format("GB82WEST12345698765432") == "GB82 WEST 1234 5698 7654 32"

    def test_no_trailing_separator(self):
        assert iban_utils.print_format("AT611904300234573201") == "AT61 1904 3002 3457 3201"

    def test_custom_separator(self):
        assert iban_utils.print_format("be68539007547034", "-") == "BE68-5390-0754-7034"

    def test_normalizes_input_first(self):
        assert iban_utils.print_format("gb82 west1234 5698 765432") == (
            "GB82 WEST 1234 5698 7654 32"
        )


class TestIsValid:
    @pytest.mark.parametrize(
        "iban",
        [
            "GB82WEST12345698765432",
            "gb82 west 1234 5698 7654 32",
            "DE89 3704 0044 0532 0130 00",
            "FR14 2004 1010 0505 0001 3M02 606",
            "MT84MALT011000012345MTLCAST001S",
        ],
    )
    def test_valid(self, iban):
        assert iban_utils.is_valid(iban) is True

    @pytest.mark.parametrize(
        "iban",
        [
            "GB82WEST12345698765433",
            "XX82WEST12345698765432",
            "",
            "GB",
            "------",
        ],
    )
    def test_invalid(self, iban):
        assert iban_utils.is_valid(iban) is False

    def test_non_string(self):
        assert iban_utils.is_valid(None) is False  # type: ignore[arg-type]
        assert iban_utils.is_valid(12345) is False  # type: ignore[arg-type]


class TestToBban:
    def test_default_separator(self):
        assert iban_utils.to_bban("GB82 WEST 1234 5698 7654 32") == "WEST 123456 98765432"

    def test_custom_separator(self):
        assert iban_utils.to_bban("DE89370400440532013000", ".") == "37040044.0532013000"

    def test_unknown_country(self):
        with pytest.raises(UnknownCountryError):
            iban_utils.to_bban("XX82WEST12345698765432")

    def test_structure_mismatch(self):
        with pytest.raises(InvalidIBANError):
            iban_utils.to_bban("GB82WEST1234569876543X")


class TestFromBban:
    def test_generates_iban(self):
        assert iban_utils.from_bban("GB", "WEST12345698765432") == "GB82WEST12345698765432"

    def test_normalizes_bban_and_country(self):
        assert iban_utils.from_bban("de", "3704 0044 0532 0130 00") == "DE89370400440532013000"

    def test_unknown_country(self):
        with pytest.raises(UnknownCountryError):
            iban_utils.from_bban("XX", "WEST12345698765432")

    def test_invalid_bban(self):
        with pytest.raises(InvalidBBANError):
            iban_utils.from_bban("GB", "WEST1234")


class TestIsValidBban:
    def test_valid(self):
        assert iban_utils.is_valid_bban("GB", "WEST 123456 98765432") is True

    def test_invalid(self):
        assert iban_utils.is_valid_bban("GB", "WEST1234") is False

    def test_unknown_country(self):
        assert iban_utils.is_valid_bban("XX", "WEST12345698765432") is False

    def test_non_string(self):
        assert iban_utils.is_valid_bban("GB", None) is False  # type: ignore[arg-type]


class TestPackageExports:
    def test_top_level_api(self):
        import ibanspec

        assert ibanspec.is_valid("GB82WEST12345698765432")
        assert ibanspec.from_bban("GB", "WEST12345698765432") == "GB82WEST12345698765432"
        assert ibanspec.CountryRegistry.get("GB").structure == "4!a6!n8!n"
