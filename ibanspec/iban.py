"""Country-aware IBAN helpers.

These functions accept user-entered strings (spaces, dashes, lower case),
normalize them to the electronic format and dispatch to the registered
country ``Specification``.

Usage:
    >>> is_valid("gb82 west 1234 5698 7654 32")
    True
    >>> to_bban("GB82WEST12345698765432")
    'WEST 123456 98765432'
    >>> from_bban("GB", "WEST12345698765432")
    'GB82WEST12345698765432'
    >>> print_format("GB82WEST12345698765432")
    'GB82 WEST 1234 5698 7654 32'
"""

import re

from ibanspec.registry import CountryRegistry

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_EVERY_FOUR_CHARS = re.compile(r"(.{4})(?!$)")


def electronic_format(iban: str) -> str:
    """Strip every non-alphanumeric character and upper-case the rest."""
    return _NON_ALPHANUMERIC.sub("", iban).upper()


def print_format(iban: str, separator: str = " ") -> str:
    """Group the electronic format in blocks of four characters."""
    return _EVERY_FOUR_CHARS.sub(lambda m: m.group(1) + separator, electronic_format(iban))


def is_valid(iban: str) -> bool:
    """Check an IBAN against the specification of its country.

    Unknown countries and non-string input are reported as invalid.
    """
    if not isinstance(iban, str):
        return False
    iban = electronic_format(iban)
    spec = CountryRegistry.get(iban[:2])
    return spec is not None and spec.is_valid(iban)


def to_bban(iban: str, separator: str = " ") -> str:
    """Convert an IBAN to its BBAN, segments joined by ``separator``.

    Raises:
        UnknownCountryError: if the IBAN's country is not registered
        InvalidIBANError: if the IBAN does not match the country structure
    """
    iban = electronic_format(iban)
    return CountryRegistry.require(iban[:2]).to_bban(iban, separator)


def from_bban(country_code: str, bban: str) -> str:
    """Build the IBAN for a BBAN of the given country.

    Raises:
        UnknownCountryError: if the country is not registered
        InvalidBBANError: if the BBAN does not match the country structure
    """
    return CountryRegistry.require(country_code).from_bban(electronic_format(bban))


def is_valid_bban(country_code: str, bban: str) -> bool:
    """Check a BBAN against the structure of the given country."""
    if not isinstance(bban, str):
        return False
    spec = CountryRegistry.get(country_code)
    return spec is not None and spec.is_valid_bban(electronic_format(bban))
