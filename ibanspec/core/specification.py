"""Per-country IBAN specification.

A ``Specification`` binds a country code, the total IBAN length, the BBAN
structure notation and a documented example. It validates IBANs, splits them
into BBAN segments and generates IBANs from BBANs.

Usage:
    >>> gb = Specification("GB", 22, "4!a6!n8!n", "GB29NWBK60161331926819")
    >>> gb.is_valid("GB82WEST12345698765432")
    True
    >>> gb.to_bban("GB82WEST12345698765432", " ")
    'WEST 123456 98765432'
    >>> gb.from_bban("WEST12345698765432")
    'GB82WEST12345698765432'
"""

from dataclasses import dataclass
from functools import cached_property

from ibanspec.core.checksum import compute_check_digits, iso7064_mod97_10, iso13616_prepare
from ibanspec.core.structure import StructureMatcher, compile_structure
from ibanspec.exceptions import (
    InvalidBBANError,
    InvalidCharacterError,
    InvalidIBANError,
    MalformedStructureError,
)
from ibanspec.utils.logging import get_logger

logger = get_logger(__name__)

# Country code (2) + check digits (2)
PREFIX_LENGTH = 4


@dataclass(frozen=True)
class Specification:
    """IBAN format of one country.

    Attributes:
        country_code: ISO 3166-1 alpha-2 code (e.g. "GB")
        length: Total IBAN length including country code and check digits
        structure: BBAN structure notation (e.g. "4!a6!n8!n")
        example: A known-valid IBAN for documentation and tests
    """

    country_code: str
    length: int
    structure: str
    example: str

    @cached_property
    def matcher(self) -> StructureMatcher:
        """Matcher compiled from ``structure`` on first use.

        Compilation is deterministic, so concurrent first calls at worst
        compile twice and keep one result.
        """
        return compile_structure(self.structure)

    def _matches(self, bban: str) -> bool:
        try:
            return self.matcher.matches(bban)
        except MalformedStructureError as e:
            logger.error(
                "structure_malformed", country_code=self.country_code, error=str(e)
            )
            return False

    @property
    def bban_length(self) -> int:
        return self.length - PREFIX_LENGTH

    def is_valid(self, iban: str) -> bool:
        """Check if the passed IBAN is valid according to this specification.

        Length, country prefix, BBAN structure and the MOD97-10 checksum must
        all hold. Never raises: malformed input and a malformed structure both
        classify as invalid.
        """
        if not isinstance(iban, str):
            return False
        if len(iban) != self.length or iban[:2] != self.country_code:
            return False
        if not self._matches(iban[PREFIX_LENGTH:]):
            return False
        try:
            return iso7064_mod97_10(iso13616_prepare(iban)) == 1
        except InvalidCharacterError:
            return False

    def to_bban(self, iban: str, separator: str) -> str:
        """Convert the passed IBAN to a country-specific BBAN.

        The IBAN must already be structurally valid; segments are joined with
        ``separator`` in structure order.

        Raises:
            InvalidIBANError: if the BBAN part does not match the structure
        """
        segments = self.matcher.match(iban[PREFIX_LENGTH:])
        if segments is None:
            raise InvalidIBANError(
                f"IBAN does not match the {self.country_code} BBAN structure",
                field="iban",
                value=iban,
                constraint=self.structure,
            )
        return separator.join(segments)

    def from_bban(self, bban: str) -> str:
        """Convert the passed BBAN to an IBAN for this country.

        Check digits follow the ISO 13616 generation algorithm:
        ``98 - mod97(country_code + "00" + bban)``.

        Raises:
            InvalidBBANError: if ``bban`` is not valid for this specification
        """
        if not self.is_valid_bban(bban):
            logger.warning(
                "bban_rejected",
                country_code=self.country_code,
                bban_length=len(bban) if isinstance(bban, str) else None,
                expected_length=self.bban_length,
            )
            raise InvalidBBANError(
                "Invalid BBAN",
                country_code=self.country_code,
                field="bban",
                value=bban,
                constraint=self.structure,
            )

        iban = self.country_code + compute_check_digits(self.country_code, bban) + bban
        logger.debug("iban_generated", country_code=self.country_code, iban=iban)
        return iban

    def is_valid_bban(self, bban: str) -> bool:
        """Check the BBAN format (length and segment classes) only.

        The check digits are not part of a BBAN, so no checksum is verified.
        """
        return (
            isinstance(bban, str)
            and len(bban) == self.bban_length
            and self._matches(bban)
        )
