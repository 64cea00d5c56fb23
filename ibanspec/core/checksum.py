"""ISO 13616 rearrangement and ISO 7064 MOD97-10 checksum.

An IBAN is valid when, after moving its first four characters to the end and
replacing letters with two-digit numbers (A=10 ... Z=35), the resulting
integer modulo 97 equals 1.

The numeric form of a long IBAN easily exceeds 60 digits, so the remainder is
computed block by block with native-size integers.
"""

from ibanspec.exceptions import InvalidCharacterError

# 97 * 10**9 + 10**9 fits comfortably in 64 bits
BLOCK_SIZE = 9
MODULUS = 97

_ALPHANUMERIC = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_DIGITS = frozenset("0123456789")


def iso13616_prepare(iban: str) -> str:
    """Rearrange an IBAN and convert it to its numeric form.

    Args:
        iban: IBAN (or ``country code + "00" + BBAN``), letters in any case

    Returns:
        Pure digit string, e.g. ``"GB82WEST12345698765432"`` becomes
        ``"3214282912345698765432161182"``

    Raises:
        InvalidCharacterError: if any character is outside ``[A-Za-z0-9]``
    """
    for position, char in enumerate(iban):
        if char not in _ALPHANUMERIC:
            raise InvalidCharacterError(
                "IBAN contains a non-alphanumeric character",
                field="iban",
                character=char,
                position=position,
            )

    rearranged = (iban[4:] + iban[:4]).upper()
    return "".join(char if char in _DIGITS else str(ord(char) - 55) for char in rearranged)


def iso7064_mod97_10(numeric: str) -> int:
    """Compute ``numeric mod 97`` over a digit string of any length.

    Returns:
        Remainder in the range 0..96

    Raises:
        InvalidCharacterError: if ``numeric`` contains anything but digits
    """
    remainder = 0
    for start in range(0, len(numeric), BLOCK_SIZE):
        block = numeric[start : start + BLOCK_SIZE]
        for offset, char in enumerate(block):
            if char not in _DIGITS:
                raise InvalidCharacterError(
                    "Checksum input must contain digits only",
                    field="numeric",
                    character=char,
                    position=start + offset,
                )
        remainder = (remainder * 10 ** len(block) + int(block)) % MODULUS
    return remainder


def compute_check_digits(country_code: str, bban: str) -> str:
    """Compute the two IBAN check digits for a BBAN.

    Returns:
        Zero-padded check digits, always in ``"02"``..``"98"``
    """
    remainder = iso7064_mod97_10(iso13616_prepare(country_code + "00" + bban))
    return f"{98 - remainder:02d}"
