"""IBAN and BBAN validation, parsing and generation.

Country formats are modelled as ``Specification`` objects built from the
SWIFT structure notation; check digits follow ISO 13616 / ISO 7064 MOD97-10.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Specification",
    "CountryRegistry",
    "electronic_format",
    "print_format",
    "is_valid",
    "to_bban",
    "from_bban",
    "is_valid_bban",
]

from .core.specification import Specification
from .iban import electronic_format, from_bban, is_valid, is_valid_bban, print_format, to_bban
from .registry import CountryRegistry
