"""Specification engine: structure compiler, checksum and country specification."""

__all__ = [
    "StructureMatcher",
    "compile_structure",
    "compute_check_digits",
    "iso13616_prepare",
    "iso7064_mod97_10",
    "Specification",
]

from .checksum import compute_check_digits, iso7064_mod97_10, iso13616_prepare
from .specification import Specification
from .structure import StructureMatcher, compile_structure
