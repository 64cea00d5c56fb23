"""BBAN structure notation compiler.

Country formats in the SWIFT IBAN registry describe the BBAN as a sequence of
``<count>[!]<class>`` tokens, for example ``4!a6!n8!n`` for the United
Kingdom: four letters, six digits, eight digits.

Character classes:
    a: uppercase letters A-Z
    n: digits 0-9
    c: letters (any case) and digits

A ``!`` marks a fixed-length segment. Without it the segment holds up to
``count`` characters.

Usage:
    >>> matcher = compile_structure("4!a6!n8!n")
    >>> matcher.match("WEST12345698765432")
    ('WEST', '123456', '98765432')
"""

import re
from dataclasses import dataclass, field

from ibanspec.exceptions import MalformedStructureError
from ibanspec.utils.logging import get_logger

logger = get_logger(__name__)

_TOKEN = re.compile(r"(\d+)(!?)([anc])")

CHARACTER_CLASSES: dict[str, str] = {
    "a": "[A-Z]",
    "n": "[0-9]",
    "c": "[A-Za-z0-9]",
}


@dataclass(frozen=True)
class StructureToken:
    """One ``<count>[!]<class>`` segment of a structure notation."""

    count: int
    fixed: bool
    kind: str

    @property
    def min_length(self) -> int:
        return self.count if self.fixed else 0

    @property
    def regex(self) -> str:
        quantifier = f"{{{self.count}}}" if self.fixed else f"{{0,{self.count}}}"
        return f"({CHARACTER_CLASSES[self.kind]}{quantifier})"

    def __str__(self) -> str:
        return f"{self.count}{'!' if self.fixed else ''}{self.kind}"


@dataclass(frozen=True)
class StructureMatcher:
    """Anchored matcher compiled from a structure notation.

    Attributes:
        structure: Source notation
        tokens: Parsed tokens in notation order
        pattern: Compiled regex with one capturing group per token
    """

    structure: str
    tokens: tuple[StructureToken, ...]
    pattern: re.Pattern[str] = field(repr=False, compare=False)

    @property
    def min_length(self) -> int:
        return sum(token.min_length for token in self.tokens)

    @property
    def max_length(self) -> int:
        return sum(token.count for token in self.tokens)

    def match(self, text: str) -> tuple[str, ...] | None:
        """Split ``text`` into one segment per token.

        Returns:
            The captured segments in notation order, or None when ``text``
            does not match the whole structure.
        """
        m = self.pattern.fullmatch(text)
        if m is None:
            return None
        return m.groups()

    def matches(self, text: str) -> bool:
        return self.pattern.fullmatch(text) is not None


def parse_structure(structure: str) -> tuple[StructureToken, ...]:
    """Tokenize a structure notation left to right.

    Raises:
        MalformedStructureError: if the notation is empty or any part of it is
            not a ``<count>[!]<class>`` token with a positive count
    """
    if not isinstance(structure, str) or not structure:
        raise MalformedStructureError(
            "Structure notation must be a non-empty string", structure=repr(structure)
        )

    tokens: list[StructureToken] = []
    position = 0
    while position < len(structure):
        m = _TOKEN.match(structure, position)
        if m is None:
            raise MalformedStructureError(
                "Unexpected character in structure notation",
                structure=structure,
                position=position,
            )
        count = int(m.group(1))
        if count == 0:
            raise MalformedStructureError(
                "Segment length must be positive", structure=structure, position=position
            )
        tokens.append(StructureToken(count=count, fixed=m.group(2) == "!", kind=m.group(3)))
        position = m.end()

    return tuple(tokens)


def compile_structure(structure: str) -> StructureMatcher:
    """Compile a structure notation into a reusable anchored matcher.

    Pure function: callers cache the result.

    Raises:
        MalformedStructureError: if the notation is malformed
    """
    tokens = parse_structure(structure)
    pattern = re.compile("".join(token.regex for token in tokens))
    logger.debug("structure_compiled", structure=structure, segments=len(tokens))
    return StructureMatcher(structure=structure, tokens=tokens, pattern=pattern)
