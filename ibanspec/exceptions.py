"""Exception hierarchy for ibanspec.

All exceptions carry a human-readable message plus a structured ``context``
dict, so callers can log them with structlog without string parsing.

Usage:
    from ibanspec.exceptions import InvalidBBANError

    try:
        iban = spec.from_bban(bban)
    except InvalidBBANError as e:
        logger.warning("bban_rejected", error=str(e), context=e.context)
"""

from __future__ import annotations

from typing import Any


def _with_context(kwargs: dict[str, Any], **fields: Any) -> dict[str, Any]:
    """Merge the non-empty ``fields`` into ``kwargs["context"]``, keeping their order."""
    context = kwargs.get("context") or {}
    context.update({key: value for key, value in fields.items() if value not in (None, "")})
    kwargs["context"] = context
    return kwargs


class IbanSpecError(Exception):
    """Base exception for all ibanspec errors.

    ``str(error)`` renders the message followed by its context, e.g.
    ``Invalid BBAN (country_code=GB, field=bban, value=WEST)``.

    Attributes:
        message: What went wrong, without the offending data
        context: Country code, field, offending value and similar details
        original_error: Underlying exception (e.g. a pydantic error for bad settings)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        text = self.message
        if self.context:
            details = ", ".join(f"{key}={value}" for key, value in self.context.items())
            text = f"{text} ({details})"
        if self.original_error is not None:
            text = f"{text} [caused by: {type(self.original_error).__name__}]"
        return text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# Structure notation errors
# =============================================================================


class StructureError(IbanSpecError):
    """Base class for errors in country structure notation."""


class MalformedStructureError(StructureError):
    """Raised when a structure notation violates the ``<count>[!]<class>`` grammar.

    This is a data-integrity error: a correctly authored registry never
    triggers it.
    """

    def __init__(
        self,
        message: str,
        *,
        structure: str | None = None,
        position: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **_with_context(kwargs, structure=structure, position=position))


# =============================================================================
# Validation & input errors
# =============================================================================


class ValidationError(IbanSpecError):
    """Raised when an IBAN, BBAN or country code is rejected.

    ``field`` names the argument (``iban``, ``bban``, ``country_code``),
    ``value`` is the offending input cut to 100 characters and ``constraint``
    is the structure notation it was checked against, e.g. ``4!a6!n8!n``.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
        **kwargs: Any,
    ) -> None:
        if value is not None:
            value = str(value)[:100]
        super().__init__(
            message, **_with_context(kwargs, field=field, value=value, constraint=constraint)
        )


class InvalidCharacterError(ValidationError):
    """Raised when checksum input contains a character outside ``[A-Za-z0-9]``."""

    def __init__(
        self,
        message: str,
        *,
        character: str | None = None,
        position: int | None = None,
        **kwargs: Any,
    ) -> None:
        if character is not None:
            character = repr(character)
        super().__init__(message, **_with_context(kwargs, character=character, position=position))


class InvalidBBANError(ValidationError):
    """Raised by ``from_bban`` when the BBAN does not match the country format."""

    def __init__(self, message: str, *, country_code: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **_with_context(kwargs, country_code=country_code))


class InvalidIBANError(ValidationError):
    """Raised when an IBAN cannot be decomposed into BBAN segments."""


class UnknownCountryError(ValidationError):
    """Raised when no specification is registered for a country code."""

    def __init__(self, message: str, *, country_code: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **_with_context(kwargs, country_code=country_code))


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigurationError(IbanSpecError):
    """Raised when IBANSPEC_* settings cannot be loaded.

    ``setting`` names the offending variable when known and ``expected``
    describes the accepted values.
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **_with_context(kwargs, setting=setting, expected=expected))


__all__ = [
    "IbanSpecError",
    "StructureError",
    "MalformedStructureError",
    "ValidationError",
    "InvalidCharacterError",
    "InvalidBBANError",
    "InvalidIBANError",
    "UnknownCountryError",
    "ConfigurationError",
]
