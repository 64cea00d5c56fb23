"""Country specification registry."""

__all__ = ["COUNTRY_NAMES", "SEPA_COUNTRIES", "CountryRegistry"]

from .countries import COUNTRY_NAMES, SEPA_COUNTRIES, CountryRegistry
