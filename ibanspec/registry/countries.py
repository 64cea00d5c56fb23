"""IBAN country registry.

Static table of the IBAN formats published in the SWIFT IBAN Registry,
keyed by ISO 3166-1 alpha-2 country code. Each entry is a ``Specification``
carrying the total IBAN length, the BBAN structure notation and a documented
example IBAN.

Reference: https://www.swift.com/standards/data-standards/iban-international-bank-account-number

Usage:
    >>> spec = CountryRegistry.get("de")
    >>> spec.is_valid("DE89370400440532013000")
    True
    >>> CountryRegistry.detect_country("GB82WEST12345698765432")
    'GB'
"""

from typing import ClassVar

from ibanspec.core.specification import Specification
from ibanspec.exceptions import UnknownCountryError

COUNTRY_NAMES: dict[str, str] = {
    "AD": "Andorra",
    "AE": "United Arab Emirates",
    "AL": "Albania",
    "AT": "Austria",
    "AZ": "Azerbaijan",
    "BA": "Bosnia and Herzegovina",
    "BE": "Belgium",
    "BG": "Bulgaria",
    "BH": "Bahrain",
    "BR": "Brazil",
    "BY": "Belarus",
    "CH": "Switzerland",
    "CR": "Costa Rica",
    "CY": "Cyprus",
    "CZ": "Czech Republic",
    "DE": "Germany",
    "DK": "Denmark",
    "DO": "Dominican Republic",
    "EE": "Estonia",
    "EG": "Egypt",
    "ES": "Spain",
    "FI": "Finland",
    "FO": "Faroe Islands",
    "FR": "France",
    "GB": "United Kingdom",
    "GE": "Georgia",
    "GI": "Gibraltar",
    "GL": "Greenland",
    "GR": "Greece",
    "GT": "Guatemala",
    "HR": "Croatia",
    "HU": "Hungary",
    "IE": "Ireland",
    "IL": "Israel",
    "IQ": "Iraq",
    "IS": "Iceland",
    "IT": "Italy",
    "JO": "Jordan",
    "KW": "Kuwait",
    "KZ": "Kazakhstan",
    "LB": "Lebanon",
    "LC": "Saint Lucia",
    "LI": "Liechtenstein",
    "LT": "Lithuania",
    "LU": "Luxembourg",
    "LV": "Latvia",
    "MC": "Monaco",
    "MD": "Moldova",
    "ME": "Montenegro",
    "MK": "North Macedonia",
    "MR": "Mauritania",
    "MT": "Malta",
    "MU": "Mauritius",
    "NL": "Netherlands",
    "NO": "Norway",
    "PK": "Pakistan",
    "PL": "Poland",
    "PS": "Palestine",
    "PT": "Portugal",
    "QA": "Qatar",
    "RO": "Romania",
    "RS": "Serbia",
    "SA": "Saudi Arabia",
    "SC": "Seychelles",
    "SE": "Sweden",
    "SI": "Slovenia",
    "SK": "Slovakia",
    "SM": "San Marino",
    "ST": "Sao Tome and Principe",
    "SV": "El Salvador",
    "TL": "Timor-Leste",
    "TN": "Tunisia",
    "TR": "Turkey",
    "UA": "Ukraine",
    "VA": "Vatican City",
    "VG": "British Virgin Islands",
    "XK": "Kosovo",
}

# Geographical scope of the SEPA schemes (EU/EEA plus the non-EEA participants)
# fmt: off
SEPA_COUNTRIES: frozenset[str] = frozenset(
    {
        "AD", "AT", "BE", "BG", "CH", "CY", "CZ", "DE", "DK", "EE", "ES", "FI", "FR",
        "GB", "GI", "GR", "HR", "HU", "IE", "IS", "IT", "LI", "LT", "LU", "LV", "MC",
        "MT", "NL", "NO", "PL", "PT", "RO", "SE", "SI", "SK", "SM", "VA",
    }
)
# fmt: on


class CountryRegistry:
    """Registry of country IBAN specifications.

    Lookups are case-insensitive. ``Specification`` instances are shared, so
    each country's structure is compiled at most once per process.
    """

    SPECIFICATIONS: ClassVar[dict[str, Specification]] = {
        "AD": Specification("AD", 24, "4!n4!n12!c", "AD1200012030200359100100"),
        "AE": Specification("AE", 23, "3!n16!n", "AE070331234567890123456"),
        "AL": Specification("AL", 28, "8!n16!c", "AL47212110090000000235698741"),
        "AT": Specification("AT", 20, "5!n11!n", "AT611904300234573201"),
        "AZ": Specification("AZ", 28, "4!a20!c", "AZ21NABZ00000000137010001944"),
        "BA": Specification("BA", 20, "3!n3!n8!n2!n", "BA391290079401028494"),
        "BE": Specification("BE", 16, "3!n7!n2!n", "BE68539007547034"),
        "BG": Specification("BG", 22, "4!a4!n2!n8!c", "BG80BNBG96611020345678"),
        "BH": Specification("BH", 22, "4!a14!c", "BH67BMAG00001299123456"),
        "BR": Specification("BR", 29, "8!n5!n10!n1!a1!c", "BR9700360305000010009795493P1"),
        "BY": Specification("BY", 28, "4!c4!n16!c", "BY13NBRB3600900000002Z00AB00"),
        "CH": Specification("CH", 21, "5!n12!c", "CH9300762011623852957"),
        "CR": Specification("CR", 22, "4!n14!n", "CR05015202001026284066"),
        "CY": Specification("CY", 28, "3!n5!n16!c", "CY17002001280000001200527600"),
        "CZ": Specification("CZ", 24, "4!n6!n10!n", "CZ6508000000192000145399"),
        "DE": Specification("DE", 22, "8!n10!n", "DE89370400440532013000"),
        "DK": Specification("DK", 18, "4!n9!n1!n", "DK5000400440116243"),
        "DO": Specification("DO", 28, "4!c20!n", "DO28BAGR00000001212453611324"),
        "EE": Specification("EE", 20, "2!n2!n11!n1!n", "EE382200221020145685"),
        "EG": Specification("EG", 29, "4!n4!n17!n", "EG380019000500000000263180002"),
        "ES": Specification("ES", 24, "4!n4!n1!n1!n10!n", "ES9121000418450200051332"),
        "FI": Specification("FI", 18, "3!n11!n", "FI2112345600000785"),
        "FO": Specification("FO", 18, "4!n9!n1!n", "FO6264600001631634"),
        "FR": Specification("FR", 27, "5!n5!n11!c2!n", "FR1420041010050500013M02606"),
        "GB": Specification("GB", 22, "4!a6!n8!n", "GB29NWBK60161331926819"),
        "GE": Specification("GE", 22, "2!a16!n", "GE29NB0000000101904917"),
        "GI": Specification("GI", 23, "4!a15!c", "GI75NWBK000000007099453"),
        "GL": Specification("GL", 18, "4!n9!n1!n", "GL8964710001000206"),
        "GR": Specification("GR", 27, "3!n4!n16!c", "GR1601101250000000012300695"),
        "GT": Specification("GT", 28, "4!c20!c", "GT82TRAJ01020000001210029690"),
        "HR": Specification("HR", 21, "7!n10!n", "HR1210010051863000160"),
        "HU": Specification("HU", 28, "3!n4!n1!n15!n1!n", "HU42117730161111101800000000"),
        "IE": Specification("IE", 22, "4!a6!n8!n", "IE29AIBK93115212345678"),
        "IL": Specification("IL", 23, "3!n3!n13!n", "IL620108000000099999999"),
        "IQ": Specification("IQ", 23, "4!a3!n12!n", "IQ98NBIQ850123456789012"),
        "IS": Specification("IS", 26, "4!n2!n6!n10!n", "IS140159260076545510730339"),
        "IT": Specification("IT", 27, "1!a5!n5!n12!c", "IT60X0542811101000000123456"),
        "JO": Specification("JO", 30, "4!a4!n18!c", "JO94CBJO0010000000000131000302"),
        "KW": Specification("KW", 30, "4!a22!c", "KW81CBKU0000000000001234560101"),
        "KZ": Specification("KZ", 20, "3!n13!c", "KZ86125KZT5004100100"),
        "LB": Specification("LB", 28, "4!n20!c", "LB62099900000001001901229114"),
        "LC": Specification("LC", 32, "4!a24!c", "LC55HEMM000100010012001200023015"),
        "LI": Specification("LI", 21, "5!n12!c", "LI21088100002324013AA"),
        "LT": Specification("LT", 20, "5!n11!n", "LT121000011101001000"),
        "LU": Specification("LU", 20, "3!n13!c", "LU280019400644750000"),
        "LV": Specification("LV", 21, "4!a13!c", "LV80BANK0000435195001"),
        "MC": Specification("MC", 27, "5!n5!n11!c2!n", "MC5811222000010123456789030"),
        "MD": Specification("MD", 24, "2!c18!c", "MD24AG000225100013104168"),
        "ME": Specification("ME", 22, "3!n13!n2!n", "ME25505000012345678951"),
        "MK": Specification("MK", 19, "3!n10!c2!n", "MK07250120000058984"),
        "MR": Specification("MR", 27, "5!n5!n11!n2!n", "MR1300020001010000123456753"),
        "MT": Specification("MT", 31, "4!a5!n18!c", "MT84MALT011000012345MTLCAST001S"),
        "MU": Specification("MU", 30, "4!a2!n2!n12!n3!n3!a", "MU17BOMM0101101030300200000MUR"),
        "NL": Specification("NL", 18, "4!a10!n", "NL91ABNA0417164300"),
        "NO": Specification("NO", 15, "4!n6!n1!n", "NO9386011117947"),
        "PK": Specification("PK", 24, "4!a16!c", "PK36SCBL0000001123456702"),
        "PL": Specification("PL", 28, "8!n16!n", "PL61109010140000071219812874"),
        "PS": Specification("PS", 29, "4!a21!c", "PS92PALS000000000400123456702"),
        "PT": Specification("PT", 25, "4!n4!n11!n2!n", "PT50000201231234567890154"),
        "QA": Specification("QA", 29, "4!a21!c", "QA58DOHB00001234567890ABCDEFG"),
        "RO": Specification("RO", 24, "4!a16!c", "RO49AAAA1B31007593840000"),
        "RS": Specification("RS", 22, "3!n13!n2!n", "RS35260005601001611379"),
        "SA": Specification("SA", 24, "2!n18!c", "SA0380000000608010167519"),
        "SC": Specification("SC", 31, "4!a2!n2!n16!n3!a", "SC18SSCB11010000000000001497USD"),
        "SE": Specification("SE", 24, "3!n16!n1!n", "SE4550000000058398257466"),
        "SI": Specification("SI", 19, "5!n8!n2!n", "SI56263300012039086"),
        "SK": Specification("SK", 24, "4!n6!n10!n", "SK3112000000198742637541"),
        "SM": Specification("SM", 27, "1!a5!n5!n12!c", "SM86U0322509800000000270100"),
        "ST": Specification("ST", 25, "8!n11!n2!n", "ST68000100010051845310112"),
        "SV": Specification("SV", 28, "4!a20!n", "SV62CENR00000000000000700025"),
        "TL": Specification("TL", 23, "3!n14!n2!n", "TL380080012345678910157"),
        "TN": Specification("TN", 24, "2!n3!n13!n2!n", "TN5910006035183598478831"),
        "TR": Specification("TR", 26, "5!n1!n16!c", "TR330006100519786457841326"),
        "UA": Specification("UA", 29, "6!n19!c", "UA213223130000026007233566001"),
        "VA": Specification("VA", 22, "3!n15!n", "VA59001123000012345678"),
        "VG": Specification("VG", 24, "4!a16!n", "VG96VPVG0000012345678901"),
        "XK": Specification("XK", 20, "4!n10!n2!n", "XK051212012345678906"),
    }

    @classmethod
    def get(cls, country_code: str) -> Specification | None:
        """Get the specification for a country code, or None if unknown."""
        if not isinstance(country_code, str):
            return None
        return cls.SPECIFICATIONS.get(country_code.upper())

    @classmethod
    def require(cls, country_code: str) -> Specification:
        """Get the specification for a country code.

        Raises:
            UnknownCountryError: if no specification is registered
        """
        spec = cls.get(country_code)
        if spec is None:
            raise UnknownCountryError(
                f"No country with code {country_code}", country_code=str(country_code)
            )
        return spec

    @classmethod
    def detect_country(cls, iban: str) -> str | None:
        """Detect the registered country code of an IBAN.

        Example:
            >>> CountryRegistry.detect_country("IT60X0542811101000000123456")
            'IT'
            >>> CountryRegistry.detect_country("XX1234567890") is None
            True
        """
        if not isinstance(iban, str) or len(iban) < 2:
            return None

        country_code = iban[:2].upper()
        return country_code if country_code in cls.SPECIFICATIONS else None

    @classmethod
    def get_country_name(cls, country_code: str) -> str | None:
        spec = cls.get(country_code)
        if spec is None:
            return None
        return COUNTRY_NAMES.get(spec.country_code)

    @classmethod
    def is_sepa(cls, country_code: str) -> bool:
        return isinstance(country_code, str) and country_code.upper() in SEPA_COUNTRIES

    @classmethod
    def list_supported_countries(cls) -> list[str]:
        """Sorted list of all registered country codes."""
        return sorted(cls.SPECIFICATIONS.keys())

    @classmethod
    def get_example_iban(cls, country_code: str) -> str | None:
        spec = cls.get(country_code)
        return spec.example if spec else None
