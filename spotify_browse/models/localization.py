"""
Country and locale value types accepted by the browse endpoints.
Both validate on construction so request code can stringify them blindly.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# ISO 3166-1 alpha-2
ISO_3166_ALPHA2 = """
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI BJ BL
BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV
CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK FM FO FR GA GB GD
GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT HU ID IE IL IM
IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW KY KZ LA LB LC LI LK
LR LS LT LU LV LY MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW
MX MY MZ NA NC NE NF NG NI NL NO NP NR NU NZ OM PA PE PF PG PH PK PL PM PN PR
PS PT PW PY QA RE RO RS RU RW SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS
ST SV SX SY SZ TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ UA UG UM US UY
UZ VA VC VE VG VI VN VU WF WS YE YT ZA ZM ZW
""".split()

Country = Enum(
    "Country",
    [(code, code) for code in ISO_3166_ALPHA2],
    type=str,
    module=__name__,
)
Country.__doc__ = "ISO 3166-1 alpha-2 country code, e.g. ``Country.US``."

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}$")
_REGION_RE = re.compile(r"^[A-Z]{2}$")


def parse_country(value: Union["Country", str]) -> "Country":
    """
    Resolve a country code, case-insensitively.

    Raises:
        ValueError: If the value is not an ISO 3166-1 alpha-2 code
    """
    if isinstance(value, Country):
        return value
    try:
        return Country(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Invalid ISO 3166-1 alpha-2 country code: {value!r}") from None


@dataclass(frozen=True)
class Locale:
    """A language with an optional country, rendered as ``es_MX``."""
    language: str                   # ISO 639-1 (or 639-2) lowercase code
    country: Optional[str] = None   # ISO 3166-1 alpha-2 uppercase code

    def __post_init__(self):
        if not _LANGUAGE_RE.match(self.language or ""):
            raise ValueError(f"Invalid locale language: {self.language!r}")
        if self.country is not None:
            if not _REGION_RE.match(self.country) or self.country not in Country.__members__:
                raise ValueError(f"Invalid locale country: {self.country!r}")

    def __str__(self) -> str:
        if self.country:
            return f"{self.language}_{self.country}"
        return self.language

    @classmethod
    def parse(cls, value: Union["Locale", str]) -> "Locale":
        """Parse ``es_MX``, ``es-MX`` or ``es`` into a Locale."""
        if isinstance(value, Locale):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Invalid locale: {value!r}")

        parts = value.strip().replace("-", "_").split("_")
        if len(parts) > 2:
            raise ValueError(f"Invalid locale: {value!r}")

        language = parts[0].lower()
        country = parts[1].upper() if len(parts) == 2 else None
        return cls(language=language, country=country)
