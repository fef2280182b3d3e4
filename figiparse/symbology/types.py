"""Symbology types — closed token sets, Service and SecurityLocator.

Scheme, Provider, IdentifierType and YellowKey are exhaustive enums; the
grammar only ever produces members of these sets. Token matching is
case-insensitive, rendering uses the canonical spelling stored as the
enum value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import final

from figiparse.core.identifiers import FIGI

# ---------------------------------------------------------------------------
# Closed token sets
# ---------------------------------------------------------------------------


class Scheme(Enum):
    """Addressing scheme of a service prefix."""

    BLP = "blp"


class Provider(Enum):
    """Service provider under a scheme."""

    REF_DATA = "refdata"
    MKT_DATA = "mktdata"
    MKT_BAR = "mktbar"


class IdentifierType(Enum):
    """Identifier-type discriminator.

    Only BBGID has a built-in value parser; the rest are extension points
    that a SubParserRegistry may bind.
    """

    BBGID = "bbgid"
    ISIN = "isin"
    CUSIP = "cusip"
    SEDOL = "sedol"
    TICKER = "ticker"


class YellowKey(Enum):
    """Market-sector suffix."""

    GOVT = "Govt"
    CORP = "Corp"
    MTGE = "Mtge"
    M_MKT = "M-Mkt"
    MUNI = "Muni"
    PFD = "Pfd"
    EQUITY = "Equity"
    COMDTY = "Comdty"
    INDEX = "Index"
    CURNCY = "Curncy"


PRICING_SOURCE_MAX_LENGTH = 8


# ---------------------------------------------------------------------------
# Composite values
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Service:
    """``//<scheme>/<provider>`` namespace."""

    scheme: Scheme
    provider: Provider

    def __str__(self) -> str:
        return f"//{self.scheme.value}/{self.provider.value}"


@final
@dataclass(frozen=True, slots=True)
class SecurityLocator:
    """A decoded symbology string.

    ``value`` is whatever the identifier type's sub-parser produced; a FIGI
    can only appear under IdentifierType.BBGID and BBGID only ever carries
    a FIGI.
    """

    service: Service | None
    id_type: IdentifierType
    value: object
    pricing_source: str | None = None
    yellow_key: YellowKey | None = None

    def __post_init__(self) -> None:
        if not value_agrees(self.id_type, self.value):
            raise TypeError(
                f"SecurityLocator: {type(self.value).__name__} value "
                f"does not agree with identifier type '{self.id_type.value}'"
            )
        if self.pricing_source is not None and not is_pricing_source(self.pricing_source):
            raise TypeError(
                f"SecurityLocator: invalid pricing source {self.pricing_source!r}"
            )


def value_agrees(id_type: IdentifierType, value: object) -> bool:
    """A FIGI value if and only if the identifier type is bbgid."""
    return isinstance(value, FIGI) == (id_type is IdentifierType.BBGID)


def is_pricing_source(raw: str) -> bool:
    return (
        0 < len(raw) <= PRICING_SOURCE_MAX_LENGTH
        and raw.isascii()
        and raw.isalnum()
    )
