"""Hypothesis strategies and pytest fixtures for figiparse.

Strategies build valid FIGIs by computing the check digit, so every
generated value goes through the same constructor as production input.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from figiparse.core.identifiers import (
    FIGI_ALPHABET,
    PROHIBITED_PREFIXES,
    FIGI,
    figi_check_digit,
)
from figiparse.core.result import unwrap
from figiparse.symbology.types import (
    IdentifierType,
    Provider,
    Scheme,
    SecurityLocator,
    Service,
    YellowKey,
)

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
FIGI_CHARS = "0123456789" + CONSONANTS


def figi_prefixes() -> SearchStrategy[str]:
    """Two-consonant prefixes outside the prohibited set."""
    return st.text(alphabet=CONSONANTS, min_size=2, max_size=2).filter(
        lambda p: p not in PROHIBITED_PREFIXES,
    )


def figi_body_chars(size: int = 8) -> SearchStrategy[str]:
    return st.text(alphabet=FIGI_CHARS, min_size=size, max_size=size)


def non_figi_chars() -> SearchStrategy[str]:
    """Single characters outside the FIGI alphabet."""
    return st.characters().filter(lambda c: c not in FIGI_ALPHABET)


def pricing_sources() -> SearchStrategy[str]:
    return st.sampled_from(["BVAL", "BGN", "CBBT", "TRAC", "US", "LN"])


# ===================================================================
# IDENTIFIER STRATEGIES
# ===================================================================


@st.composite
def figi_strings(draw: st.DrawFn, prefix: SearchStrategy[str] | None = None) -> str:
    """Structurally and check-digit valid 12-character strings."""
    first_two = draw(prefix if prefix is not None else figi_prefixes())
    body = first_two + "G" + draw(figi_body_chars())
    return body + figi_check_digit(body)


@st.composite
def figis(draw: st.DrawFn) -> FIGI:
    return unwrap(FIGI.parse(draw(figi_strings())))


# ===================================================================
# SYMBOLOGY STRATEGIES
# ===================================================================


@st.composite
def services(draw: st.DrawFn) -> Service:
    return Service(
        scheme=draw(st.sampled_from(list(Scheme))),
        provider=draw(st.sampled_from(list(Provider))),
    )


@st.composite
def locators(draw: st.DrawFn) -> SecurityLocator:
    """bbgid locators with every optional part independently present or absent."""
    return SecurityLocator(
        service=draw(st.none() | services()),
        id_type=IdentifierType.BBGID,
        value=draw(figis()),
        pricing_source=draw(st.none() | pricing_sources()),
        yellow_key=draw(st.none() | st.sampled_from(list(YellowKey))),
    )
