"""Validated identifier newtype: FIGI.

A FIGI is 12 characters: a two-consonant prefix, a fixed ``G``, eight
body characters and a check digit. Structure is checked first, in a fixed
order (length, charset, prefix, fixed G, check-digit slot), then the check
digit is verified with the FIGI variant of modified Luhn.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import final

from figiparse.core.errors import (
    IdentifierError,
    InvalidChecksum,
    InvalidComponent,
    InvalidFormat,
    InvalidLength,
)
from figiparse.core.result import Err, Ok, sequence

FIGI_LENGTH = 12
FIGI_ALPHABET = frozenset("0123456789BCDFGHJKLMNPQRSTVWXYZ")
PROHIBITED_PREFIXES = frozenset({"BS", "BM", "GG", "GB", "GH", "KY", "VG"})


def check_structure(raw: str) -> Ok[str] | Err[IdentifierError]:
    """Positional grammar check. Does not look at the check digit's value."""
    if len(raw) != FIGI_LENGTH:
        return Err(InvalidLength(
            message=f"FIGI must be {FIGI_LENGTH} characters, got {len(raw)}",
            expected=FIGI_LENGTH, actual=len(raw),
        ))
    for i, c in enumerate(raw):
        if c not in FIGI_ALPHABET:
            return Err(InvalidFormat(
                message=f"FIGI character {c!r} at position {i} is not in the permitted alphabet",
                position=i, found=c,
            ))
    prefix = raw[:2]
    if not prefix.isalpha() or prefix in PROHIBITED_PREFIXES:
        return Err(InvalidComponent(
            message=f"FIGI prefix '{prefix}' is not a permitted consonant pair",
            component="prefix", position=0, found=prefix,
        ))
    if raw[2] != "G":
        return Err(InvalidComponent(
            message=f"FIGI third character must be 'G', got '{raw[2]}'",
            component="fixed", position=2, found=raw[2],
        ))
    if not raw[11].isdigit():
        return Err(InvalidFormat(
            message=f"FIGI check digit must be numeric, got '{raw[11]}'",
            position=11, found=raw[11],
        ))
    return Ok(raw)


def _char_value(c: str) -> int:
    if c.isdigit():
        return int(c)
    return ord(c) - ord("A") + 10  # B=11, ..., Z=35


def figi_check_digit(body: str) -> str:
    """Check digit for the first 11 characters of a FIGI.

    Every second character (odd 0-based index) has its value doubled, the
    decimal digits of all values are summed, and the check digit brings the
    total up to a multiple of ten.
    """
    total = 0
    for i, c in enumerate(body):
        v = _char_value(c)
        if i % 2 == 1:
            v *= 2
        total += sum(int(d) for d in str(v))
    return str((10 - total % 10) % 10)


def check_checksum(raw: str) -> Ok[str] | Err[IdentifierError]:
    """Compare the check digit against the computed one. Assumes check_structure passed."""
    expected = figi_check_digit(raw[:11])
    if raw[11] != expected:
        return Err(InvalidChecksum(
            message=f"FIGI check digit invalid for '{raw}': expected {expected}, got {raw[11]}",
            expected=expected, found=raw[11],
        ))
    return Ok(raw)


@final
@dataclass(frozen=True, slots=True)
class FIGI:
    """Financial Instrument Global Identifier — 12 chars with check digit."""

    value: str

    def __post_init__(self) -> None:
        match FIGI._validate(self.value):
            case Err(e):
                raise TypeError(f"FIGI requires a valid identifier: {e.message}")
            case Ok(_):
                pass

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def _validate(raw: str) -> Ok[str] | Err[IdentifierError]:
        if not isinstance(raw, str):
            return Err(InvalidFormat(
                message=f"FIGI requires str, got {type(raw).__name__}",
                position=0, found=repr(raw),
            ))
        return check_structure(raw).and_then(check_checksum)

    @staticmethod
    def _trusted(value: str) -> FIGI:
        # value already passed _validate; skip the second pass in __post_init__
        figi = object.__new__(FIGI)
        object.__setattr__(figi, "value", value)
        return figi

    @staticmethod
    def parse(raw: str) -> Ok[FIGI] | Err[IdentifierError]:
        return FIGI._validate(raw).map(FIGI._trusted)


def validate_figi(raw: str) -> Ok[FIGI] | Err[IdentifierError]:
    """Validate-identifier entry point."""
    return FIGI.parse(raw)


def validate_batch(raws: Iterable[str]) -> tuple[Ok[FIGI] | Err[IdentifierError], ...]:
    """Validate every input independently; one result per input, in order."""
    return tuple(FIGI.parse(raw) for raw in raws)


def validate_all(raws: Iterable[str]) -> Ok[list[FIGI]] | Err[IdentifierError]:
    """All-or-nothing: every input as a FIGI, or the first failure."""
    return sequence(FIGI.parse(raw) for raw in raws)
