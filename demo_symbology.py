"""
demo_symbology.py -- A walkthrough of FIGI validation and symbology parsing.

A FIGI (Financial Instrument Global Identifier) is a 12-character code such
as BBG000B9XVV8. Vendor symbology strings embed it in a larger address:

    //blp/mktdata/bbgid/BBG007Z1JW11@BVAL Govt
      |   |       |     |            |    |
      |   |       |     |            |    yellow key (market sector)
      |   |       |     |            pricing source
      |   |       |     the identifier value
      |   |       identifier type (decides which value parser runs)
      |   provider
      scheme

We will:
  1. Validate a handful of identifiers and look at why the bad ones fail
  2. Decode symbology strings into SecurityLocator values
  3. See commit-on-match: a bad FIGI under "bbgid" is never retried as an ISIN
  4. Register a parser for another identifier type

Run this:  .venv/bin/python demo_symbology.py
"""

from __future__ import annotations

from figiparse.core.errors import CommittedSubParseFailed
from figiparse.core.identifiers import FIGI, figi_check_digit
from figiparse.core.result import Err, Ok
from figiparse.symbology.grammar import validated_token
from figiparse.symbology.parser import (
    default_registry,
    format_locator,
    locator_to_dict,
    parse_symbology,
)
from figiparse.symbology.types import IdentifierType


def sep(title: str) -> None:
    """Print a section separator."""
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}\n")


# ============================================================================
#  STEP 1: VALIDATE IDENTIFIERS
# ============================================================================
#
# FIGI.parse runs the structural checks in a fixed order (length, alphabet,
# prefix pair, fixed G, numeric check slot) and then the check digit. The
# first failure wins, so the same bad input always reports the same error.

sep("STEP 1: Validate identifiers")

for raw in ["BBG000B9XVV8", "KKG000003B64", "BBG000B9XVV9", "US0378331005", "BSG000B9XVV8"]:
    match FIGI.parse(raw):
        case Ok(figi):
            print(f"  {raw}  valid      -> {figi}")
        case Err(e):
            print(f"  {raw}  {e.code:18s} {e.message}")

# The check digit is a pure function of the first 11 characters.
print(f"\n  check digit of BBG000B9XVV = {figi_check_digit('BBG000B9XVV')}")


# ============================================================================
#  STEP 2: DECODE SYMBOLOGY STRINGS
# ============================================================================

sep("STEP 2: Decode symbology strings")

for raw in [
    "//blp/mktdata/bbgid/BBG007Z1JW11@BVAL",
    "//blp/refdata/bbgid/BBG000BLNNH6@BGN Equity",
    "/bbgid/KKG000003B64 Curncy",
]:
    match parse_symbology(raw):
        case Ok(locator):
            print(f"  {raw}")
            print(f"    -> {locator_to_dict(locator)}")
            print(f"    canonical: {format_locator(locator)}")
        case Err(e):
            print(f"  {raw}: {e.message}")


# ============================================================================
#  STEP 3: COMMIT-ON-MATCH
# ============================================================================
#
# US0378331005 is Apple's ISIN. Under "bbgid" it must fail as a FIGI: once
# the identifier-type token matched, no other type is tried.

sep("STEP 3: Commit-on-match")

match parse_symbology("//blp/mktdata/bbgid/US0378331005"):
    case Err(CommittedSubParseFailed() as e):
        print(f"  committed to {e.type_label} at position {e.position}")
        print(f"  cause: {e.cause.code} -- {e.cause.message}")
    case other:
        raise RuntimeError(f"expected a committed failure, got {other}")


# ============================================================================
#  STEP 4: EXTEND WITH ANOTHER IDENTIFIER TYPE
# ============================================================================

sep("STEP 4: Register an isin parser")

registry = default_registry()
registry.register(
    IdentifierType.ISIN,
    "ISIN",
    validated_token(lambda raw: Ok(raw), "ISIN"),
)
match parse_symbology("//blp/refdata/isin/US0378331005", registry):
    case Ok(locator):
        print(f"  {format_locator(locator)}  (value type: {type(locator.value).__name__})")
    case Err(e):
        raise RuntimeError(e.message)
