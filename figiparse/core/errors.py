"""Parse error values — no validator or grammar combinator raises.

Every error is a frozen dataclass value that can be pattern-matched,
serialized and compared. ParseError is the root; IdentifierError covers the
FIGI-level failures and GrammarError the symbology-level ones. Each concrete
error carries a stable class-level ``code``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, final


@dataclass(frozen=True, slots=True)
class ParseError:
    """Base error value. NOT @final — has subclasses."""

    message: str

    code: ClassVar[str] = "PARSE_ERROR"

    def with_context(self, context: str) -> ParseError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {"code": self.code, "message": self.message}


# ---------------------------------------------------------------------------
# Identifier-level errors
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class IdentifierError(ParseError):
    """A string failed to become a FIGI. Closed over the four subclasses below."""

    code: ClassVar[str] = "IDENTIFIER_INVALID"


@final
@dataclass(frozen=True, slots=True)
class InvalidLength(IdentifierError):
    """Input is not exactly ``expected`` characters long."""

    expected: int
    actual: int

    code: ClassVar[str] = "INVALID_LENGTH"

    def to_dict(self) -> dict[str, object]:
        return {
            **ParseError.to_dict(self),
            "expected": self.expected,
            "actual": self.actual,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidFormat(IdentifierError):
    """A character outside the permitted alphabet, or a non-digit check digit."""

    position: int
    found: str

    code: ClassVar[str] = "INVALID_FORMAT"

    def to_dict(self) -> dict[str, object]:
        return {**ParseError.to_dict(self), "position": self.position, "found": self.found}


@final
@dataclass(frozen=True, slots=True)
class InvalidComponent(IdentifierError):
    """A positional component (prefix pair or fixed ``G``) is wrong."""

    component: str  # "prefix" | "fixed"
    position: int
    found: str

    code: ClassVar[str] = "INVALID_COMPONENT"

    def to_dict(self) -> dict[str, object]:
        return {
            **ParseError.to_dict(self),
            "component": self.component,
            "position": self.position,
            "found": self.found,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidChecksum(IdentifierError):
    """The check digit does not match the one computed from the body."""

    expected: str
    found: str

    code: ClassVar[str] = "INVALID_CHECKSUM"

    def to_dict(self) -> dict[str, object]:
        return {**ParseError.to_dict(self), "expected": self.expected, "found": self.found}


# ---------------------------------------------------------------------------
# Grammar-level errors
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GrammarError(ParseError):
    """A symbology string failed to parse. ``position`` is a character offset."""

    position: int

    code: ClassVar[str] = "GRAMMAR_ERROR"

    def to_dict(self) -> dict[str, object]:
        return {**ParseError.to_dict(self), "position": self.position}


@final
@dataclass(frozen=True, slots=True)
class UnexpectedToken(GrammarError):
    expected: str
    found: str

    code: ClassVar[str] = "UNEXPECTED_TOKEN"

    def to_dict(self) -> dict[str, object]:
        return {**GrammarError.to_dict(self), "expected": self.expected, "found": self.found}


@final
@dataclass(frozen=True, slots=True)
class UnknownScheme(GrammarError):
    found: str

    code: ClassVar[str] = "UNKNOWN_SCHEME"

    def to_dict(self) -> dict[str, object]:
        return {**GrammarError.to_dict(self), "found": self.found}


@final
@dataclass(frozen=True, slots=True)
class UnknownProvider(GrammarError):
    found: str

    code: ClassVar[str] = "UNKNOWN_PROVIDER"

    def to_dict(self) -> dict[str, object]:
        return {**GrammarError.to_dict(self), "found": self.found}


@final
@dataclass(frozen=True, slots=True)
class UnknownIdentifierType(GrammarError):
    found: str

    code: ClassVar[str] = "UNKNOWN_IDENTIFIER_TYPE"

    def to_dict(self) -> dict[str, object]:
        return {**GrammarError.to_dict(self), "found": self.found}


@final
@dataclass(frozen=True, slots=True)
class CommittedSubParseFailed(GrammarError):
    """The identifier-type tag matched but its value sub-parser failed.

    Terminal: no sibling identifier type is tried after this.
    """

    type_label: str
    cause: ParseError

    code: ClassVar[str] = "COMMITTED_SUBPARSE_FAILED"

    def to_dict(self) -> dict[str, object]:
        return {
            **GrammarError.to_dict(self),
            "type_label": self.type_label,
            "cause": self.cause.to_dict(),
        }
