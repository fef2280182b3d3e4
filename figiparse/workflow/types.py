"""Workflow data types for batch identifier validation.

All types: @final @dataclass(frozen=True, slots=True), built only from
str / bool / tuple / dict so the default Temporal payload converter can
round-trip them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, final

from figiparse.core.result import Err, Ok
from figiparse.infra.config import DEFAULT_ACTIVITY_CONFIG, ActivityConfig

# ---------------------------------------------------------------------------
# Activity inputs
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class IdentifierBatch:
    """Raw strings to validate as FIGIs."""

    request_id: str
    identifiers: tuple[str, ...]


@final
@dataclass(frozen=True, slots=True)
class SymbologyBatch:
    """Raw symbology strings to decode."""

    request_id: str
    symbols: tuple[str, ...]


# ---------------------------------------------------------------------------
# Activity outputs
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result for one input string.

    ``canonical`` is the rendered value when valid; ``error`` is the
    ParseError.to_dict() payload when not.
    """

    raw: str
    valid: bool
    canonical: str | None = None
    error: dict[str, Any] | None = None


@final
@dataclass(frozen=True, slots=True)
class BatchReport:
    request_id: str
    outcomes: tuple[ValidationOutcome, ...]

    @property
    def valid_count(self) -> int:
        return sum(1 for o in self.outcomes if o.valid)

    @property
    def rejected(self) -> tuple[ValidationOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.valid)


# ---------------------------------------------------------------------------
# Workflow input / output
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class ValidationRequest:
    """Workflow entry point. request_id doubles as the Temporal workflow ID."""

    request_id: str
    identifiers: tuple[str, ...] = ()
    symbols: tuple[str, ...] = ()

    @staticmethod
    def create(
        request_id: str,
        identifiers: tuple[str, ...] = (),
        symbols: tuple[str, ...] = (),
        config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
    ) -> Ok[ValidationRequest] | Err[str]:
        if not request_id:
            return Err("ValidationRequest requires a non-empty request_id")
        if not identifiers and not symbols:
            return Err("ValidationRequest requires at least one identifier or symbol")
        for name, batch in (("identifiers", identifiers), ("symbols", symbols)):
            if len(batch) > config.max_batch_size:
                return Err(
                    f"ValidationRequest {name} batch of {len(batch)} exceeds "
                    f"max_batch_size {config.max_batch_size}"
                )
        return Ok(ValidationRequest(
            request_id=request_id,
            identifiers=tuple(identifiers),
            symbols=tuple(symbols),
        ))


@final
@dataclass(frozen=True, slots=True)
class ValidationReport:
    request_id: str
    identifiers: BatchReport
    symbols: BatchReport

    @property
    def all_valid(self) -> bool:
        return not self.identifiers.rejected and not self.symbols.rejected
