"""Activity implementations for batch validation.

Activities are thin wrappers. All parsing lives in the pure library layer
(figiparse.core, figiparse.symbology); this module only maps results to
payload-friendly outcomes and logs.

Each activity:
- Is decorated with @activity.defn
- Takes a single frozen-dataclass input
- Returns a frozen-dataclass output
- Is idempotent (same input -> same output)
"""

from __future__ import annotations

from temporalio import activity

from figiparse.core.errors import ParseError
from figiparse.core.identifiers import FIGI, validate_batch
from figiparse.core.result import Err, Ok
from figiparse.symbology.parser import format_locator, parse_symbology
from figiparse.symbology.types import SecurityLocator
from figiparse.workflow.types import (
    BatchReport,
    IdentifierBatch,
    SymbologyBatch,
    ValidationOutcome,
)


def figi_outcome(raw: str, result: Ok[FIGI] | Err[ParseError]) -> ValidationOutcome:
    match result:
        case Ok(figi):
            return ValidationOutcome(raw=raw, valid=True, canonical=figi.value)
        case Err(e):
            return ValidationOutcome(raw=raw, valid=False, error=e.to_dict())


def locator_outcome(
    raw: str, result: Ok[SecurityLocator] | Err[ParseError],
) -> ValidationOutcome:
    match result:
        case Ok(locator):
            return ValidationOutcome(raw=raw, valid=True, canonical=format_locator(locator))
        case Err(e):
            return ValidationOutcome(raw=raw, valid=False, error=e.to_dict())


def _log_report(kind: str, report: BatchReport) -> None:
    activity.logger.info(
        "Validated %d %s for request %s: %d valid, %d rejected",
        len(report.outcomes), kind, report.request_id,
        report.valid_count, len(report.rejected),
    )
    for outcome in report.rejected:
        assert outcome.error is not None
        activity.logger.warning(
            "Rejected %r (%s): %s",
            outcome.raw, outcome.error["code"], outcome.error["message"],
        )


# ---------------------------------------------------------------------------
# 1. validate_identifiers
# ---------------------------------------------------------------------------


@activity.defn(name="validate_identifiers")
async def validate_identifiers(batch: IdentifierBatch) -> BatchReport:
    """Validate each raw string as a FIGI.

    Idempotent: yes (pure function of input)
    """
    results = validate_batch(batch.identifiers)
    report = BatchReport(
        request_id=batch.request_id,
        outcomes=tuple(
            figi_outcome(raw, result)
            for raw, result in zip(batch.identifiers, results, strict=True)
        ),
    )
    _log_report("identifiers", report)
    return report


# ---------------------------------------------------------------------------
# 2. parse_symbologies
# ---------------------------------------------------------------------------


@activity.defn(name="parse_symbologies")
async def parse_symbologies(batch: SymbologyBatch) -> BatchReport:
    """Decode each raw symbology string; canonical is the re-rendered locator.

    Idempotent: yes (pure function of input)
    """
    report = BatchReport(
        request_id=batch.request_id,
        outcomes=tuple(locator_outcome(raw, parse_symbology(raw)) for raw in batch.symbols),
    )
    _log_report("symbols", report)
    return report
