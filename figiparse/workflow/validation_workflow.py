"""Durable workflow for batch identifier and symbology validation.

Steps: receive -> validate identifiers -> parse symbols -> report.
This is the guard placed in front of resolution services: only outcomes
marked valid should be forwarded as lookup keys.

Determinism contract: this module contains NO I/O, NO system clock access,
NO mutable globals. All parsing is delegated to activities.
"""

from __future__ import annotations

from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy

with workflow.unsafe.imports_passed_through():
    from figiparse.infra.config import DEFAULT_ACTIVITY_CONFIG
    from figiparse.workflow.activities import parse_symbologies, validate_identifiers
    from figiparse.workflow.types import (
        BatchReport,
        IdentifierBatch,
        SymbologyBatch,
        ValidationReport,
        ValidationRequest,
    )

VALIDATION_RETRY = RetryPolicy(maximum_attempts=DEFAULT_ACTIVITY_CONFIG.maximum_attempts)
VALIDATION_TIMEOUT = timedelta(seconds=DEFAULT_ACTIVITY_CONFIG.start_to_close_timeout_s)


@workflow.defn(name="SymbologyValidation")
class SymbologyValidationWorkflow:
    """Validate a batch of FIGIs and symbology strings.

    Every request reaches COMPLETED with one outcome per input; empty
    batches skip their activity.
    """

    def __init__(self) -> None:
        self._status: str = "RECEIVED"

    @workflow.query
    def get_status(self) -> str:
        """Current workflow phase."""
        return self._status

    @workflow.run
    async def run(self, request: ValidationRequest) -> ValidationReport:
        self._status = "VALIDATING_IDENTIFIERS"
        identifiers = BatchReport(request_id=request.request_id, outcomes=())
        if request.identifiers:
            identifiers = await workflow.execute_activity(
                validate_identifiers,
                IdentifierBatch(
                    request_id=request.request_id, identifiers=request.identifiers,
                ),
                start_to_close_timeout=VALIDATION_TIMEOUT,
                retry_policy=VALIDATION_RETRY,
            )

        self._status = "PARSING_SYMBOLS"
        symbols = BatchReport(request_id=request.request_id, outcomes=())
        if request.symbols:
            symbols = await workflow.execute_activity(
                parse_symbologies,
                SymbologyBatch(request_id=request.request_id, symbols=request.symbols),
                start_to_close_timeout=VALIDATION_TIMEOUT,
                retry_policy=VALIDATION_RETRY,
            )

        self._status = "COMPLETED"
        return ValidationReport(
            request_id=request.request_id, identifiers=identifiers, symbols=symbols,
        )
