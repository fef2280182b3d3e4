"""Worker for the batch validation workflow.

Usage::

    import asyncio
    from figiparse.workflow.worker import run_worker

    asyncio.run(run_worker())
"""

from __future__ import annotations

from temporalio.client import Client
from temporalio.worker import Worker

from figiparse.infra.config import WorkerConfig
from figiparse.workflow.activities import parse_symbologies, validate_identifiers
from figiparse.workflow.validation_workflow import SymbologyValidationWorkflow


def build_worker(client: Client, config: WorkerConfig) -> Worker:
    return Worker(
        client,
        task_queue=config.task_queue,
        workflows=[SymbologyValidationWorkflow],
        activities=[validate_identifiers, parse_symbologies],
    )


async def run_worker(config: WorkerConfig | None = None) -> None:
    """Connect to Temporal and run the worker until interrupted."""
    if config is None:
        config = WorkerConfig()
    client = await Client.connect(config.target_host, namespace=config.namespace)
    await build_worker(client, config).run()
