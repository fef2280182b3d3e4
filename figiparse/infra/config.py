"""Worker and activity configuration for batch validation.

No client library is imported. Pure configuration data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

TASK_QUEUE: str = "figi-validation"


@final
@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Temporal connection settings for the validation worker."""

    target_host: str = "localhost:7233"
    namespace: str = "default"
    task_queue: str = TASK_QUEUE


@final
@dataclass(frozen=True, slots=True)
class ActivityConfig:
    """Execution limits for the validation activities.

    Validation is deterministic, so a retry can only reproduce the same
    result: one attempt.
    """

    start_to_close_timeout_s: int = 30
    maximum_attempts: int = 1
    max_batch_size: int = 10_000

    def __post_init__(self) -> None:
        if self.start_to_close_timeout_s <= 0:
            raise TypeError(
                f"start_to_close_timeout_s must be > 0, got {self.start_to_close_timeout_s}"
            )
        if self.maximum_attempts < 1:
            raise TypeError(f"maximum_attempts must be >= 1, got {self.maximum_attempts}")
        if self.max_batch_size < 1:
            raise TypeError(f"max_batch_size must be >= 1, got {self.max_batch_size}")


DEFAULT_ACTIVITY_CONFIG = ActivityConfig()
