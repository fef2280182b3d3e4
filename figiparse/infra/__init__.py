"""figiparse.infra — configuration for the validation worker."""

from figiparse.infra.config import DEFAULT_ACTIVITY_CONFIG as DEFAULT_ACTIVITY_CONFIG
from figiparse.infra.config import TASK_QUEUE as TASK_QUEUE
from figiparse.infra.config import ActivityConfig as ActivityConfig
from figiparse.infra.config import WorkerConfig as WorkerConfig
