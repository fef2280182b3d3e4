"""figiparse.workflow -- Temporal.io batch validation workflow."""

from figiparse.workflow.types import (
    BatchReport as BatchReport,
)
from figiparse.workflow.types import (
    IdentifierBatch as IdentifierBatch,
)
from figiparse.workflow.types import (
    SymbologyBatch as SymbologyBatch,
)
from figiparse.workflow.types import (
    ValidationOutcome as ValidationOutcome,
)
from figiparse.workflow.types import (
    ValidationReport as ValidationReport,
)
from figiparse.workflow.types import (
    ValidationRequest as ValidationRequest,
)
