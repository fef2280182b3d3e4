"""figiparse.core — identifiers, error values and the Result type."""

from figiparse.core.errors import (
    CommittedSubParseFailed as CommittedSubParseFailed,
)
from figiparse.core.errors import (
    GrammarError as GrammarError,
)
from figiparse.core.errors import (
    IdentifierError as IdentifierError,
)
from figiparse.core.errors import (
    InvalidChecksum as InvalidChecksum,
)
from figiparse.core.errors import (
    InvalidComponent as InvalidComponent,
)
from figiparse.core.errors import (
    InvalidFormat as InvalidFormat,
)
from figiparse.core.errors import (
    InvalidLength as InvalidLength,
)
from figiparse.core.errors import (
    ParseError as ParseError,
)
from figiparse.core.errors import (
    UnexpectedToken as UnexpectedToken,
)
from figiparse.core.errors import (
    UnknownIdentifierType as UnknownIdentifierType,
)
from figiparse.core.errors import (
    UnknownProvider as UnknownProvider,
)
from figiparse.core.errors import (
    UnknownScheme as UnknownScheme,
)
from figiparse.core.identifiers import (
    FIGI as FIGI,
)
from figiparse.core.identifiers import (
    check_checksum as check_checksum,
)
from figiparse.core.identifiers import (
    check_structure as check_structure,
)
from figiparse.core.identifiers import (
    figi_check_digit as figi_check_digit,
)
from figiparse.core.identifiers import (
    validate_all as validate_all,
)
from figiparse.core.identifiers import (
    validate_batch as validate_batch,
)
from figiparse.core.identifiers import (
    validate_figi as validate_figi,
)
from figiparse.core.result import (
    Err as Err,
)
from figiparse.core.result import (
    Ok as Ok,
)
from figiparse.core.result import (
    Result as Result,
)
from figiparse.core.result import (
    sequence as sequence,
)
from figiparse.core.result import (
    unwrap as unwrap,
)
