"""figiparse.symbology — Bloomberg-style symbology grammar."""

from figiparse.symbology.parser import (
    SubParserRegistry as SubParserRegistry,
)
from figiparse.symbology.parser import (
    default_registry as default_registry,
)
from figiparse.symbology.parser import (
    format_locator as format_locator,
)
from figiparse.symbology.parser import (
    locator_parser as locator_parser,
)
from figiparse.symbology.parser import (
    locator_to_dict as locator_to_dict,
)
from figiparse.symbology.parser import (
    parse_symbology as parse_symbology,
)
from figiparse.symbology.types import (
    IdentifierType as IdentifierType,
)
from figiparse.symbology.types import (
    Provider as Provider,
)
from figiparse.symbology.types import (
    Scheme as Scheme,
)
from figiparse.symbology.types import (
    SecurityLocator as SecurityLocator,
)
from figiparse.symbology.types import (
    Service as Service,
)
from figiparse.symbology.types import (
    YellowKey as YellowKey,
)
