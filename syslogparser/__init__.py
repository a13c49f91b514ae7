from . import meraki as meraki

# Explicit re-exports for library users.
from .base import (
    HostnameNotFoundError as HostnameNotFoundError,
)
from .base import (
    LogParts as LogParts,
)
from .base import (
    ParserError as ParserError,
)
from .base import (
    Priority as Priority,
)
from .base import (
    TimestampError as TimestampError,
)
from .timestamp import (
    Timestamp as Timestamp,
)

__all__ = [
    "HostnameNotFoundError",
    "LogParts",
    "ParserError",
    "Priority",
    "Timestamp",
    "TimestampError",
    "meraki",
]
