# Import format modules for their side effects (they register themselves).
# Mark as intentionally unused to satisfy Ruff.
from . import meraki as _meraki  # noqa: F401

# Explicit re-exports for library users.
from .base import (
    Format as Format,
)
from .base import (
    LogParser as LogParser,
)
from .registry import (
    REGISTRY as REGISTRY,
)
from .registry import (
    UnknownFormatError as UnknownFormatError,
)
from .registry import (
    available_formats as available_formats,
)
from .registry import (
    get_format as get_format,
)
from .registry import (
    register as register,
)

__all__ = [
    "REGISTRY",
    "Format",
    "LogParser",
    "UnknownFormatError",
    "available_formats",
    "get_format",
    "register",
]
