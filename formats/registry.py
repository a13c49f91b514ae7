"""
Format registry.

Each syslog flavour registers one Format class under a name; the ingest
side looks it up and asks it for a parser per message. To add a format:

1. Create a new file in formats/, e.g. `fortigate.py`.
2. Define a class implementing formats.base.Format:
      - get_parser(self, line) -> LogParser
      - get_split_func(self) -> SplitFunc | None
3. Decorate the class with @register("<name>").
4. Import the module in formats/__init__.py so it registers itself.

Example:

    from .base import Format, ParserWrapper
    from .registry import register

    @register("fortigate")
    class Fortigate(Format):
        def get_parser(self, line):
            return ParserWrapper(fortigate.Parser(line))

        def get_split_func(self):
            return None
"""

import logging

logger = logging.getLogger(__name__)

# Global format registry: maps format name → Format class
REGISTRY: dict[str, type] = {}


class UnknownFormatError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown log format: {self.name}"


def register(name: str):
    """
    Decorator to register a Format class under a given name.

    Args:
        name (str): Format identifier (e.g. "meraki").
    """

    def decorator(cls):
        key = name.lower()
        if key in REGISTRY and REGISTRY[key] is not cls:
            raise ValueError(f"Format already registered: {key}")
        REGISTRY[key] = cls
        logger.debug("Registered format %s -> %s", key, cls.__name__)
        return cls

    return decorator


def get_format(name: str):
    """Instantiate the Format registered under `name`."""
    try:
        format_cls = REGISTRY[name.lower()]
    except KeyError:
        raise UnknownFormatError(name) from None
    return format_cls()


def available_formats() -> list[str]:
    return sorted(REGISTRY)
