# formats/base.py
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import tzinfo
from typing import Any

from syslogparser.base import LogParts

# Splits a raw text stream into messages. None means "one message per line".
SplitFunc = Callable[[str], list[str]]


class LogParser(ABC):
    @abstractmethod
    def parse(self) -> None:
        """Parse the message; raise ParserError if it is unusable."""

    @abstractmethod
    def dump(self) -> LogParts:
        """Return the fields of the last successful parse."""

    @abstractmethod
    def location(self, location: tzinfo | str) -> None:
        """Set the zone used for timestamps."""


class ParserWrapper(LogParser):
    """Adapts any object with parse()/dump()/set_location() to LogParser."""

    def __init__(self, parser: Any):
        self.parser = parser

    def parse(self) -> None:
        self.parser.parse()

    def dump(self) -> LogParts:
        return self.parser.dump()

    def location(self, location: tzinfo | str) -> None:
        self.parser.set_location(location)


class Format(ABC):
    @abstractmethod
    def get_parser(self, line: bytes | str) -> LogParser:
        """Return a fresh parser bound to one message."""

    @abstractmethod
    def get_split_func(self) -> SplitFunc | None:
        """
        Return a custom splitter for raw streams, or None when messages
        are already line-delimited upstream.
        """
