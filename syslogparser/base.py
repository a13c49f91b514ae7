# syslogparser/base.py
"""
Pieces shared by every syslog format parser:

- the ParserError hierarchy,
- Priority / Facility / Severity values,
- the LogParts record every parser dumps,
- the PRI and VERSION scanners, which work on a text buffer and a cursor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PRI_PART_START = "<"
PRI_PART_END = ">"
PRI_PART_MAX_LEN = 5  # "<999>"

NO_VERSION = -1


class ParserError(ValueError):
    """Base class for every error raised while parsing a message."""


class PriorityEmptyError(ParserError):
    def __init__(self) -> None:
        super().__init__("Priority field empty")


class PriorityNoStartError(ParserError):
    def __init__(self) -> None:
        super().__init__("No start char found for priority")


class PriorityNoEndError(ParserError):
    def __init__(self) -> None:
        super().__init__("No end char found for priority")


class PriorityTooShortError(ParserError):
    def __init__(self) -> None:
        super().__init__("Priority field too short")


class PriorityTooLongError(ParserError):
    def __init__(self) -> None:
        super().__init__("Priority field too long")


class PriorityNonDigitError(ParserError):
    def __init__(self) -> None:
        super().__init__("Non digit found in priority")


class VersionNotFoundError(ParserError):
    def __init__(self) -> None:
        super().__init__("Can not find version")


class TimestampError(ParserError):
    """An epoch-like token was found but does not decode to a point in time."""


class HostnameNotFoundError(ParserError):
    def __init__(self) -> None:
        super().__init__("No hostname found")


@dataclass(frozen=True)
class Facility:
    value: int


@dataclass(frozen=True)
class Severity:
    value: int


@dataclass(frozen=True)
class Priority:
    p: int
    facility: Facility
    severity: Severity

    @classmethod
    def from_code(cls, p: int) -> Priority:
        return cls(p=p, facility=Facility(p // 8), severity=Severity(p % 8))


class LogParts(dict[str, Any]):
    """
    Dict with the normalized keys every parser dumps:
    - priority: int (raw PRI code)
    - facility: int
    - severity: int
    - version: int
    - timestamp: Timestamp | datetime
    - hostname: str
    - app_name: str
    - proc_id: str
    - msg_id: str
    - structured_data: str
    - message: str
    """

    def to_json_dict(self) -> dict[str, Any]:
        """Copy with the timestamp rendered for JSON transport."""
        out = dict(self)
        ts = out.get("timestamp")
        if ts is not None:
            out["timestamp"] = ts.isoformat()
            unix_nano = getattr(ts, "unix_nano", None)
            if unix_nano is None:
                unix_nano = int(ts.timestamp()) * 1_000_000_000 + ts.microsecond * 1000
            out["timestamp_unix_nano"] = unix_nano
        return out


def parse_priority(buff: str, cursor: int) -> tuple[Priority, int]:
    """
    Scan "<PRI>" starting at `cursor`.
    Returns the priority and the cursor positioned right after '>'.
    """
    length = len(buff)
    if length - cursor <= 0:
        raise PriorityEmptyError()

    if buff[cursor] != PRI_PART_START:
        raise PriorityNoStartError()

    value = 0
    i = cursor + 1
    while i < length:
        if i - cursor >= PRI_PART_MAX_LEN:
            raise PriorityTooLongError()

        c = buff[i]
        if c == PRI_PART_END:
            if i == cursor + 1:
                raise PriorityTooShortError()
            return Priority.from_code(value), i + 1

        if not ("0" <= c <= "9"):
            raise PriorityNonDigitError()
        value = value * 10 + (ord(c) - ord("0"))
        i += 1

    raise PriorityNoEndError()


def parse_version(buff: str, cursor: int) -> tuple[int, int]:
    """
    Read the single-digit VERSION at `cursor` (1..9).
    Returns the version and the cursor positioned right after it.
    """
    if cursor >= len(buff):
        raise VersionNotFoundError()

    c = buff[cursor]
    if "1" <= c <= "9":
        return ord(c) - ord("0"), cursor + 1
    raise VersionNotFoundError()
