# syslogparser/meraki.py
"""
Parser for Meraki syslog messages.

Meraki devices only guarantee "<PRI>VERSION " at the front of a message.
What follows is vendor text without a fixed layout, so the header is
captured best effort:

    <134>1 1700000000.000001 3fa85f64-..._sensor01 status_report rest of payload
    ^PRI  ^VERSION           ^HOSTNAME             ^APP-NAME     ^MSG
          ^TIMESTAMP (unix seconds.fraction, anywhere in the text)

PRI and VERSION are scanned strictly from the cursor. Timestamp, hostname
and app name are searched for anywhere in the message.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import tzinfo

from . import config
from .base import (
    NO_VERSION,
    HostnameNotFoundError,
    LogParts,
    Priority,
    TimestampError,
    parse_priority,
    parse_version,
)
from .timestamp import NANOS_PER_SECOND, Timestamp

logger = logging.getLogger(__name__)

INT64_MAX_DIGITS = 19
INT64_MAX = 2**63 - 1

# unix seconds "." fraction; present in almost every Meraki message type
TIMESTAMP_RE = re.compile(r"(\d{10,})\.(\d{6,})", re.ASCII)
# UUID_name, e.g. 3fa85f64-5717-4562-b3fc-2c963f66afa6_sensor01
HOSTNAME_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}_\w+", re.ASCII
)


@dataclass
class Header:
    priority: Priority | None = None
    version: int = NO_VERSION
    timestamp: Timestamp | None = None
    hostname: str = ""
    app_name: str = ""
    proc_id: str = ""
    msg_id: str = ""


class Parser:
    """
    Parses exactly one message. Build a new Parser per message; calling
    parse() again starts over from a clean cursor and header.
    """

    def __init__(self, buff: bytes | str, location: tzinfo | str | None = None):
        if isinstance(buff, (bytes, bytearray, memoryview)):
            buff = bytes(buff).decode("utf-8", errors="replace")
        self.buff = buff
        self.cursor = 0
        self.length = len(buff)
        self.location = _resolve_location(location)
        self.header = Header()
        self.structured_data = ""
        self.message = ""
        self._parsed = False

    def set_location(self, location: tzinfo | str) -> None:
        self.location = _resolve_location(location)

    def parse(self) -> None:
        """
        Fill header and message. Raises ParserError on anything but a
        missing hostname, which only leaves hostname and app name empty.
        """
        self.cursor = 0
        self.header = Header()
        self.message = ""
        self._parsed = False

        hdr = Header()
        try:
            self._parse_header(hdr)
        except HostnameNotFoundError:
            logger.debug("No hostname in message; keeping partial header")

        self.header = hdr
        if self.cursor < self.length:
            self.message = self.buff[self.cursor :]
        self._parsed = True

    def dump(self) -> LogParts:
        if not self._parsed:
            return LogParts()

        hdr = self.header
        return LogParts(
            priority=hdr.priority.p,
            facility=hdr.priority.facility.value,
            severity=hdr.priority.severity.value,
            version=hdr.version,
            timestamp=hdr.timestamp,
            hostname=hdr.hostname,
            app_name=hdr.app_name,
            proc_id=hdr.proc_id,
            msg_id=hdr.msg_id,
            structured_data=self.structured_data,
            message=self.message,
        )

    # HEADER = PRI VERSION SP TIMESTAMP SP HOSTNAME SP APP-NAME SP PROCID SP MSGID
    def _parse_header(self, hdr: Header) -> None:
        hdr.priority, self.cursor = parse_priority(self.buff, self.cursor)
        hdr.version, self.cursor = parse_version(self.buff, self.cursor)
        self.cursor += 1

        hdr.timestamp = self._parse_timestamp()
        hdr.hostname = self._parse_hostname()

        hdr.app_name, end = self._parse_app_name(hdr.hostname)
        if hdr.app_name and end > self.cursor:
            self.cursor = end + 1

    def _parse_timestamp(self) -> Timestamp:
        """First unix timestamp in the message, or now if there is none."""
        m = TIMESTAMP_RE.search(self.buff)
        if m is None:
            return Timestamp.now(self.location)

        sec_str, frac_str = m.groups()
        digits = sec_str.lstrip("0") or "0"
        if len(digits) > INT64_MAX_DIGITS or int(digits) > INT64_MAX:
            raise TimestampError(f"Timestamp seconds out of range: {sec_str}")
        sec = int(digits)

        frac = frac_str.lstrip("0") or "0"
        nanos = int(frac) if len(frac) <= 9 else NANOS_PER_SECOND
        if nanos >= NANOS_PER_SECOND:
            logger.debug("Fraction %s is not a nanosecond count; keeping seconds only", frac_str)
            nanos = 0

        try:
            return Timestamp.from_unix(sec, nanos, self.location)
        except OverflowError as exc:
            raise TimestampError(f"Timestamp out of range: {m.group(0)}") from exc

    def _parse_hostname(self) -> str:
        m = HOSTNAME_RE.search(self.buff)
        if m is None:
            raise HostnameNotFoundError()
        return m.group(0)

    def _parse_app_name(self, host: str) -> tuple[str, int]:
        """
        App name is the token after the hostname, which holds for most
        message types. Returns the name and the index just past it.
        """
        i = self.buff.find(host)
        if i == -1:
            return "", -1

        start = self.buff.find(" ", i)
        if start == -1:
            return "", -1
        start += 1

        end = self.buff.find(" ", start)
        if end == -1:
            end = self.length
        return self.buff[start:end], end


def _resolve_location(location: tzinfo | str | None) -> tzinfo:
    if location is None or isinstance(location, str):
        return config.get_location(location)
    return location


def parse(buff: bytes | str, location: tzinfo | str | None = None) -> LogParts:
    """Parse one message and return its LogParts."""
    p = Parser(buff, location)
    p.parse()
    return p.dump()
