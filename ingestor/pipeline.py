import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from formats import get_format
from syslogparser import LogParts, ParserError, config

logger = logging.getLogger(__name__)


@dataclass
class ParseFailure:
    line_number: int
    line: str
    reason: str


@dataclass
class ParseResult:
    records: list[LogParts] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)


def parse_line(line: bytes | str, format_name: str | None = None) -> LogParts:
    """Parse a single message with the named format. ParserError propagates."""
    fmt = get_format(format_name or config.DEFAULT_FORMAT)
    parser = fmt.get_parser(line)
    parser.parse()
    return parser.dump()


def split_messages(text: str, format_name: str | None = None) -> list[str]:
    """Use the format's splitter if it has one, else split on newlines only."""
    split = get_format(format_name or config.DEFAULT_FORMAT).get_split_func()
    if split is not None:
        return split(text)
    return text.split("\n")


def parse_lines(lines: Iterable[str], format_name: str | None = None) -> ParseResult:
    """
    Parse already-delimited messages. Blank lines are skipped; lines that
    fail to parse are collected as failures instead of stopping the run.
    """
    fmt = get_format(format_name or config.DEFAULT_FORMAT)
    result = ParseResult()

    for i, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        parser = fmt.get_parser(line)
        try:
            parser.parse()
        except ParserError as exc:
            logger.warning("Skipping line %d: %s", i, exc)
            result.failures.append(ParseFailure(line_number=i, line=line, reason=str(exc)))
            continue
        result.records.append(parser.dump())

    logger.info(
        "Parsed %d records (%d failures) as %s",
        len(result.records),
        len(result.failures),
        format_name or config.DEFAULT_FORMAT,
    )
    return result


def parse_file(file_path: str | Path, format_name: str | None = None) -> ParseResult:
    path = Path(file_path)
    if not path.exists():
        logger.warning("File does not exist: %s", file_path)
        return ParseResult()

    with path.open("r", encoding="utf-8", errors="ignore", newline="") as f:
        text = f.read()
    return parse_lines(split_messages(text, format_name), format_name)
