from pathlib import Path

import pytest

from formats import UnknownFormatError
from ingestor import parse_file, parse_line, parse_lines
from ingestor.pipeline import split_messages
from syslogparser.base import PriorityNoStartError

HOST = "3fa85f64-5717-4562-b3fc-2c963f66afa6_mx84"


def test_parse_line_uses_default_format():
    parts = parse_line(f"<134>1 1700000000.000001 {HOST} flows src=10.0.0.1 allow")
    assert parts["hostname"] == HOST
    assert parts["app_name"] == "flows"
    assert parts["message"] == "src=10.0.0.1 allow"


def test_parse_line_propagates_fatal_errors():
    with pytest.raises(PriorityNoStartError):
        parse_line("no priority at all", "meraki")


def test_parse_lines_collects_failures():
    lines = [
        f"<134>1 1700000000.000001 {HOST} flows allow\r\n",
        "\n",
        "not syslog\n",
        "<134>1 plain text\n",
    ]
    result = parse_lines(lines, "meraki")

    assert len(result.records) == 2
    assert result.records[1]["message"] == "plain text"
    assert len(result.failures) == 1
    assert result.failures[0].line_number == 3
    assert result.failures[0].line == "not syslog"
    assert "priority" in result.failures[0].reason


def test_parse_lines_unknown_format():
    with pytest.raises(UnknownFormatError):
        parse_lines(["<134>1 x"], "nope")


def test_parse_file(tmp_path: Path):
    log_file = tmp_path / "meraki.log"
    log_file.write_text(
        f"<134>1 1700000000.000001 {HOST} events port 3 up\n"
        "\n"
        f"<131>1 1700000001.000002 {HOST} urls GET http://example.com\n"
    )

    result = parse_file(log_file)

    assert [r["app_name"] for r in result.records] == ["events", "urls"]
    assert result.records[1]["severity"] == 3
    assert result.records[1]["timestamp"].unix_nano == 1_700_000_001_000_000_002
    assert result.failures == []


def test_parse_file_missing(tmp_path: Path):
    result = parse_file(tmp_path / "missing.log")
    assert result.records == []
    assert result.failures == []


def test_parse_file_splits_on_newline_only(tmp_path: Path):
    log_file = tmp_path / "meraki.log"
    log_file.write_bytes(
        (
            f"<134>1 1700000000.000001 {HOST} events page\x0cbreak here\r\n"
            f"<134>1 1700000000.000002 {HOST} urls line\u2028sep\vtab\n"
        ).encode("utf-8")
    )

    result = parse_file(log_file)

    assert result.failures == []
    assert [r["message"] for r in result.records] == [
        "page\x0cbreak here",
        "line\u2028sep\vtab",
    ]


def test_split_messages_keeps_form_feed():
    assert split_messages("<134>1 a\x0cb\n<134>1 c\n") == ["<134>1 a\x0cb", "<134>1 c", ""]
