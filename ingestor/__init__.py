"""
Ingest plumbing: hands already-delimited messages to a registered format.
See formats/registry.py for how formats plug in.
"""

from .pipeline import ParseFailure, ParseResult, parse_file, parse_line, parse_lines

__all__ = ["ParseFailure", "ParseResult", "parse_file", "parse_line", "parse_lines"]
