# formats/meraki.py
from syslogparser import meraki

from .base import Format, ParserWrapper
from .registry import register


@register("meraki")
class Meraki(Format):
    """Meraki syslog. Messages arrive one per line, so no custom splitter."""

    def get_parser(self, line: bytes | str) -> ParserWrapper:
        return ParserWrapper(meraki.Parser(line))

    def get_split_func(self):
        return None
