import sys
import types
from datetime import timedelta

import pytest
from dateutil import tz

from syslogparser import config
from syslogparser.meraki import Parser


def test_default_location_is_utc():
    assert config.get_location("UTC") is tz.UTC


def test_unknown_zone():
    with pytest.raises(ValueError):
        config.get_location("Nowhere/Atlantis")


def test_parser_uses_configured_zone(monkeypatch):
    monkeypatch.setattr(config, "SYSLOG_TZ", "Asia/Tokyo")
    p = Parser(b"<134>1 1700000000.000000 no host")
    p.parse()
    assert p.dump()["timestamp"].utcoffset() == timedelta(hours=9)


def test_unrelated_config_module_is_ignored(monkeypatch):
    from syslogparser import meraki

    monkeypatch.setattr(config, "SYSLOG_TZ", "UTC")
    monkeypatch.setitem(sys.modules, "config", types.ModuleType("config"))
    assert meraki.config is config
    p = Parser(b"<134>1 1700000000.000000 no host")
    p.parse()
    assert p.dump()["timestamp"].utcoffset() == timedelta(0)
