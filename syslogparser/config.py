# syslogparser/config.py
import os
from datetime import tzinfo

from dateutil import tz

# -----------------------
# Config (from env, with sane defaults)
# -----------------------
SYSLOG_TZ = os.getenv("SYSLOG_TZ", "UTC")
DEFAULT_FORMAT = os.getenv("DEFAULT_FORMAT", "meraki").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_location(name: str | None = None) -> tzinfo:
    """
    Resolve a zone name (default: SYSLOG_TZ) to a tzinfo.
    Raises ValueError for names dateutil does not know.
    """
    name = name or SYSLOG_TZ
    if name.upper() == "UTC":
        return tz.UTC
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {name}")
    return zone
