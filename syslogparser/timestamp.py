# syslogparser/timestamp.py
from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone, tzinfo

NANOS_PER_SECOND = 1_000_000_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Timestamp(datetime):
    """
    A datetime that also carries the sub-microsecond part of a unix time.

    Comparison and arithmetic are plain datetime behaviour (microsecond
    resolution); use `unix_nano` when nanoseconds matter.
    """

    nanosecond = 0  # 0..999, below the datetime microsecond

    @classmethod
    def from_unix(cls, seconds: int, nanos: int = 0, tz: tzinfo | None = timezone.utc) -> Timestamp:
        """
        Build from seconds + nanoseconds since the epoch, normalising nanos
        into seconds the way time.Unix does.
        Raises OverflowError when the instant is outside the datetime range.
        """
        extra, nanos = divmod(nanos, NANOS_PER_SECOND)
        seconds += extra
        micros, rest = divmod(nanos, 1000)
        dt = (EPOCH + timedelta(seconds=seconds, microseconds=micros)).astimezone(tz or timezone.utc)
        return cls._from_datetime(dt, rest)

    @classmethod
    def _from_datetime(cls, dt: datetime, nanosecond: int) -> Timestamp:
        ts = cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond,
            dt.tzinfo,
            fold=dt.fold,
        )
        ts.nanosecond = nanosecond
        return ts

    @classmethod
    def now(cls, tz: tzinfo | None = None) -> Timestamp:
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls.from_unix(seconds, nanos, tz)

    # datetime rebuilds the object in these two, so carry nanosecond across
    def astimezone(self, tz: tzinfo | None = None) -> Timestamp:
        return self._from_datetime(super().astimezone(tz), self.nanosecond)

    def replace(self, *args, nanosecond: int | None = None, **kwargs) -> Timestamp:
        if nanosecond is None:
            nanosecond = self.nanosecond
        return self._from_datetime(super().replace(*args, **kwargs), nanosecond)

    @property
    def nanos(self) -> int:
        """Nanoseconds within the second."""
        return self.microsecond * 1000 + self.nanosecond

    @property
    def unix_nano(self) -> int:
        delta = self - EPOCH
        whole = delta.days * 86400 + delta.seconds
        return whole * NANOS_PER_SECOND + self.nanos

    def isoformat(self, sep: str = "T", timespec: str = "auto") -> str:
        if timespec != "auto" or not self.nanosecond:
            return super().isoformat(sep, timespec)
        # RFC 3339 with nine fractional digits
        base = super().isoformat(sep, "seconds")
        return f"{base[:19]}.{self.nanos:09d}{base[19:]}"
