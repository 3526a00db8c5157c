from datetime import datetime
from typing import Protocol

import pytz


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """
    Wall-clock time in the user's timezone, returned naive.
    Everything downstream (week windows, cooldowns) works in local wall-clock time.
    Unknown timezone names fall back to UTC.
    """

    def __init__(self, tz_name: str = "UTC"):
        try:
            self.tz = pytz.timezone(tz_name or "UTC")
        except pytz.UnknownTimeZoneError:
            self.tz = pytz.UTC

    def now(self) -> datetime:
        server_now = datetime.now(pytz.UTC)
        return server_now.astimezone(self.tz).replace(tzinfo=None)


class FixedClock:
    """Always returns the same instant. Used for tests and replays."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, delta) -> None:
        self.moment = self.moment + delta
