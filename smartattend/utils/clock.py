from datetime import datetime
from zoneinfo import ZoneInfo


class Clock:
    """Wall-clock time in one fixed zone.

    Code expiry, code comparison and attendance timestamps all read the
    time from here, so the host's local zone never leaks in. Values are
    naive datetimes as stored in the database.
    """

    def __init__(self, timezone: str):
        self.zone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.zone).replace(tzinfo=None)
