"""System clock (adapter).

Implements ClockProtocol with the wall clock in UTC.
"""

from datetime import UTC, datetime


class SystemClock:
    """Wall clock returning timezone-aware UTC datetimes."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(UTC)
