"""Clock protocol for domain layer.

Every expiry decision in the reset flow (token lifetime, one-time code
lifetime) reads time through this port so tests can pin it.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time.

    Implementations:
        - SystemClock: wall clock in UTC (production)
    """

    def now(self) -> datetime:
        """Return the current time.

        Returns:
            Timezone-aware datetime in UTC.
        """
        ...
