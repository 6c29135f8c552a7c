"""Unit tests for SystemClock."""

from datetime import UTC, datetime

import pytest
from freezegun import freeze_time

from src.infrastructure.clock import SystemClock


@pytest.mark.unit
class TestSystemClock:
    """Test wall clock adapter."""

    @freeze_time("2026-01-15 12:00:00")
    def test_now_is_utc_wall_clock(self):
        """Test now() returns the current time in UTC."""
        assert SystemClock().now() == datetime(2026, 1, 15, 12, 0, tzinfo=UTC)

    def test_now_is_timezone_aware(self):
        """Test now() never returns a naive datetime."""
        assert SystemClock().now().tzinfo is not None
