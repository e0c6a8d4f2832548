"""
Tests for record identifiers, the nanosecond clock, and API timestamp rendering.

Run with: pytest tests/test_identifiers.py -v
"""

import uuid

from app.core.identifiers import Clock, new_id
from app.core.timezone import format_ns_for_api


class TestNewId:

    def test_is_uuid4_text(self):
        parsed = uuid.UUID(new_id())
        assert parsed.version == 4

    def test_unique_across_many_calls(self):
        ids = {new_id() for _ in range(1000)}
        assert len(ids) == 1000


class TestClock:

    def test_follows_source_when_it_advances(self):
        readings = iter([100, 200, 300])
        clock = Clock(source=lambda: next(readings))

        assert [clock.now_ns(), clock.now_ns(), clock.now_ns()] == [100, 200, 300]

    def test_stalled_source_still_increases(self):
        clock = Clock(source=lambda: 500)

        first = clock.now_ns()
        second = clock.now_ns()

        assert first == 500
        assert second == 501

    def test_source_stepping_back_does_not_go_backwards(self):
        readings = iter([1_000, 900, 2_000])
        clock = Clock(source=lambda: next(readings))

        assert clock.now_ns() == 1_000
        assert clock.now_ns() == 1_001
        assert clock.now_ns() == 2_000

    def test_default_source_is_epoch_nanoseconds(self):
        reading = Clock().now_ns()
        # Later than 2020-01-01 in nanoseconds
        assert reading > 1_577_836_800 * 1_000_000_000


class TestFormatNsForApi:

    def test_renders_utc_with_z_suffix(self):
        # 2026-01-06T20:43:50.245704123Z
        ns = 1_767_732_230_245_704_123
        assert format_ns_for_api(ns) == "2026-01-06T20:43:50.245704Z"

    def test_epoch(self):
        assert format_ns_for_api(0) == "1970-01-01T00:00:00Z"

    def test_none(self):
        assert format_ns_for_api(None) is None
