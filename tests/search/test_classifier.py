"""Tests for recency tier classification."""

from hypothesis import given, settings
from hypothesis import strategies as st

from tabsearch.models.record import RecordTier
from tabsearch.search.classifier import (
    HISTORY_THRESHOLD_MS,
    is_history_tab,
    partition_records,
    record_tier,
)

NOW = 1_700_000_000_000
HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS


class TestIsHistoryTab:
    """Boundary behaviour of the 24 hour rule."""

    def test_threshold_is_24_hours(self):
        assert HISTORY_THRESHOLD_MS == DAY_MS

    def test_exactly_24_hours_is_not_history(self):
        assert is_history_tab(NOW - DAY_MS, NOW) is False

    def test_just_past_24_hours_is_history(self):
        assert is_history_tab(NOW - DAY_MS - 1, NOW) is True

    def test_future_timestamp_is_not_history(self):
        assert is_history_tab(NOW + 1000, NOW) is False

    def test_recent_is_not_history(self):
        assert is_history_tab(NOW - HOUR_MS, NOW) is False

    def test_custom_threshold(self):
        assert is_history_tab(NOW - 2 * HOUR_MS, NOW, threshold_ms=HOUR_MS) is True

    @given(age=st.integers(min_value=-10**12, max_value=10**12))
    @settings(max_examples=100, deadline=None)
    def test_matches_age_rule(self, age):
        assert is_history_tab(NOW - age, NOW) == (age > DAY_MS)


class TestRecordTier:
    """Explicit flags take precedence over the age rule."""

    def test_explicit_history_flag_wins(self, make_record):
        record = make_record(1, age_ms=0, is_history_tab=True)
        assert record_tier(record, NOW) is RecordTier.HISTORY

    def test_explicit_active_flag_wins(self, make_record):
        record = make_record(1, age_ms=10 * DAY_MS, is_history_tab=False)
        assert record_tier(record, NOW) is RecordTier.ACTIVE

    def test_unflagged_record_uses_age(self, make_record):
        assert record_tier(make_record(1, age_ms=2 * DAY_MS), NOW) is RecordTier.HISTORY
        assert record_tier(make_record(2, age_ms=HOUR_MS), NOW) is RecordTier.ACTIVE


class TestPartitionRecords:
    def test_preserves_order_within_tiers(self, make_record):
        records = [
            make_record(1, age_ms=HOUR_MS),
            make_record(-1, age_ms=HOUR_MS, is_history_tab=True),
            make_record(2, age_ms=0),
            make_record(3, age_ms=3 * DAY_MS),
            make_record(4, age_ms=DAY_MS),
        ]

        active, history = partition_records(records, NOW)

        assert [r.id for r in active] == [1, 2, 4]
        assert [r.id for r in history] == [-1, 3]

    def test_empty_input(self):
        assert partition_records([], NOW) == ([], [])
