"""Pytest configuration and shared fixtures."""

import pytest

from tabsearch.models.record import TabRecord

NOW = 1_700_000_000_000
HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS


@pytest.fixture
def now():
    """Fixed reference time in milliseconds."""
    return NOW


@pytest.fixture
def make_record():
    """Factory for TabRecord with sensible defaults."""

    def _make(
        id: int,
        title: str = "",
        url: str = "",
        age_ms: float = 1000,
        **kwargs,
    ) -> TabRecord:
        return TabRecord(
            id=id,
            title=title,
            url=url,
            last_accessed=NOW - age_ms,
            window_id=kwargs.pop("window_id", 1),
            **kwargs,
        )

    return _make


@pytest.fixture
def mock_tabs(make_record):
    """Three open tabs in one window."""
    return [
        make_record(1, "GitHub - My Repository", "https://github.com/user/my-repo", age_ms=1000),
        make_record(
            2,
            "Stack Overflow - Question",
            "https://stackoverflow.com/questions/12345",
            age_ms=2000,
        ),
        make_record(
            3,
            "Google Search Results",
            "https://www.google.com/search?q=test",
            age_ms=0,
            active=True,
        ),
    ]
