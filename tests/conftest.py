from __future__ import annotations

import time
from datetime import datetime

import pytest
from pytz import utc


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keeps entry points from picking up a developer's .env settings.
    Automatically applied to all tests.
    """
    monkeypatch.delenv("TZCONVERT_DEFAULT_SOURCE", raising=False)
    monkeypatch.delenv("TZCONVERT_LOG_LEVEL", raising=False)


@pytest.fixture
def fixed_now() -> datetime:
    """
    A fixed aware instant (2026-02-02 17:05 UTC, noon-ish in New York) for
    current-time display tests.
    """
    return datetime(2026, 2, 2, 17, 5, tzinfo=utc)


@pytest.fixture
def machine_tz(monkeypatch: pytest.MonkeyPatch):
    """
    Switches the process-local timezone (TZ + time.tzset) for the duration of a test.
    Used to prove conversions never depend on the machine's zone.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
