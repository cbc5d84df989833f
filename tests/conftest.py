from __future__ import annotations

from datetime import datetime, timezone
from itertools import count

import pytest

from icsgen.ics import FixedClock


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2024, 6, 1, 12, 30, 45, tzinfo=timezone.utc))


@pytest.fixture
def uid_factory():
    counter = count(1)
    return lambda: f"uid-{next(counter)}"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("ICSGEN_FILENAME", raising=False)
    monkeypatch.delenv("ICSGEN_TIMEZONE", raising=False)
