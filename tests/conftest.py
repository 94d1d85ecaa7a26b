from datetime import datetime, timezone

import pytest


def utc(year, month, day, hour=0, minute=0, second=0):
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return utc(2026, 10, 18, 15, 30)


@pytest.fixture
def record():
    """Collect the arguments of every emission of a Qt signal."""
    def _record(signal):
        calls = []
        signal.connect(lambda *args: calls.append(args))
        return calls
    return _record
