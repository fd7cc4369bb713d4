import pytest

from freshness import BaseClock

# Tue, 25 Aug 2015 12:00:00 GMT
NOW = 1440504000


class MockedClock(BaseClock):
    def __init__(self, timestamp: int = NOW) -> None:
        self.timestamp = timestamp

    def now(self) -> int:
        return self.timestamp

    def advance(self, seconds: int) -> None:
        self.timestamp += seconds


@pytest.fixture
def clock() -> MockedClock:
    return MockedClock()
