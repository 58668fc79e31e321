import pytest

from webui.dom import set_document


class FakeClock:
    """Monotonic clock counted in whole microseconds, so durations come out exact."""

    def __init__(self):
        self.us = 0

    def __call__(self) -> float:
        return self.us / 1_000_000

    def advance_ms(self, ms: float) -> None:
        self.us += round(ms * 1000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def no_current_document():
    set_document(None)
    yield
    set_document(None)
