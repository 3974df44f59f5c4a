import pytest

from splashwalls.logging import get_logger


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, t: float = 100.0):
        self.t = t

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def quiet_logger():
    logger = get_logger()
    logger.muted = True
    yield
    logger.muted = False
