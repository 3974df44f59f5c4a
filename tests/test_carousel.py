import pytest

from splashwalls.errors import InvalidSettleIndex
from splashwalls.state import CarouselTracker


def test_starts_at_zero() -> None:
    assert CarouselTracker(item_count=10).current() == 0


def test_settle_moves_index() -> None:
    tracker = CarouselTracker(item_count=10)

    tracker.on_settle(3)

    assert tracker.current() == 3
    assert tracker.has_next and tracker.has_prev


def test_reset_returns_to_first_item() -> None:
    tracker = CarouselTracker(item_count=10)
    tracker.on_settle(3)

    tracker.reset(4)

    assert tracker.current() == 0
    assert tracker.item_count == 4
    with pytest.raises(InvalidSettleIndex):
        tracker.on_settle(5)


@pytest.mark.parametrize("index", [-1, 10, 2.0, True, "1"])
def test_bad_settle_index_is_rejected_without_clamping(index) -> None:
    tracker = CarouselTracker(item_count=10)
    tracker.on_settle(2)

    with pytest.raises(InvalidSettleIndex):
        tracker.on_settle(index)

    assert tracker.current() == 2


def test_empty_carousel_rejects_every_settle() -> None:
    with pytest.raises(InvalidSettleIndex):
        CarouselTracker().on_settle(0)
