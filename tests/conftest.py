import pytest

from backpack import Backpack, Item
from backpack.planning import BatchState


@pytest.fixture
def sample_items():
    """Batch used by the demo driver; densities 4.0, 3.6, 3.875, 3.833."""
    return [Item(200, 50), Item(90, 25), Item(155, 40), Item(115, 30)]


@pytest.fixture
def additional_items():
    return [Item(100, 95), Item(5, 1)]


@pytest.fixture
def sample_state(sample_items):
    """Sorted: (200,50), (155,40), (115,30), (90,25); capacity 100."""
    return BatchState.from_batch(sample_items, 100)


@pytest.fixture
def backpack():
    return Backpack(100)
