import logging

import pytest

from backpack import (
    Backpack,
    Item,
    AllItemsExceedCapacityError,
    KnapFactorNonPositiveError,
    KnapFactorTooLargeError,
    ValidationError,
)
from backpack.planning.validation import (
    validate_batch,
    validate_items_weights,
    validate_knap_factor,
)


class TestItemsWeights:
    def test_single_item_too_heavy(self):
        bp = Backpack(5)
        with pytest.raises(AllItemsExceedCapacityError):
            bp.try_to_pack([Item(10, 100)], 1)

    def test_all_items_too_heavy(self):
        with pytest.raises(AllItemsExceedCapacityError):
            validate_items_weights([Item(1, 11), Item(2, 12)], 10)

    def test_more_than_half_too_heavy_is_rejected(self):
        # 3 // 2 == 1 even though (5, 5) fits
        with pytest.raises(AllItemsExceedCapacityError):
            validate_items_weights([Item(1, 20), Item(1, 20), Item(5, 5)], 10)

    def test_four_items_three_too_heavy_is_rejected(self):
        items = [Item(1, 20), Item(1, 20), Item(1, 20), Item(5, 5)]
        with pytest.raises(AllItemsExceedCapacityError):
            validate_items_weights(items, 10)

    def test_half_too_heavy_passes_and_warns(self, caplog):
        items = [Item(1, 20), Item(1, 20), Item(5, 5), Item(3, 3)]
        with caplog.at_level(logging.WARNING, logger="backpack.planning.validation"):
            validate_items_weights(items, 10)
        assert "2 of 4 items exceed" in caplog.text

    def test_weight_equal_to_capacity_fits(self):
        validate_items_weights([Item(1, 10)], 10)


class TestKnapFactor:
    @pytest.mark.parametrize("factor", [0, -1])
    def test_non_positive(self, factor):
        with pytest.raises(KnapFactorNonPositiveError):
            validate_knap_factor(factor, 3)

    def test_too_large(self):
        with pytest.raises(KnapFactorTooLargeError):
            validate_knap_factor(4, 3)

    def test_bounds_accepted(self):
        validate_knap_factor(1, 3)
        validate_knap_factor(3, 3)

    def test_empty_batch_rejected(self):
        with pytest.raises(KnapFactorTooLargeError):
            validate_batch([], 1, 10)

    def test_errors_share_base_class(self):
        for cls in (AllItemsExceedCapacityError, KnapFactorTooLargeError, KnapFactorNonPositiveError):
            assert issubclass(cls, ValidationError)
            assert issubclass(cls, ValueError)


class TestFailureLeavesStateUntouched:
    @pytest.mark.parametrize("factor, error", [
        (0, KnapFactorNonPositiveError),
        (4, KnapFactorTooLargeError),
    ])
    def test_bad_knap_factor(self, factor, error):
        bp = Backpack(100)
        bp.try_to_pack([Item(10, 10)], 1)
        with pytest.raises(error):
            bp.try_to_pack([Item(1, 1), Item(2, 2), Item(3, 3)], factor)
        assert bp.remaining_capacity == 90
        assert bp.packed_items == [Item(10, 10)]

    def test_weights_checked_before_knap_factor(self):
        bp = Backpack(5)
        with pytest.raises(AllItemsExceedCapacityError):
            bp.try_to_pack([Item(10, 100)], 0)
        assert bp.remaining_capacity == 5
