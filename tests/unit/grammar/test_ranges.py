import pytest

from abitype.grammar.ranges import BIT_WIDTHS, BYTE_WIDTHS, inclusive_range


class TestInclusiveRange:
    def test_includes_both_bounds(self):
        assert inclusive_range(1, 5) == (1, 2, 3, 4, 5)

    def test_single_value(self):
        assert inclusive_range(7, 7) == (7,)

    def test_zero_minimum_allowed(self):
        assert inclusive_range(0, 2) == (0, 1, 2)

    def test_step(self):
        assert inclusive_range(8, 32, step=8) == (8, 16, 24, 32)

    def test_deterministic(self):
        assert inclusive_range(1, 99) == inclusive_range(1, 99)

    def test_min_above_max_rejected(self):
        with pytest.raises(ValueError):
            inclusive_range(5, 4)

    def test_negative_minimum_rejected(self):
        with pytest.raises(ValueError):
            inclusive_range(-1, 4)

    def test_non_positive_step_rejected(self):
        with pytest.raises(ValueError):
            inclusive_range(1, 4, step=0)


class TestWidthTables:
    def test_byte_widths(self):
        assert BYTE_WIDTHS[0] == 1
        assert BYTE_WIDTHS[-1] == 32
        assert len(BYTE_WIDTHS) == 32

    def test_bit_widths_multiples_of_8(self):
        assert len(BIT_WIDTHS) == 32
        assert BIT_WIDTHS[0] == 8
        assert BIT_WIDTHS[-1] == 256
        assert all(w % 8 == 0 for w in BIT_WIDTHS)
