from fractions import Fraction

import numpy as np
import pytest

from kaguya.combinators import ListArgs, RangeArgs, product, span, sum


class TestSum:
    """Test range and list forms of sum"""

    def test_range_form(self):
        assert sum(span(1, 5)) == 15
        assert sum(RangeArgs(1, 5)) == 15

    def test_list_form_agrees_with_range(self):
        assert sum(1, 2, 3, 4, 5) == sum(span(1, 5)) == 15

    def test_single_operand_is_returned_unchanged(self):
        marker = Fraction(7, 3)
        assert sum(marker) is marker

    def test_explicit_list_args(self):
        assert sum(ListArgs((1, 2, 3))) == 6

    def test_left_associative(self):
        # String concatenation makes the association order visible
        assert sum('a', 'b', 'c') == 'abc'

    def test_empty_range_follows_base_reduction(self):
        assert sum(span(5, 1)) == 0

    def test_numpy_bounds(self):
        assert sum(span(np.int64(1), np.int64(4))) == 10

    def test_zero_operands_rejected(self):
        with pytest.raises(TypeError):
            sum()


class TestProduct:
    """Test range and list forms of product"""

    def test_range_form(self):
        assert product(span(1, 4)) == 24

    def test_list_form(self):
        assert product(2, 3, 4) == 24
        assert product(5) == 5

    def test_empty_range(self):
        assert product(span(3, 2)) == 1

    def test_zero_operands_rejected(self):
        with pytest.raises(TypeError):
            product()


class TestArgumentShapes:
    """Test the tagged argument variants"""

    def test_range_args_inclusive(self):
        assert list(RangeArgs(2, 4).to_range()) == [2, 3, 4]

    def test_range_args_rejects_floats(self):
        with pytest.raises(TypeError):
            RangeArgs(1.5, 3)

    def test_list_args_rejects_empty(self):
        with pytest.raises(TypeError):
            ListArgs(())

    def test_list_args_freezes_values(self):
        args = ListArgs([1, 2])
        assert args.values == (1, 2)

    def test_shapes_are_immutable(self):
        args = RangeArgs(1, 2)
        with pytest.raises(AttributeError):
            args.start = 5
