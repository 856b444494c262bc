import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from kaguya.core import pipe
from kaguya.combinators import Comprehension, filter, ls, map


def square(x):
    return x * x


def is_even(x):
    return x % 2 == 0


class TestListComprehension:
    """Test the four surface forms of ls"""

    def test_mapper_and_filter(self):
        assert ls([1, 2, 3, 4, 5], square, is_even) == [4, 16]

    def test_mapper_only(self):
        assert ls([1, 2, 3], square) == [1, 4, 9]

    def test_filter_only(self):
        assert ls([1, 2, 3, 4], where=is_even) == [2, 4]

    def test_neither(self):
        assert ls(range(3)) == [0, 1, 2]

    def test_filter_sees_original_element(self):
        """The predicate runs on x, not on mapper(x)"""
        # Doubled values are all even, so filtering after the map would keep nothing
        assert ls([1, 2, 3], lambda x: x * 2, lambda x: x % 2 == 1) == [2, 6]

    def test_single_traversal(self, counting):
        source = counting([1, 2, 3, 4, 5])
        ls(source, square, is_even)
        assert source.traversals == 1
        assert source.yielded == 5

    def test_mapper_runs_only_on_survivors(self):
        mapped = []

        def record(x):
            mapped.append(x)
            return x

        ls(range(6), record, is_even)
        assert mapped == [0, 2, 4]

    def test_empty_result(self):
        assert ls([1, 3, 5], square, is_even) == []
        assert ls([]) == []

    def test_result_owns_its_elements(self):
        source = [1, 2, 3]
        result = ls(source)
        assert result == source
        assert result is not source
        result.append(4)
        assert source == [1, 2, 3]

    def test_numpy_source(self):
        assert ls(np.arange(6), int, is_even) == [0, 2, 4]

    def test_predicate_errors_propagate(self):
        def broken(x):
            raise ValueError(f"bad element {x}")

        with pytest.raises(ValueError, match="bad element 1"):
            ls([1, 2], where=broken)

    @given(st.lists(st.integers()))
    def test_equals_filter_then_map(self, data):
        expected = list(map(square)(filter(is_even)(data)))
        assert ls(data, square, is_even) == expected


class TestComprehensionStage:
    """Test the reusable transformer form"""

    def test_in_pipeline(self):
        stage = Comprehension(square, is_even)
        assert pipe(range, stage, sum)(6) == 0 + 4 + 16

    def test_reusable(self):
        stage = Comprehension(where=is_even)
        assert stage([1, 2, 3, 4]) == [2, 4]
        assert stage([1, 2, 3, 4]) == [2, 4]

    def test_name(self):
        assert Comprehension(square, is_even).__name__ == 'ls[square if is_even]'
        assert Comprehension().__name__ == 'ls'
