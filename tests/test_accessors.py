import numpy as np
import pytest

from kaguya.core import Transformer, pipe
from kaguya.combinators import abs, concat, fst, map, signum, snd


class TestPairAccessors:
    """Test fst and snd"""

    def test_projections(self):
        assert fst((1, "a")) == 1
        assert snd((1, "a")) == "a"

    def test_typed_form(self):
        first = fst[int, str]
        second = snd.typed(int, str)
        assert isinstance(first, Transformer)
        assert first((1, "a")) == 1
        assert second((1, "a")) == "a"

    def test_typed_form_rejects_wrong_element_type(self):
        with pytest.raises(TypeError, match="element 1 should be str"):
            fst[int, str]((1, 2))

    def test_typed_form_rejects_wrong_arity(self):
        with pytest.raises(TypeError, match="tuple of 2 elements"):
            snd[int, int]((1, 2, 3))

    def test_typed_form_needs_types(self):
        with pytest.raises(TypeError):
            fst[int]
        with pytest.raises(TypeError):
            fst[int, 3]

    def test_in_pipeline(self):
        pairs = [(1, 'a'), (2, 'b')]
        assert pipe(map(snd[int, str]), list)(pairs) == ['a', 'b']

    def test_names(self):
        assert fst[int, str].__name__ == 'fst[int, str]'
        assert repr(snd) == 'snd'


class TestUnaryNumeric:
    """Test abs and signum"""

    def test_immediate(self):
        assert abs(-3) == 3
        assert abs(2.5) == 2.5
        assert signum(-7) == -1
        assert signum(0) == 0
        assert signum(3.0) == 1.0

    def test_typed(self):
        assert abs[int](-4) == 4
        assert signum.typed(float)(-0.5) == -1.0

    def test_typed_rejects_other_types(self):
        with pytest.raises(TypeError, match=r"abs\[int\] expects int, got float"):
            abs[int](-1.5)

    def test_typed_requires_numeric_type(self):
        with pytest.raises(TypeError):
            signum[str]

    @pytest.mark.parametrize("shortcut", [abs, signum])
    def test_typed_rejects_unsigned_numeric_type(self, shortcut):
        """Complex numbers carry no sign, so the typed form refuses them up front"""
        with pytest.raises(TypeError, match="signed real type"):
            shortcut[complex]

    def test_numpy_types(self):
        assert abs[np.float64](np.float64(-2.0)) == 2.0
        assert signum(np.int32(-5)) == -1

    def test_in_pipeline(self):
        assert pipe(map(signum[int]), list)([-2, 0, 9]) == [-1, 0, 1]


class TestConcat:
    """Test eager concatenation"""

    def test_concat(self):
        assert concat([1, 2], (3,), range(4, 6)) == [1, 2, 3, 4, 5]

    def test_concat_generators(self):
        assert concat((x for x in 'ab'), 'c') == ['a', 'b', 'c']

    def test_concat_nothing(self):
        assert concat() == []
