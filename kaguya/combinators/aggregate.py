"""
Variadic numeric reductions

``sum`` and ``product`` accept two call shapes:
- Range form: sum(span(1, 5)) reduces every integer from 1 to 5 inclusive
- List form: sum(1, 2, 3, 4, 5) reduces the operands left to right

The shape is resolved once into a RangeArgs or ListArgs value before the
shared reduction runs.
"""

from typing import Any, Callable, Iterable, Tuple, Union
from dataclasses import dataclass
from functools import reduce
import operator

from ..core import fun


# ============================================================================
# Argument Shapes
# ============================================================================

@dataclass(frozen=True)
class RangeArgs:
    """
    Inclusive integer range [start, stop]

    Attributes
    ----------
    start : int
        First integer of the range
    stop : int
        Last integer of the range, included

    Examples
    --------
    >>> list(RangeArgs(1, 4).to_range())
    [1, 2, 3, 4]
    """
    start: int
    stop: int

    def __post_init__(self):
        # operator.index rejects floats and other non-integral bounds
        object.__setattr__(self, 'start', operator.index(self.start))
        object.__setattr__(self, 'stop', operator.index(self.stop))

    def to_range(self) -> range:
        return range(self.start, self.stop + 1)


@dataclass(frozen=True)
class ListArgs:
    """
    Explicit, non-empty list of operands

    Raises
    ------
    TypeError
        If no operands are given
    """
    values: Tuple[Any, ...]

    def __post_init__(self):
        values = tuple(self.values)
        if not values:
            raise TypeError("At least one operand is required")
        object.__setattr__(self, 'values', values)


def span(start: int, stop: int) -> RangeArgs:
    """Shorthand for RangeArgs(start, stop)"""
    return RangeArgs(start, stop)


def _resolve(args: Tuple) -> Union[RangeArgs, ListArgs]:
    if len(args) == 1 and isinstance(args[0], (RangeArgs, ListArgs)):
        return args[0]
    return ListArgs(args)


def _aggregate(
    args: Tuple,
    combine: Callable[[Any, Any], Any],
    reduce_range: Callable[[Iterable[int]], Any]
):
    shape = _resolve(args)
    if isinstance(shape, RangeArgs):
        return reduce_range(shape.to_range())
    return reduce(combine, shape.values)


# ============================================================================
# Reductions
# ============================================================================

def sum(*args):
    """
    Sum an inclusive range or a list of operands

    Parameters
    ----------
    *args : RangeArgs, ListArgs, or one or more numbers
        ``sum(span(i, j))`` = i + (i+1) + ... + j.
        ``sum(a, b, c)`` = (a + b) + c; a single operand comes back unchanged.

    Raises
    ------
    TypeError
        If called without operands

    Examples
    --------
    >>> sum(span(1, 5))
    15
    >>> sum(1, 2, 3, 4, 5)
    15
    >>> sum(7)
    7
    """
    return _aggregate(args, operator.add, fun.sum)


def product(*args):
    """
    Multiply an inclusive range or a list of operands

    Mirrors ``sum`` with multiplication. An empty range (start > stop)
    multiplies to 1.

    Examples
    --------
    >>> product(span(1, 4))
    24
    >>> product(2, 3, 4)
    24
    """
    return _aggregate(args, operator.mul, fun.product)
