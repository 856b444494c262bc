"""
Base sequence operations

Plain, fully-applied operations over iterables. Every operation takes its
data argument last so that it can be curried:
- map, filter, filter_not: Element-wise lazy transformations
- skip, take: Lazy slicing from the front
- foldl, foldr: Left and right reductions
- sum, product: Numeric reductions
- concat: Lazy concatenation
- rem, signum: Scalar numeric helpers

Lazy operations return iterators and do no work until consumed.
"""

from typing import Any, Callable, Iterable, Iterator, TypeVar
import builtins
import itertools
import math
import operator
import warnings
from functools import reduce

import numpy as np


T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')


# Buffers larger than this emit a FoldMaterializationWarning in foldr
FOLDR_BUFFER_WARN_THRESHOLD = 1_000_000


class FoldMaterializationWarning(UserWarning):
    """Raised when foldr has to buffer a large non-reversible iterable"""
    pass


# ============================================================================
# Element-wise Operations
# ============================================================================

def map(f: Callable[[T], U], seq: Iterable[T]) -> Iterator[U]:
    """
    Apply ``f`` to every element

    **Signature**: map :: (T -> U) -> [T] -> [U]

    Examples
    --------
    >>> list(map(lambda x: x * 2, [1, 2, 3]))
    [2, 4, 6]
    """
    return builtins.map(f, seq)


def filter(f: Callable[[T], bool], seq: Iterable[T]) -> Iterator[T]:
    """
    Keep the elements for which ``f`` holds

    **Signature**: filter :: (T -> bool) -> [T] -> [T]

    Examples
    --------
    >>> list(filter(lambda x: x % 2 == 0, [1, 2, 3, 4]))
    [2, 4]
    """
    return builtins.filter(f, seq)


def filter_not(f: Callable[[T], bool], seq: Iterable[T]) -> Iterator[T]:
    """
    Drop the elements for which ``f`` holds

    **Signature**: filter_not :: (T -> bool) -> [T] -> [T]

    Examples
    --------
    >>> list(filter_not(lambda x: x % 2 == 0, [1, 2, 3, 4]))
    [1, 3]
    """
    return itertools.filterfalse(f, seq)


def skip(n: int, seq: Iterable[T]) -> Iterator[T]:
    """Drop the first ``n`` elements (skip :: int -> [T] -> [T])"""
    return itertools.islice(seq, n, None)


def take(n: int, seq: Iterable[T]) -> Iterator[T]:
    """Yield at most the first ``n`` elements (take :: int -> [T] -> [T])"""
    return itertools.islice(seq, n)


def concat(*seqs: Iterable[T]) -> Iterator[T]:
    """
    Concatenate iterables lazily

    Examples
    --------
    >>> list(concat([1, 2], (3,), range(4, 6)))
    [1, 2, 3, 4, 5]
    """
    return itertools.chain.from_iterable(seqs)


# ============================================================================
# Folds
# ============================================================================

def foldl(init: R, f: Callable[[R, T], R], seq: Iterable[T]) -> R:
    """
    Reduce left-to-right

    foldl(init, f, [e1, e2, ..., en]) = f(...f(f(init, e1), e2)..., en)

    **Signature**: foldl :: R -> (R -> T -> R) -> [T] -> R

    Parameters
    ----------
    init : R
        Initial accumulator, returned unchanged for an empty sequence
    f : Callable[[R, T], R]
        Combining function, called as ``f(accumulator, element)``
    seq : Iterable[T]
        Elements to reduce

    Examples
    --------
    >>> foldl(0, lambda acc, x: acc - x, [1, 2, 3])
    -6
    """
    return reduce(f, seq, init)


def foldr(init: R, f: Callable[[T, R], R], seq: Iterable[T]) -> R:
    """
    Reduce right-to-left

    foldr(init, f, [e1, e2, ..., en]) = f(e1, f(e2, ...f(en, init)...))

    Note the argument order of ``f``: element first, accumulator second.
    This mirrors foldl and matters for non-commutative combiners.

    **Signature**: foldr :: R -> (T -> R -> R) -> [T] -> R

    Parameters
    ----------
    init : R
        Initial accumulator, returned unchanged for an empty sequence
    f : Callable[[T, R], R]
        Combining function, called as ``f(element, accumulator)``
    seq : Iterable[T]
        Elements to reduce. Must be traversable from the right: numpy
        arrays, or anything ``reversed()`` accepts. Other iterables are
        buffered into a list first, costing memory proportional to their
        length.

    Examples
    --------
    >>> foldr(0, lambda x, acc: x - acc, [1, 2, 3])
    2
    """
    acc = init
    for elem in _from_the_right(seq):
        acc = f(elem, acc)
    return acc


def _from_the_right(seq: Iterable[T]) -> Iterator[T]:
    """Iterate ``seq`` back to front, buffering only when unavoidable"""
    if isinstance(seq, np.ndarray):
        # Reversed view, no copy
        return iter(seq[::-1])

    try:
        return reversed(seq)
    except TypeError:
        pass

    buffer = list(seq)
    if len(buffer) > FOLDR_BUFFER_WARN_THRESHOLD:
        warnings.warn(
            f"foldr buffered {len(buffer)} elements from a non-reversible "
            f"{type(seq).__name__}; pass a sequence to avoid the copy",
            FoldMaterializationWarning,
            stacklevel=3,
        )
    return reversed(buffer)


# ============================================================================
# Numeric Reductions
# ============================================================================

def sum(values: Iterable[Any]) -> Any:
    """
    Additive reduction of a finite iterable

    Empty input sums to 0. numpy arrays are reduced with ``ndarray.sum``.

    Examples
    --------
    >>> sum(range(1, 6))
    15
    """
    if isinstance(values, np.ndarray):
        return values.sum()
    return builtins.sum(values)


def product(values: Iterable[Any]) -> Any:
    """
    Multiplicative reduction of a finite iterable

    Empty input multiplies to 1. numpy arrays are reduced with
    ``ndarray.prod``.

    Examples
    --------
    >>> product(range(1, 5))
    24
    """
    if isinstance(values, np.ndarray):
        return values.prod()
    return math.prod(values)


# ============================================================================
# Scalar Helpers
# ============================================================================

def rem(x, y):
    """
    Remainder of ``x / y``, truncated toward zero

    The sign of the result follows the dividend, unlike Python's ``%``
    which follows the divisor. numpy operands use ``np.fmod``; for Python
    numbers a zero divisor raises ZeroDivisionError.

    Examples
    --------
    >>> rem(7, 3)
    1
    >>> rem(-7, 3)
    -1
    >>> rem(7, -3)
    1
    """
    if _is_numpy(x) or _is_numpy(y):
        return np.fmod(x, y)
    if isinstance(x, float) or isinstance(y, float):
        return math.fmod(x, y)

    r = operator.mod(builtins.abs(x), builtins.abs(y))
    return -r if x < 0 else r


def signum(x):
    """
    Sign of ``x`` as -1, 0 or 1

    The result has the same numeric kind as the input: ints give ints,
    floats give floats (NaN stays NaN), numpy values stay numpy values.

    Examples
    --------
    >>> signum(-4)
    -1
    >>> signum(0.0)
    0.0
    """
    if _is_numpy(x):
        return np.sign(x)
    if x != x:
        return x
    sign = (x > 0) - (x < 0)
    if isinstance(x, bool):
        return sign
    return type(x)(sign)


def _is_numpy(x) -> bool:
    return isinstance(x, (np.ndarray, np.generic))
