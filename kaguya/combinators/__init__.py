"""
Curried combinators over sequences

This module provides a compositional toolkit for sequence transformations,
built so expressions read as data flow instead of explicit loops.

Key Components
--------------
Curried Operations : map, filter, filter_not, skip, take, foldl, foldr, rem
List Comprehension : ls, Comprehension
Aggregation : sum, product over ranges or operand lists
Accessors : fst, snd, abs, signum, concat

Examples
--------
>>> from kaguya.combinators import map, filter, foldl, ls
>>> from kaguya.core import pipe
>>>
>>> # Curried stages in a pipeline
>>> total_of_even_squares = pipe(
...     filter(lambda x: x % 2 == 0),
...     map(lambda x: x * x),
...     foldl(0, lambda acc, x: acc + x),
... )
>>> total_of_even_squares(range(5))
20
>>>
>>> # Comprehension
>>> ls([1, 2, 3, 4, 5], lambda x: x * x, lambda x: x % 2 == 0)
[4, 16]
"""

from .curried import (
    Curried,
    curry,
    map,
    filter,
    filter_not,
    skip,
    take,
    foldl,
    foldr,
    rem,
)

from .comprehension import (
    ls,
    Comprehension,
)

from .aggregate import (
    RangeArgs,
    ListArgs,
    span,
    sum,
    product,
)

from .accessors import (
    Accessor,
    UnaryNumeric,
    fst,
    snd,
    abs,
    signum,
    concat,
)


__all__ = [
    # Currying
    'Curried',
    'curry',
    'map',
    'filter',
    'filter_not',
    'skip',
    'take',
    'foldl',
    'foldr',
    'rem',

    # Comprehension
    'ls',
    'Comprehension',

    # Aggregation
    'RangeArgs',
    'ListArgs',
    'span',
    'sum',
    'product',

    # Accessors
    'Accessor',
    'UnaryNumeric',
    'fst',
    'snd',
    'abs',
    'signum',
    'concat',
]
