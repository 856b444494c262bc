"""
Kaguya: curried functional combinators for Python sequences

Build data transformations declaratively: curry the base operations,
chain them with ``pipe``/``compose``, and collect results with ``ls``.

>>> import kaguya as kg
>>> kg.pipe(kg.skip(1), kg.take(3), list)(range(10))
[1, 2, 3]
"""

from .core import (
    fun,
    FoldMaterializationWarning,
    Transformer,
    Pipeline,
    CompositionError,
    pipe,
    compose,
    identity,
    always,
    flip,
)

from .combinators import (
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
    ls,
    Comprehension,
    RangeArgs,
    ListArgs,
    span,
    sum,
    product,
    Accessor,
    UnaryNumeric,
    fst,
    snd,
    abs,
    signum,
    concat,
)


__version__ = '0.1.0'


__all__ = [
    # Base operations
    'fun',
    'FoldMaterializationWarning',

    # Composition
    'Transformer',
    'Pipeline',
    'CompositionError',
    'pipe',
    'compose',
    'identity',
    'always',
    'flip',

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


# Quick reference documentation
QUICK_REFERENCE = """
Kaguya Quick Reference
======================

CURRYING (data argument last):
    map(f)(seq)            - same as map(f, seq)
    filter(p) / filter_not(p)
    skip(n) / take(n)
    foldl(init, f)(seq)    - f(acc, x), left to right
    foldr(init, f)(seq)    - f(x, acc), right to left
    foldl(init)(f, seq)    - init fixed, rest together
    foldl(init)(f)(seq)    - init fixed, rest one at a time
    rem(x)(y)              - truncated remainder, dividend fixed

COMPOSITION:
    pipe(f, g, h)          - h(g(f(x)))
    compose(f, g, h)       - f(g(h(x)))
    p.then(k)              - append a stage
    p.explain()            - list stages

COMPREHENSION:
    ls(seq, mapper, where) - [mapper(x) for x in seq if where(x)]
    Comprehension(m, w)    - same, as a pipeline stage

AGGREGATION:
    sum(span(1, 5))        - 1 + 2 + 3 + 4 + 5
    sum(1, 2, 3)           - operand list
    product(span(1, 4))    - 1 * 2 * 3 * 4

ACCESSORS:
    fst(p) / snd(p)        - pair projections
    fst[int, str]          - typed projection
    abs(x) / abs[int]      - absolute value
    signum(x) / signum[float]
    concat(a, b, ...)      - eager concatenation
"""


def help():
    """Print quick reference"""
    print(QUICK_REFERENCE)
