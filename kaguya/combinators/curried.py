"""
Curried forms of the base sequence operations

Every base operation takes its data argument last. The entry points here
accept any prefix of the arguments:
- all of them: the call completes and returns the base result
- all but one: a Transformer awaiting the data argument
- fewer: a Curried awaiting the rest, in one or more calls

Key insight: partial application is a flat struct (operation, arity,
captured args), so each curried stage adds one level of indirection and
never nests closures.

Examples
--------
>>> from kaguya.combinators.curried import map, filter, foldl
>>> evens = filter(lambda x: x % 2 == 0)
>>> list(evens(range(6)))
[0, 2, 4]
>>> foldl(0)(lambda acc, x: acc + x, [1, 2, 3])
6
"""

from typing import Any, Callable, Tuple
from functools import partial, wraps

from ..core import fun
from ..core.operations import Transformer, _name_of


# ============================================================================
# Partial Application
# ============================================================================

class Curried:
    """
    Base operation with some leading arguments captured

    Call it with more arguments to move toward a complete call. The
    captured arguments are stored as given and never re-evaluated.

    Examples
    --------
    >>> add3 = Curried(lambda a, b, c: a + b + c, 3)
    >>> add3(1)(2)(3)
    6
    >>> add3(1, 2)(3)
    6
    >>> add3(1)(2, 3)
    6
    """

    def __init__(
        self,
        operation: Callable,
        arity: int,
        args: Tuple = (),
        name: str = None
    ):
        """
        Parameters
        ----------
        operation : Callable
            Fully-applied operation taking ``arity`` positional arguments
        arity : int
            Number of arguments the operation needs
        args : Tuple
            Leading arguments captured so far
        name : str, optional
            Display name, defaults to the operation's ``__name__``

        Raises
        ------
        TypeError
            If ``args`` already saturates the operation
        """
        if len(args) >= arity:
            raise TypeError(
                f"Curried needs fewer than {arity} captured arguments, "
                f"got {len(args)}"
            )
        self.operation = operation
        self.arity = arity
        self.args = tuple(args)
        self.__name__ = name if name is not None else _name_of(operation)

    @property
    def remaining(self) -> int:
        """Number of arguments still awaited"""
        return self.arity - len(self.args)

    def __call__(self, *args):
        return _advance(self.operation, self.arity, self.args + args, self.__name__)

    def __repr__(self) -> str:
        return f"Curried({_describe(self.__name__, self.args)}, remaining={self.remaining})"


def _short(value: Any) -> str:
    if callable(value):
        return getattr(value, '__name__', type(value).__name__)
    return repr(value)


def _describe(name: str, args: Tuple) -> str:
    return f"{name}({', '.join(_short(a) for a in args)})"


def _advance(operation: Callable, arity: int, args: Tuple, name: str):
    """Dispatch on how many arguments have been supplied"""
    if len(args) > arity:
        raise TypeError(
            f"{name}() takes {arity} arguments but {len(args)} were given"
        )
    if len(args) == arity:
        return operation(*args)
    if len(args) == arity - 1:
        return Transformer(partial(operation, *args), name=_describe(name, args))
    return Curried(operation, arity, args, name)


def curry(arity: int) -> Callable[[Callable], Callable]:
    """
    Turn a data-last function into a curried entry point

    Parameters
    ----------
    arity : int
        Number of positional arguments the function takes

    Arguments are positional-only: the entry point counts them to decide
    whether to complete the call, so keywords are not accepted.

    Examples
    --------
    >>> @curry(2)
    ... def scale(k, seq):
    ...     return [k * x for x in seq]
    >>> triple = scale(3)
    >>> triple([1, 2])
    [3, 6]
    >>> scale(2, [1, 2])
    [2, 4]
    """
    if arity < 1:
        raise ValueError(f"arity must be at least 1, got {arity}")

    def decorator(operation: Callable) -> Callable:
        name = _name_of(operation)

        @wraps(operation)
        def entry(*args):
            return _advance(operation, arity, args, name)

        # inspect.signature reports (*args), the shape entry accepts
        del entry.__wrapped__
        entry.__name__ = name
        entry.arity = arity
        return entry

    return decorator


# ============================================================================
# Curried Base Operations
# ============================================================================

@curry(2)
def map(f, seq):
    """
    Curried map

    **Signature**: map :: (T -> U) -> [T] -> [U]

    ``map(f)`` returns a Transformer; ``map(f, seq)`` maps immediately.
    """
    return fun.map(f, seq)


@curry(2)
def filter(f, seq):
    """
    Curried filter

    **Signature**: filter :: (T -> bool) -> [T] -> [T]
    """
    return fun.filter(f, seq)


@curry(2)
def filter_not(f, seq):
    """
    Curried filter_not

    **Signature**: filter_not :: (T -> bool) -> [T] -> [T]
    """
    return fun.filter_not(f, seq)


@curry(2)
def skip(n, seq):
    """Curried skip (skip :: int -> [T] -> [T])"""
    return fun.skip(n, seq)


@curry(2)
def take(n, seq):
    """Curried take (take :: int -> [T] -> [T])"""
    return fun.take(n, seq)


@curry(3)
def foldl(init, f, seq):
    """
    Curried left fold

    **Signature**: foldl :: R -> (R -> T -> R) -> [T] -> R

    Call shapes
    -----------
    foldl(init, f, seq)  - fold immediately
    foldl(init, f)       - Transformer awaiting seq
    foldl(init)(f, seq)  - init fixed, f and seq supplied together
    foldl(init)(f)(seq)  - init fixed, f then seq one at a time

    Examples
    --------
    >>> foldl(0, lambda acc, x: acc - x)([1, 2, 3])
    -6
    """
    return fun.foldl(init, f, seq)


@curry(3)
def foldr(init, f, seq):
    """
    Curried right fold

    **Signature**: foldr :: R -> (T -> R -> R) -> [T] -> R

    The combiner takes the element first and the accumulator second.
    Supports the same call shapes as ``foldl``.

    Examples
    --------
    >>> foldr(0, lambda x, acc: x - acc)([1, 2, 3])
    2
    """
    return fun.foldr(init, f, seq)


@curry(2)
def rem(x, y):
    """
    Curried truncated remainder

    ``rem(x, y)`` computes immediately; ``rem(x)`` fixes the dividend and
    returns a Transformer awaiting the divisor.

    Examples
    --------
    >>> rem(7)(3)
    1
    """
    return fun.rem(x, y)
