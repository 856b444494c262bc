"""
Pair projections and unary numeric shortcuts

Each shortcut has an immediate form and a typed curried form:

    fst((1, 'a'))         -> 1
    fst[int, str]         -> Transformer accepting only (int, str) tuples
    abs(-3)               -> 3
    abs[int]              -> Transformer accepting only ints

The typed form states the operand type up front because no value exists
yet to infer it from.
"""

from typing import Any, Callable, Iterable, List, Tuple
import builtins
import numbers

from ..core import fun
from ..core.operations import Transformer


def _type_names(types: Tuple[type, ...]) -> str:
    return ', '.join(t.__name__ for t in types)


# ============================================================================
# Pair Accessors
# ============================================================================

class Accessor:
    """
    Read-only projection of one tuple position

    Examples
    --------
    >>> fst((1, 'a'))
    1
    >>> snd[int, str]((1, 'a'))
    'a'
    """

    def __init__(self, index: int, name: str):
        self.index = index
        self.__name__ = name

    def __call__(self, pair):
        return pair[self.index]

    def typed(self, *types: type) -> Transformer:
        """
        Projection that only accepts tuples of exactly ``types``

        Raises
        ------
        TypeError
            At construction, if fewer than two element types are declared or
            one is not a type. On application, if the value is not a tuple
            with those element types.
        """
        if len(types) < 2:
            raise TypeError(
                f"{self.__name__} needs at least two element types, got {len(types)}"
            )
        for t in types:
            if not isinstance(t, type):
                raise TypeError(f"Expected a type, got {t!r}")

        index = self.index
        label = f"{self.__name__}[{_type_names(types)}]"

        def project(value):
            if not isinstance(value, tuple) or len(value) != len(types):
                raise TypeError(
                    f"{label} expects a tuple of {len(types)} elements, got {value!r}"
                )
            for position, (item, t) in enumerate(zip(value, types)):
                if not isinstance(item, t):
                    raise TypeError(
                        f"{label}: element {position} should be {t.__name__}, "
                        f"got {type(item).__name__}"
                    )
            return value[index]

        return Transformer(project, name=label)

    def __getitem__(self, types) -> Transformer:
        if not isinstance(types, tuple):
            types = (types,)
        return self.typed(*types)

    def __repr__(self) -> str:
        return self.__name__


fst = Accessor(0, 'fst')
snd = Accessor(1, 'snd')


# ============================================================================
# Unary Numeric Shortcuts
# ============================================================================

class UnaryNumeric:
    """
    Single-operand numeric query with an immediate and a typed form

    Examples
    --------
    >>> signum(-2.5)
    -1.0
    >>> list(map(abs[int], [-1, 2, -3]))
    [1, 2, 3]
    """

    def __init__(self, operation: Callable[[Any], Any], name: str):
        self.operation = operation
        self.__name__ = name

    def __call__(self, x):
        return self.operation(x)

    def typed(self, numeric_type: type) -> Transformer:
        """
        Curried form restricted to values of ``numeric_type``

        Raises
        ------
        TypeError
            At construction, if ``numeric_type`` is not a real number type. On
            application, if the value is not an instance of it.
        """
        if not (isinstance(numeric_type, type) and issubclass(numeric_type, numbers.Real)):
            raise TypeError(f"Expected a signed real type, got {numeric_type!r}")

        operation = self.operation
        label = f"{self.__name__}[{numeric_type.__name__}]"

        def apply(x):
            if not isinstance(x, numeric_type):
                raise TypeError(
                    f"{label} expects {numeric_type.__name__}, got {type(x).__name__}"
                )
            return operation(x)

        return Transformer(apply, name=label)

    def __getitem__(self, numeric_type: type) -> Transformer:
        return self.typed(numeric_type)

    def __repr__(self) -> str:
        return self.__name__


abs = UnaryNumeric(builtins.abs, 'abs')
signum = UnaryNumeric(fun.signum, 'signum')


# ============================================================================
# Eager Concatenation
# ============================================================================

def concat(*seqs: Iterable[Any]) -> List[Any]:
    """
    Concatenate iterables into a new list

    Examples
    --------
    >>> concat([1, 2], (3,), range(4, 6))
    [1, 2, 3, 4, 5]
    """
    return list(fun.concat(*seqs))
