"""
List comprehension with fused mapping and filtering

``ls`` is the function form of

    [mapper(x) for x in source if where(x)]

Both the mapper and the predicate are optional. Whatever is given, the
source is traversed once and the predicate always sees the original
element, never the mapped one.
"""

from typing import Any, Callable, Iterable, List, Optional

from ..core.operations import Transformer, identity, always


def ls(
    source: Iterable[Any],
    mapper: Optional[Callable[[Any], Any]] = None,
    where: Optional[Callable[[Any], bool]] = None
) -> List[Any]:
    """
    Build a list from a source iterable

    Parameters
    ----------
    source : Iterable[T]
        Elements to traverse. Must be finite for the call to return.
    mapper : Callable[[T], U], optional
        Applied to each surviving element, identity by default
    where : Callable[[T], bool], optional
        Keeps elements for which it holds, all elements by default

    Returns
    -------
    result : List[U]
        New list, in source order

    Examples
    --------
    >>> ls([1, 2, 3, 4, 5], lambda x: x * x, lambda x: x % 2 == 0)
    [4, 16]
    >>> ls(range(4), mapper=str)
    ['0', '1', '2', '3']
    >>> ls(range(6), where=lambda x: x > 3)
    [4, 5]
    """
    mapper = identity if mapper is None else mapper
    where = always if where is None else where

    result = []
    for item in source:
        if where(item):
            result.append(mapper(item))
    return result


class Comprehension(Transformer):
    """
    Reusable comprehension awaiting its source

    Lets the fused map-and-filter pass sit in a pipeline like any other
    transformer.

    Examples
    --------
    >>> squares_of_evens = Comprehension(lambda x: x * x, lambda x: x % 2 == 0)
    >>> squares_of_evens(range(6))
    [0, 4, 16]
    """

    def __init__(
        self,
        mapper: Optional[Callable[[Any], Any]] = None,
        where: Optional[Callable[[Any], bool]] = None
    ):
        self.mapper = mapper
        self.where = where
        super().__init__(self._run, name=self._label())

    def _run(self, source: Iterable[Any]) -> List[Any]:
        return ls(source, self.mapper, self.where)

    def _label(self) -> str:
        parts = []
        if self.mapper is not None:
            parts.append(getattr(self.mapper, '__name__', 'mapper'))
        if self.where is not None:
            parts.append(f"if {getattr(self.where, '__name__', 'where')}")
        return f"ls[{' '.join(parts)}]" if parts else "ls"
