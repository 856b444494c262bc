"""
Transformers and functional composition

Building blocks for data-transformation expressions:
- Transformer: Unary callable with a readable name
- Pipeline: Fixed, ordered chain of transformers

Functional composition:
- pipe: Left-to-right composition
- compose: Right-to-left composition

Small helpers used as pipeline stages or defaults:
- identity, always, flip
"""

from typing import Any, Callable, Iterator, Tuple


# Joins stage names in Pipeline.__name__
NAME_SEPARATOR = ' → '


class CompositionError(ValueError):
    """Raised when a pipeline cannot be built from the given stages"""
    pass


def _name_of(op: Callable) -> str:
    return getattr(op, '__name__', type(op).__name__)


# ============================================================================
# Transformer
# ============================================================================

class Transformer:
    """
    Unary callable T -> U

    Wraps a one-argument operation and carries no state besides what the
    operation captured when it was built. Transformers chain into
    pipelines with ``then`` (forward) and ``compose`` (backward).

    Examples
    --------
    >>> inc = Transformer(lambda x: x + 1, name='inc')
    >>> double = Transformer(lambda x: x * 2, name='double')
    >>> inc.then(double)(5)
    12
    >>> inc.compose(double)(5)
    11
    """

    def __init__(self, operation: Callable[[Any], Any], name: str = None):
        """
        Parameters
        ----------
        operation : Callable[[T], U]
            Function awaiting the single remaining argument
        name : str, optional
            Display name, defaults to the operation's ``__name__``
        """
        if not callable(operation):
            raise TypeError(f"Expected a callable, got {type(operation)}")
        self.operation = operation
        self.__name__ = name if name is not None else _name_of(operation)

    def __call__(self, value):
        """Apply operation to value"""
        return self.operation(value)

    def then(self, other: Callable) -> 'Pipeline':
        """
        Apply ``other`` after this transformer

        t.then(g)(x) = g(t(x))
        """
        return pipe(self, other)

    def compose(self, other: Callable) -> 'Pipeline':
        """
        Apply ``other`` before this transformer

        (t ∘ g)(x) = t(g(x))
        """
        return compose(self, other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__name__})"


# ============================================================================
# Pipeline
# ============================================================================

class Pipeline(Transformer):
    """
    Ordered chain of transformers exposed as one transformer

    Stages are applied in the order they are stored; the order is fixed
    at construction. Each stage's result is handed straight to the next,
    so a pipeline of lazy stages stays lazy end-to-end.

    Examples
    --------
    >>> p = Pipeline([lambda x: x + 1, lambda x: x * 2])
    >>> p(5)
    12
    >>> len(p)
    2
    """

    def __init__(self, stages, name: str = None):
        """
        Parameters
        ----------
        stages : Iterable[Callable]
            Unary callables in application order

        Raises
        ------
        CompositionError
            If no stages are given or a stage is not callable
        """
        stages = tuple(stages)
        if not stages:
            raise CompositionError("A pipeline needs at least one stage")
        for position, stage in enumerate(stages):
            if not callable(stage):
                raise CompositionError(
                    f"Stage {position} is not callable: {stage!r}"
                )

        self._stages = stages
        super().__init__(
            self._run,
            name if name is not None else NAME_SEPARATOR.join(
                _name_of(stage) for stage in stages
            ),
        )

    def _run(self, value):
        result = value
        for stage in self._stages:
            result = stage(result)
        return result

    @property
    def stages(self) -> Tuple[Callable, ...]:
        """Stages in application order"""
        return self._stages

    def then(self, *others: Callable) -> 'Pipeline':
        """New pipeline with ``others`` appended after the existing stages"""
        return Pipeline(self._stages + others)

    def explain(self) -> str:
        """
        Describe the stages in application order

        Examples
        --------
        >>> def inc(x): return x + 1
        >>> def double(x): return x * 2
        >>> print(pipe(inc, double).explain())
        Pipeline (2 stages):
          1. inc
          2. double
        """
        lines = [f"Pipeline ({len(self)} stage{'s' if len(self) != 1 else ''}):"]
        for position, stage in enumerate(self._stages, start=1):
            lines.append(f"  {position}. {_name_of(stage)}")
        return '\n'.join(lines)

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[Callable]:
        return iter(self._stages)


# ============================================================================
# Functional Composition
# ============================================================================

def pipe(*operations: Callable) -> Pipeline:
    """
    Compose operations left-to-right (pipeline style)

    pipe(f, g, h)(x) = h(g(f(x)))

    Parameters
    ----------
    *operations : Callable
        One or more unary operations, first applied first

    Returns
    -------
    piped : Pipeline
        Piped operation

    Raises
    ------
    CompositionError
        If called without operations

    Examples
    --------
    >>> pipe(lambda x: x + 1, lambda x: x * 2, lambda x: x - 3)(5)
    9
    """
    return Pipeline(operations)


def compose(*operations: Callable) -> Pipeline:
    """
    Compose operations right-to-left (mathematical style)

    compose(f, g, h)(x) = f(g(h(x)))

    Equivalent to ``pipe`` over the reversed argument list.

    Parameters
    ----------
    *operations : Callable
        One or more unary operations, last applied first

    Returns
    -------
    composed : Pipeline
        Composed operation

    Raises
    ------
    CompositionError
        If called without operations

    Examples
    --------
    >>> compose(lambda x: x + 1, lambda x: x * 2, lambda x: x - 3)(5)
    5
    """
    return Pipeline(reversed(operations))


# ============================================================================
# Helpers
# ============================================================================

def identity(x):
    """Return x unchanged"""
    return x


def always(_x) -> bool:
    """Predicate that holds for every element"""
    return True


def flip(f: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """
    Swap the two arguments of a binary function

    Handy for reusing a foldl combiner with foldr, whose combiner takes
    the element first.

    Examples
    --------
    >>> flip(lambda a, b: a - b)(1, 10)
    9
    """
    def flipped(a, b):
        return f(b, a)

    flipped.__name__ = f"flip({_name_of(f)})"
    return flipped
