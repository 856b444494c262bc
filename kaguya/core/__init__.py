"""
Kaguya Core Module

Plain sequence operations and the composition machinery built on them.

This module provides:
- fun: Base operations (map, filter, folds, reductions, ...), fully applied
- Transformer: Unary callable with a readable name
- Pipeline: Ordered chain of transformers
- pipe / compose: Left-to-right and right-to-left composition
"""

from . import fun

from .fun import (
    FoldMaterializationWarning,
)

from .operations import (
    Transformer,
    Pipeline,
    CompositionError,
    pipe,
    compose,
    identity,
    always,
    flip,
)

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

    # Helpers
    'identity',
    'always',
    'flip',
]
