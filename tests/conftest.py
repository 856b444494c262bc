"""
Shared fixtures for the kaguya test suite.
"""

import pytest


class CountingIterable:
    """Iterable that records how often it is traversed and how many items it yields."""

    def __init__(self, items):
        self._items = list(items)
        self.traversals = 0
        self.yielded = 0

    def __iter__(self):
        self.traversals += 1
        for item in self._items:
            self.yielded += 1
            yield item


def inc(x):
    return x + 1


def double(x):
    return x * 2


def minus3(x):
    return x - 3


@pytest.fixture
def counting():
    """Factory for iterables that count their traversals."""
    return CountingIterable


@pytest.fixture
def arithmetic_stages():
    """Three non-commuting unary stages: +1, *2, -3."""
    return inc, double, minus3
