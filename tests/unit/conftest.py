"""Shared fixtures for unit tests."""

from typing import Protocol

import pytest

from runner_model.suite import Suite
from runner_model.test import Test


class MakeTestFn(Protocol):
    """Protocol for test creation function."""

    def __call__(self, title: str, parent: Suite | None = None) -> Test:
        """Create a test, optionally adopted by ``parent``."""


class MakeSuiteFn(Protocol):
    """Protocol for suite creation function."""

    def __call__(self, title: str, parent: Suite | None = None) -> Suite:
        """Create a suite, optionally adopted by ``parent``."""


def _noop() -> None:
    """Test body that does nothing."""


@pytest.fixture
def make_test() -> MakeTestFn:
    """Return a function creating tests with a no-op body."""

    def _make(title: str, parent: Suite | None = None) -> Test:
        test = Test(title=title, body=_noop, file="example.spec.py")
        if parent is not None:
            parent.add_test(test)
        return test

    return _make


@pytest.fixture
def make_suite() -> MakeSuiteFn:
    """Return a function creating suites."""

    def _make(title: str, parent: Suite | None = None) -> Suite:
        suite = Suite(title=title, file="example.spec.py")
        if parent is not None:
            parent.add_suite(suite)
        return suite

    return _make
