"""Composite node of the test tree."""

import itertools
import logging
import weakref
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from runner_model.configuration import (
    ConfigurationEntry,
    compute_worker_hash,
    serialize_configuration,
)
from runner_model.modifiers import Modifiers
from runner_model.scope import is_skipped
from runner_model.test import Test

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Hook:
    """Hook registered on a suite, e.g. ``beforeEach``."""

    type: str
    body: Callable[..., Any]


@dataclass(kw_only=True, eq=False)
class Suite:
    """Group of tests and nested suites.

    Children are kept both by kind (``suites``, ``tests``) and in declaration
    order (``entries``). The suite owns its children; they only keep a weak
    reference back.

    Ids are valid only after :meth:`renumber` and :meth:`assign_ids` have run
    on the finished tree. Adding children afterwards requires running both
    again.
    """

    title: str = ""
    file: str = ""
    location: str = ""
    modifiers: Modifiers = field(default_factory=Modifiers)
    suites: list["Suite"] = field(default_factory=list)
    tests: list[Test] = field(default_factory=list)
    entries: list["Suite | Test"] = field(default_factory=list)
    hooks: list[Hook] = field(default_factory=list)
    # Desired worker configuration.
    configuration: list[ConfigurationEntry] = field(default_factory=list)
    # Configuration above in "name1=value1, name2=value2" form.
    configuration_string: str = ""
    # Includes configuration and worker registration locations.
    worker_hash: str = ""
    id: str | None = None
    ordinal: int | None = None
    _parent: "weakref.ref[Suite] | None" = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> "Suite | None":
        """Enclosing suite, or None for a root."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, suite: "Suite | None") -> None:
        self._parent = weakref.ref(suite) if suite is not None else None

    def add_suite(self, suite: "Suite") -> None:
        """Adopt a nested suite."""
        suite.parent = self
        self.suites.append(suite)
        self.entries.append(suite)

    def add_test(self, test: Test) -> None:
        """Adopt a test."""
        test.parent = self
        self.tests.append(test)
        self.entries.append(test)

    def add_hook(self, type: str, body: Callable[..., Any]) -> None:
        """Register a hook of the given type."""
        self.hooks.append(Hook(type=type, body=body))

    def configure(
        self,
        configuration: Iterable[ConfigurationEntry],
        registrations: Iterable[str] = (),
    ) -> None:
        """Set the worker configuration and derive its string and hash."""
        self.configuration = list(configuration)
        self.configuration_string = serialize_configuration(self.configuration)
        self.worker_hash = compute_worker_hash(
            self.configuration_string, registrations
        )
        log.debug(
            "Configured suite %r: [%s] worker_hash=%s",
            self.title,
            self.configuration_string,
            self.worker_hash,
        )

    def count_tests(self) -> int:
        """Return the number of tests in this subtree."""
        return len(self.all_tests())

    def each_suite(self, fn: Callable[["Suite"], bool | None]) -> bool:
        """Visit descendant suites, each after its own descendants.

        Returns True as soon as ``fn`` returns a truthy value.
        """
        for suite in self.suites:
            if suite.each_suite(fn) or fn(suite):
                return True
        return False

    def find_test(self, fn: Callable[[Test], bool | None]) -> bool:
        """Visit tests, nested suites first, then this suite's own tests.

        Returns True as soon as ``fn`` returns a truthy value.
        """
        for suite in self.suites:
            if suite.find_test(fn):
                return True
        for test in self.tests:
            if fn(test):
                return True
        return False

    def find_suite(self, fn: Callable[["Suite"], bool | None]) -> bool:
        """Visit this suite and then its descendants, in pre-order.

        Returns True as soon as ``fn`` returns a truthy value.
        """
        if fn(self):
            return True
        for suite in self.suites:
            if suite.find_suite(fn):
                return True
        return False

    def all_tests(self) -> list[Test]:
        """Return every test in this subtree in traversal order."""
        tests: list[Test] = []
        self.find_test(tests.append)
        return tests

    def walk_entries(self) -> Iterator["Node"]:
        """Yield every descendant in declaration order, depth first."""
        for entry in self.entries:
            yield entry
            match entry:
                case Suite():
                    yield from entry.walk_entries()
                case Test():
                    pass

    def renumber(self) -> None:
        """Assign dense ordinals to the whole subtree.

        Suites and tests are numbered in two separate sequences, both
        starting at zero.
        """
        suite_ordinals = itertools.count()
        test_ordinals = itertools.count()

        def number_suite(suite: Suite) -> None:
            suite.ordinal = next(suite_ordinals)

        def number_test(test: Test) -> None:
            test.ordinal = next(test_ordinals)

        self.find_suite(number_suite)
        self.find_test(number_test)
        log.debug(
            "Renumbered %s: %d suite(s), %d test(s)",
            self.file or self.title,
            next(suite_ordinals),
            next(test_ordinals),
        )

    def assign_ids(self) -> None:
        """Derive ids from ordinals and this suite's file and configuration.

        Every node under this suite shares the same suffix, so an id is stable
        across processes as long as the tree shape and root are the same.
        """
        suffix = f"@{self.file}::[{self.configuration_string}]"

        def assign(node: Suite | Test) -> None:
            node.id = f"{node.ordinal}{suffix}"

        self.find_suite(assign)
        self.find_test(assign)
        log.debug("Assigned ids with suffix %s", suffix)

    def has_runnable_tests(self) -> bool:
        """Return True if at least one test in the subtree is not skipped."""
        return self.find_test(lambda test: not is_skipped(test))


Node: TypeAlias = Suite | Test
