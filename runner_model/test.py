"""Leaf node of the test tree: one test case and its attempts."""

import weakref
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from runner_model.models.result import TestResult, TestStatus
from runner_model.modifiers import Modifiers
from runner_model.scope import expected_status, is_flaky, is_skipped

if TYPE_CHECKING:
    from runner_model.suite import Suite


@dataclass(kw_only=True, eq=False)
class Test:
    """A single test case.

    Results are appended one per execution attempt, so retries leave the
    earlier attempts in place. Timing and worker assignment are written by
    the execution engine; ``timeout`` is only recorded here, never enforced.
    """

    __test__ = False

    title: str
    body: Callable[..., Any]
    file: str = ""
    location: str = ""
    modifiers: Modifiers = field(default_factory=Modifiers)
    overridden_body: Callable[..., Any] | None = None
    results: list[TestResult] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    timeout: float = 0
    worker_id: int | None = None
    id: str | None = None
    ordinal: int | None = None
    _parent: "weakref.ref[Suite] | None" = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> "Suite | None":
        """Suite that declared this test."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, suite: "Suite | None") -> None:
        self._parent = weakref.ref(suite) if suite is not None else None

    def append_result(self) -> TestResult:
        """Start a new attempt and return its empty result."""
        result = TestResult()
        self.results.append(result)
        return result

    def duration(self) -> float:
        """Return wall time between start and end, or 0 if not finished."""
        if self.start_time is None or self.end_time is None:
            return 0
        return self.end_time - self.start_time

    def has_result_with_status(self, status: TestStatus) -> bool:
        """Return True if any attempt ended with ``status``."""
        return any(result.status == status for result in self.results)

    def ok(self) -> bool:
        """Return the overall verdict across all attempts.

        Skipped tests are always ok. Otherwise every attempt must end with
        the expected status, unless the test is flaky, in which case one
        attempt with the expected status is enough. A test without results
        is ok.
        """
        if is_skipped(self):
            return True
        expected = expected_status(self)
        if all(result.status == expected for result in self.results):
            return True
        if not is_flaky(self):
            return False
        return self.has_result_with_status(expected)
