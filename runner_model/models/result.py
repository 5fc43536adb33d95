"""Models for test execution results."""

from dataclasses import dataclass, field
from typing import Any, Literal

TestStatus = Literal["passed", "failed", "timedOut", "skipped"]

TEST_STATUSES: tuple[TestStatus, ...] = ("passed", "failed", "timedOut", "skipped")


@dataclass(kw_only=True)
class TestResult:
    """Result of a single execution attempt of a test.

    Created empty when the attempt starts; the execution engine fills in
    ``status``, ``error`` and ``duration`` once the attempt completes.
    """

    __test__ = False

    duration: float = 0.0
    status: TestStatus | None = None
    error: Any | None = None
    stdout: list[str | bytes] = field(default_factory=list)
    stderr: list[str | bytes] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)
