"""Local modifier state declared on a single suite or test."""

from dataclasses import dataclass, field

from runner_model.conditions import interpret_condition
from runner_model.models.annotation import Annotation
from runner_model.models.result import TestStatus


@dataclass(kw_only=True)
class Modifiers:
    """Flags and annotations set directly on one node.

    Only the node's own declarations live here; inherited state is resolved
    by the queries in :mod:`runner_model.scope`. ``expected_status`` stays
    None until ``fail`` applies, so the parent's value shows through.

    Every modifier accepts ``()``, ``(condition)``, ``("reason")`` and
    ``(condition, "reason")``. A condition that does not apply is a no-op.
    """

    only: bool = False
    marked_skipped: bool = False
    marked_flaky: bool = False
    marked_slow: bool = False
    expected_status: TestStatus | None = None
    annotations: list[Annotation] = field(default_factory=list)

    def slow(
        self, arg: bool | str | None = None, description: str | None = None
    ) -> None:
        """Mark the node as slow."""
        if self._annotate("slow", arg, description):
            self.marked_slow = True

    def skip(
        self, arg: bool | str | None = None, description: str | None = None
    ) -> None:
        """Skip the node."""
        if self._annotate("skip", arg, description):
            self.marked_skipped = True

    def fixme(
        self, arg: bool | str | None = None, description: str | None = None
    ) -> None:
        """Skip the node, reported as known to be broken."""
        if self._annotate("fixme", arg, description):
            self.marked_skipped = True

    def flaky(
        self, arg: bool | str | None = None, description: str | None = None
    ) -> None:
        """Accept failed attempts as long as one attempt meets expectations."""
        if self._annotate("flaky", arg, description):
            self.marked_flaky = True

    def fail(
        self, arg: bool | str | None = None, description: str | None = None
    ) -> None:
        """Expect the node to fail; the test still runs."""
        if self._annotate("fail", arg, description):
            self.expected_status = "failed"

    def copy_from(self, other: "Modifiers") -> None:
        """Copy the flags of another node's modifiers, not its annotations."""
        self.only = other.only
        self.marked_skipped = other.marked_skipped
        self.marked_flaky = other.marked_flaky
        self.marked_slow = other.marked_slow

    def _annotate(
        self, kind: str, arg: bool | str | None, description: str | None
    ) -> bool:
        condition = interpret_condition(arg, description)
        if condition.applies:
            self.annotations.append(
                Annotation(type=kind, description=condition.reason)
            )
        return condition.applies
