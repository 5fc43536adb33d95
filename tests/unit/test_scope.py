"""Tests for scope-aware effective state queries."""

from runner_model.models.annotation import Annotation
from runner_model.scope import (
    annotations,
    copy_runnable,
    expected_status,
    full_title,
    is_flaky,
    is_only,
    is_skipped,
    is_slow,
    title_path,
)
from runner_model.suite import Suite

from .conftest import MakeSuiteFn, MakeTestFn


class TestInheritedFlags:
    """Tests for skip, slow and flaky inheritance."""

    def test_parent_skip_applies_to_descendants(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """A skipped ancestor skips every descendant."""
        root = make_suite("")
        outer = make_suite("outer", root)
        inner = make_suite("inner", outer)
        test = make_test("t", inner)

        outer.modifiers.skip()

        assert is_skipped(test)
        assert is_skipped(inner)
        assert not is_skipped(root)

    def test_child_cannot_undo_parent_modifier(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """A false condition on the child leaves the inherited value."""
        root = make_suite("")
        test = make_test("t", root)
        root.modifiers.slow()
        root.modifiers.flaky()

        test.modifiers.slow(False)
        test.modifiers.flaky(False)

        assert is_slow(test)
        assert is_flaky(test)

    def test_child_adds_modifier_parent_lacks(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """Local modifiers do not leak upwards."""
        root = make_suite("")
        test = make_test("t", root)

        test.modifiers.fixme()
        test.modifiers.slow()

        assert is_skipped(test)
        assert is_slow(test)
        assert not is_skipped(root)
        assert not is_slow(root)
        assert not is_flaky(test)

    def test_is_only_reads_local_flag(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """Only is not inherited."""
        root = make_suite("")
        test = make_test("t", root)
        root.modifiers.only = True

        assert is_only(root)
        assert not is_only(test)


class TestExpectedStatus:
    """Tests for expected status resolution."""

    def test_defaults_to_passed(self, make_test: MakeTestFn) -> None:
        """Without fail anywhere the expectation is passed."""
        assert expected_status(make_test("t")) == "passed"

    def test_inherits_from_ancestor(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """Fail on a suite applies to its tests."""
        root = make_suite("")
        suite = make_suite("s", root)
        test = make_test("t", suite)

        root.modifiers.fail()

        assert expected_status(test) == "failed"

    def test_local_value_wins(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """A locally set status shadows the parent's."""
        root = make_suite("")
        test = make_test("t", root)
        root.modifiers.expected_status = "timedOut"

        test.modifiers.fail()

        assert expected_status(test) == "failed"


class TestTitles:
    """Tests for title_path and full_title."""

    def test_empty_root_title_is_elided(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """The empty root title does not appear in the path."""
        root = make_suite("")
        suite = make_suite("S", root)
        test = make_test("T", suite)

        assert title_path(test) == ["S", "T"]
        assert full_title(test) == "S T"

    def test_empty_middle_title_keeps_ancestors(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """An anonymous group is skipped, its ancestors are not."""
        root = make_suite("")
        outer = make_suite("outer", root)
        anonymous = make_suite("", outer)
        test = make_test("leaf", anonymous)

        assert title_path(test) == ["outer", "leaf"]
        assert full_title(test) == "outer leaf"

    def test_root_title_is_included_when_set(
        self, make_suite: MakeSuiteFn, make_test: MakeTestFn
    ) -> None:
        """A titled root contributes to the path."""
        root = make_suite("file")
        test = make_test("t", root)

        assert title_path(test) == ["file", "t"]

    def test_parentless_test_uses_own_title(self, make_test: MakeTestFn) -> None:
        """A detached test has a one-element path."""
        test = make_test("alone")

        assert title_path(test) == ["alone"]
        assert full_title(test) == "alone"


def test_annotations_closest_first(
    make_suite: MakeSuiteFn, make_test: MakeTestFn
) -> None:
    """Local annotations come before those of ancestors."""
    root = make_suite("")
    suite = make_suite("A", root)
    test = make_test("B", suite)
    root.modifiers.slow("root")
    suite.modifiers.flaky("a")
    test.modifiers.skip("b")

    assert annotations(test) == [
        Annotation(type="skip", description="b"),
        Annotation(type="flaky", description="a"),
        Annotation(type="slow", description="root"),
    ]
    assert annotations(root) == [Annotation(type="slow", description="root")]


def test_annotations_do_not_alias_local_list(make_test: MakeTestFn) -> None:
    """The returned list is a copy."""
    test = make_test("t")
    test.modifiers.slow()

    result = annotations(test)
    result.append(Annotation(type="extra", description=None))

    assert len(test.modifiers.annotations) == 1


def test_copy_runnable(make_suite: MakeSuiteFn, make_test: MakeTestFn) -> None:
    """Copies position, flags and ordinal between nodes."""
    source = make_test("source")
    source.location = "example.spec.py:10:3"
    source.ordinal = 7
    source.modifiers.skip()
    target = make_suite("target")

    copy_runnable(target, source)

    assert target.file == "example.spec.py"
    assert target.location == "example.spec.py:10:3"
    assert target.ordinal == 7
    assert target.modifiers.marked_skipped is True
    assert target.title == "target"


def test_parent_link_is_weak() -> None:
    """Children do not keep their parent alive."""
    child = Suite(title="child")
    Suite(title="parent").add_suite(child)

    assert child.parent is None
