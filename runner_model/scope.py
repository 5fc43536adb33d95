"""Scope-aware queries shared by suites and tests.

Modifiers declared on a suite apply to everything below it. A node can add a
modifier its ancestors lack but cannot remove one they set. Effective values
are resolved on read by walking the parent chain.
"""

from typing import Protocol

from runner_model.models.annotation import Annotation
from runner_model.models.result import TestStatus
from runner_model.modifiers import Modifiers


class Runnable(Protocol):
    """Anything with a title, a source position, modifiers and a parent."""

    title: str
    file: str
    location: str
    modifiers: Modifiers
    id: str | None
    ordinal: int | None

    @property
    def parent(self) -> "Runnable | None":
        """Owning suite, or None for a root."""


def is_only(node: Runnable) -> bool:
    """Return the node's own ``only`` flag."""
    return node.modifiers.only


def is_skipped(node: Runnable) -> bool:
    """Return True if the node or any ancestor is marked skipped."""
    if node.modifiers.marked_skipped:
        return True
    parent = node.parent
    return parent is not None and is_skipped(parent)


def is_slow(node: Runnable) -> bool:
    """Return True if the node or any ancestor is marked slow."""
    if node.modifiers.marked_slow:
        return True
    parent = node.parent
    return parent is not None and is_slow(parent)


def is_flaky(node: Runnable) -> bool:
    """Return True if the node or any ancestor is marked flaky."""
    if node.modifiers.marked_flaky:
        return True
    parent = node.parent
    return parent is not None and is_flaky(parent)


def expected_status(node: Runnable) -> TestStatus:
    """Return the closest explicitly expected status, ``passed`` by default."""
    if node.modifiers.expected_status is not None:
        return node.modifiers.expected_status
    parent = node.parent
    return expected_status(parent) if parent is not None else "passed"


def title_path(node: Runnable) -> list[str]:
    """Return ancestor titles followed by the node's own, skipping empty ones.

    Roots are not special: a titled root suite, or a test without a parent,
    contributes its own title. Leave the file-level root untitled to keep it
    out of reported paths.
    """
    parent = node.parent
    path = title_path(parent) if parent is not None else []
    if node.title:
        path.append(node.title)
    return path


def full_title(node: Runnable) -> str:
    """Return the title path joined with single spaces."""
    return " ".join(title_path(node))


def annotations(node: Runnable) -> list[Annotation]:
    """Return the node's annotations followed by those of its ancestors.

    The closest declarations come first, the root's last.
    """
    parent = node.parent
    if parent is None:
        return list(node.modifiers.annotations)
    return [*node.modifiers.annotations, *annotations(parent)]


def copy_runnable(target: Runnable, source: Runnable) -> None:
    """Copy position, modifier flags and ordinal from ``source`` onto ``target``.

    Used when a node is rebuilt from its definition, e.g. inside a worker.
    """
    target.file = source.file
    target.location = source.location
    target.modifiers.copy_from(source.modifiers)
    target.ordinal = source.ordinal
