"""Annotation records attached to suites and tests by modifier calls."""

from pydantic import Field

from runner_model.models.base import Model


class Annotation(Model):
    """A single modifier annotation, e.g. ``skip`` with its reason."""

    type: str = Field(..., description="Modifier name (skip, fixme, slow, ...)")
    description: str | None = Field(
        default=None, description="Reason given to the modifier call, if any"
    )
