"""Interpretation of the arguments accepted by modifier calls."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Condition:
    """Normalized modifier arguments."""

    applies: bool
    reason: str | None = None


def interpret_condition(
    arg: bool | str | None = None, description: str | None = None
) -> Condition:
    """Normalize the four accepted call shapes of a modifier.

    - ``()`` applies unconditionally, without a reason.
    - ``("reason")`` applies unconditionally; ``description`` is ignored.
    - ``(condition)`` and ``(condition, "reason")`` apply when ``condition``
      is true and carry ``description`` verbatim.

    Every combination is valid, so this never raises.
    """
    if arg is None and description is None:
        return Condition(applies=True)
    if isinstance(arg, str):
        return Condition(applies=True, reason=arg)
    return Condition(applies=bool(arg), reason=description)
