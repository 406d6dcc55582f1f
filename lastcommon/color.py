"""Reachability colors and the color-merge table."""

from enum import Enum


class Origin(Enum):
    """Which tip's search discovered a frontier entry."""

    A = "a"
    B = "b"


class Color(Enum):
    """Which tips a commit is known to be reachable from.

    Colors only move forward: ``UNSEEN`` to one side, then to
    ``FROM_BOTH``, which never changes again.
    """

    UNSEEN = "unseen"
    FROM_A = "from_a"
    FROM_B = "from_b"
    FROM_BOTH = "from_both"


class Step(Enum):
    """What the search does with a commit after merging its color."""

    EXPAND = "expand"  # first visit from this side: enqueue parents
    CONFIRM = "confirm"  # just became common: record it, do not expand
    SKIP = "skip"  # nothing new


_TRANSITIONS: dict[tuple[Color, Origin], tuple[Color, Step]] = {
    (Color.UNSEEN, Origin.A): (Color.FROM_A, Step.EXPAND),
    (Color.UNSEEN, Origin.B): (Color.FROM_B, Step.EXPAND),
    (Color.FROM_A, Origin.A): (Color.FROM_A, Step.SKIP),
    (Color.FROM_A, Origin.B): (Color.FROM_BOTH, Step.CONFIRM),
    (Color.FROM_B, Origin.A): (Color.FROM_BOTH, Step.CONFIRM),
    (Color.FROM_B, Origin.B): (Color.FROM_B, Step.SKIP),
    (Color.FROM_BOTH, Origin.A): (Color.FROM_BOTH, Step.SKIP),
    (Color.FROM_BOTH, Origin.B): (Color.FROM_BOTH, Step.SKIP),
}


def color_of(origin: Origin) -> Color:
    """The one-sided color a tip or fresh commit gets from ``origin``."""
    return Color.FROM_A if origin is Origin.A else Color.FROM_B


def merge_color(color: Color, origin: Origin) -> tuple[Color, Step]:
    """Merge a visit from ``origin`` into ``color``.

    Returns the new color and what the search should do next.
    """
    return _TRANSITIONS[color, origin]
