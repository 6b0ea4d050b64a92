"""Models for the legacy raw point-list format."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawPoint:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class RawStroke:
    points: tuple[RawPoint, ...] = ()


@dataclass(frozen=True, slots=True)
class RawSketch:
    """One stroke per whitespace-separated run of digit groups."""

    strokes: tuple[RawStroke, ...] = ()
