"""Sketch document model produced by the sketch parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping


@dataclass(frozen=True, slots=True)
class Point:
    """One pen sample. `x`/`y` fit in int16, `pressure` is in [0, 1]."""

    x: int
    y: int
    pressure: float = 1.0


@dataclass(frozen=True, slots=True)
class Stroke:
    """One continuous pen motion."""

    diameter: int
    points: tuple[Point, ...] = ()


@dataclass(frozen=True, slots=True)
class Marker:
    """Text annotation without spatial data."""

    message: str


type Atom = Stroke | Marker


@dataclass(frozen=True, slots=True)
class Affine:
    """Row-major 3x3 transform applied to a group."""

    matrix: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.matrix) != 9:
            raise ValueError(f"Affine matrix needs 9 coefficients, got {len(self.matrix)}")

    def rows(self) -> tuple[tuple[float, ...], tuple[float, ...], tuple[float, ...]]:
        m = self.matrix
        return (m[0:3], m[3:6], m[6:9])

    @staticmethod
    def identity() -> Affine:
        return Affine((1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))


type Modifier = Affine


class GroupKind(StrEnum):
    """Element kinds that turn a statement into a named group."""

    PENCIL = "Pencil"
    BRUSH = "Brush"
    MARKER = "Marker"


DEFAULT_GROUP_KINDS: Final[Mapping[str, GroupKind]] = MappingProxyType(
    {kind.value: kind for kind in GroupKind}
)


@dataclass(frozen=True, slots=True)
class Element:
    """A group of atoms together with the modifiers applied to it."""

    kind: GroupKind
    atoms: tuple[Atom, ...] = ()
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True, slots=True)
class Sketch:
    """Parsed sketch document.

    `atoms` is the flat master list of everything drawable. Atoms of grouping
    statements are also held by their `Element`; both holders own equal,
    independent values.
    """

    elements: tuple[Element, ...] = ()
    atoms: tuple[Atom, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.elements and not self.atoms

    @property
    def strokes(self) -> tuple[Stroke, ...]:
        return tuple(atom for atom in self.atoms if isinstance(atom, Stroke))

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(atom for atom in self.atoms if isinstance(atom, Marker))
