"""Readable dumps of parsed sketches for the CLI and debugging."""

from __future__ import annotations

from hscpy.sketch.model import Affine, Atom, Element, Marker, Sketch, Stroke


def dump_atom(atom: Atom) -> str:
    match atom:
        case Stroke(diameter=diameter, points=points):
            rendered = " ".join(f"({p.x},{p.y},{p.pressure:.3f})" for p in points)
            return f"Stroke diameter={diameter} points={len(points)} {rendered}".rstrip()
        case Marker(message=message):
            return f"Marker message={message!r}"
        case _:
            raise ValueError(f"Unknown atom: {atom!r}")


def dump_affine(affine: Affine) -> str:
    rows = ["[" + " ".join(f"{value:g}" for value in row) + "]" for row in affine.rows()]
    return "Affine " + " ".join(rows)


def dump_element(element: Element) -> list[str]:
    lines = [f"Element kind={element.kind.value} atoms={len(element.atoms)} modifiers={len(element.modifiers)}"]
    lines.extend(f"  {dump_affine(modifier)}" for modifier in element.modifiers)
    lines.extend(f"  {dump_atom(atom)}" for atom in element.atoms)
    return lines


def dump_sketch(sketch: Sketch) -> list[str]:
    lines = [f"Sketch elements={len(sketch.elements)} atoms={len(sketch.atoms)}"]
    for element in sketch.elements:
        lines.extend(f"  {line}" for line in dump_element(element))
    for atom in sketch.atoms:
        lines.append(f"  {dump_atom(atom)}")
    return lines
