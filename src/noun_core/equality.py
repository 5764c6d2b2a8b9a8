"""Structural equality over nouns, producing a noun rather than a bool."""

from __future__ import annotations

from .nouns import Atom, Cell, Error, Noun


def eq(v: Noun) -> Noun:
    """Compare the two sides of a cell.

    Error and bare atoms have nothing to compare and give Error.
    """
    if isinstance(v, Cell):
        return eq_cell(v.left, v.right)
    return Error


def eq_cell(a: Noun, b: Noun) -> Noun:
    if isinstance(a, Atom) and isinstance(b, Atom):
        return Atom(1 if a.value == b.value else 0)

    # The two sub-results are compared with each other, not conjoined:
    # [[1 2] [3 4]] gives eq_cell(0, 0) → 1.
    if isinstance(a, Cell) and isinstance(b, Cell):
        return eq_cell(eq_cell(a.left, b.left), eq_cell(a.right, b.right))

    return Atom(0)
