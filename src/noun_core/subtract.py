"""Structural subtraction over nouns."""

from __future__ import annotations

from .nouns import Atom, Cell, Error, Noun


def sub(v: Noun) -> Noun:
    """Negate an atom, or subtract the right side of a cell from the left.

    - Error → Error
    - Atom(a) → Atom(-a)
    - Cell(a, b) → ``sub_cell(a, b)``
    """
    if isinstance(v, Atom):
        return Atom(-v.value)
    if isinstance(v, Cell):
        return sub_cell(v.left, v.right)
    return Error


def sub_cell(a: Noun, b: Noun) -> Noun:
    """Element-wise ``a - b`` over pair trees, broadcasting atoms across cells.

    Equivalent to ``sub(Cell(a, b))``.
    """
    if isinstance(a, Atom) and isinstance(b, Atom):
        return Atom(a.value - b.value)

    # [[a1 a2] c] → [[a1 c] [a2 c]]
    if isinstance(a, Cell) and isinstance(b, Atom):
        return Cell(sub_cell(a.left, b), sub_cell(a.right, b))

    # [c [b1 b2]] → [[c b1] [c b2]]
    if isinstance(a, Atom) and isinstance(b, Cell):
        return Cell(sub_cell(a, b.left), sub_cell(a, b.right))

    # [[a1 a2] [b1 b2]] → [[a1 b1] [a2 b2]]
    if isinstance(a, Cell) and isinstance(b, Cell):
        return Cell(sub_cell(a.left, b.left), sub_cell(a.right, b.right))

    return Error
