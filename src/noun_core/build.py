"""Construction helper: Python ints and tuples → nouns."""

from __future__ import annotations

from .errors import NounTypeError
from .nouns import Atom, Cell, Noun, _ErrorType


def noun(*parts) -> Noun:
    """Build a noun from ints, tuples and existing nouns.

    - ``int`` → Atom
    - existing nouns are shared, not copied
    - ``tuple`` → ``noun(*tuple)``
    - two or more parts are right-associated into cells

    Example::

        noun(5, 0, (7, 8), 9)
        → Cell(Atom(5), Cell(Atom(0), Cell(Cell(Atom(7), Atom(8)), Atom(9))))
    """
    if not parts:
        raise NounTypeError("noun() needs at least one part")

    result = _convert(parts[-1])
    for part in reversed(parts[:-1]):
        result = Cell(_convert(part), result)
    return result


def _convert(part) -> Noun:
    if isinstance(part, (Atom, Cell, _ErrorType)):
        return part
    if isinstance(part, tuple):
        return noun(*part)
    if isinstance(part, int) and not isinstance(part, bool):
        return Atom(part)
    raise NounTypeError(f"cannot build a noun from {part!r}")
