"""Noun value model: the Error sentinel, atoms and cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import NounTypeError


# ---------------------------------------------------------------------------
# Error: singleton for failed or inapplicable reductions
# ---------------------------------------------------------------------------

class _ErrorType:
    """Sentinel noun returned when a reduction cannot proceed."""

    _instance: _ErrorType | None = None

    def __new__(cls) -> _ErrorType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Error"

    def __bool__(self) -> bool:
        return False


Error = _ErrorType()


# ---------------------------------------------------------------------------
# Atom / Cell
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Atom:
    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid atom
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise NounTypeError(f"atom value must be an int, got {self.value!r}")


@dataclass(frozen=True, slots=True)
class Cell:
    left: Noun
    right: Noun

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if not isinstance(child, (Atom, Cell, _ErrorType)):
                raise NounTypeError(f"cell child must be a noun, got {child!r}")


Noun = Union[Atom, Cell, _ErrorType]


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def atom_value(v: Noun) -> int | None:
    """Return the integer held by an Atom, or ``None`` for anything else."""
    if isinstance(v, Atom):
        return v.value
    return None


def cell_content(v: Noun) -> tuple[Noun, Noun] | None:
    """Return ``(left, right)`` of a Cell, or ``None`` for anything else."""
    if isinstance(v, Cell):
        return v.left, v.right
    return None


def kind(v: Noun) -> Noun:
    """Classify a noun: Error for Error, ``Atom(0)`` for atoms, ``Atom(1)`` for cells."""
    if isinstance(v, Atom):
        return Atom(0)
    if isinstance(v, Cell):
        return Atom(1)
    return Error
