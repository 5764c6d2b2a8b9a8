"""Structural swap."""

from __future__ import annotations

from .nouns import Cell, Noun


def swap(v: Noun) -> Noun:
    """Exchange the children of a cell; atoms and Error are returned as-is."""
    if isinstance(v, Cell):
        return Cell(v.right, v.left)
    return v
