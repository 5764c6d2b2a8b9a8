"""Evaluator: opcode dispatch of ``Cell(opcode, operand)`` → Noun."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .equality import eq
from .errors import StepLimitExceeded
from .nouns import Cell, Error, Noun, atom_value, cell_content, kind
from .subtract import sub
from .swap import swap


class Opcode(IntEnum):
    KIND = 0
    SUB = 1
    EQ = 2
    SWAP = 3
    COMPOSE = 4
    SELECT = 5


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(v: Noun, *, step_limit: int | None = None) -> Noun:
    """Reduce ``Cell(opcode, operand)`` and return the result noun.

    Never raises for a well-formed noun: anything that cannot be reduced,
    including running out of *step_limit* dispatch steps or out of native
    recursion depth, comes back as ``Error``.
    """
    if step_limit is not None and (
        not isinstance(step_limit, int) or isinstance(step_limit, bool) or step_limit < 1
    ):
        raise ValueError(f"step_limit must be a positive int, got {step_limit!r}")

    budget = _Budget(limit=step_limit)
    try:
        return _eval(v, budget)
    except StepLimitExceeded:
        return Error
    except RecursionError:
        return Error


# ---------------------------------------------------------------------------
# Step accounting
# ---------------------------------------------------------------------------

@dataclass
class _Budget:
    """Counts dispatch steps for one top-level evaluate() call."""

    limit: int | None = None
    steps: int = 0

    def charge(self) -> None:
        self.steps += 1
        if self.limit is not None and self.steps > self.limit:
            raise StepLimitExceeded(self.limit)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _eval(v: Noun, budget: _Budget) -> Noun:
    pair = cell_content(v)
    if pair is None:
        return Error
    budget.charge()

    opcode, operand = pair
    op = atom_value(opcode)
    if op is None:
        return Error

    if op == Opcode.KIND:
        return kind(operand)
    if op == Opcode.SUB:
        return sub(operand)
    if op == Opcode.EQ:
        return eq(operand)
    if op == Opcode.SWAP:
        return swap(operand)
    if op == Opcode.COMPOSE:
        return _eval_compose(operand, budget)
    if op == Opcode.SELECT:
        return _eval_select(operand)
    return Error


def _split_operand(operand: Noun) -> tuple[Noun, Noun, Noun] | None:
    """Unpack ``Cell(head, Cell(x, y))`` into ``(head, x, y)``."""
    outer = cell_content(operand)
    if outer is None:
        return None
    head, tail = outer
    inner = cell_content(tail)
    if inner is None:
        return None
    return head, inner[0], inner[1]


# ---------------------------------------------------------------------------
# Composite operations
# ---------------------------------------------------------------------------

def _eval_compose(operand: Noun, budget: _Budget) -> Noun:
    """[f [x y]] → eval [eval [f x] eval [f y]]"""
    parts = _split_operand(operand)
    if parts is None:
        return Error
    f, x, y = parts
    fx = _eval(Cell(f, x), budget)
    fy = _eval(Cell(f, y), budget)
    return _eval(Cell(fx, fy), budget)


def _eval_select(operand: Noun) -> Noun:
    """[0 [b c]] → b,  [1 [b c]] → c.  The selector is not evaluated."""
    parts = _split_operand(operand)
    if parts is None:
        return Error
    selector, b, c = parts
    index = atom_value(selector)
    if index == 0:
        return b
    if index == 1:
        return c
    return Error
