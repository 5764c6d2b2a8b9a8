"""noun_core — pure tree-rewriting evaluator for opcode nouns."""

from .build import noun
from .equality import eq, eq_cell
from .errors import NounCoreError, NounTypeError, StepLimitExceeded
from .evaluator import Opcode, evaluate
from .nouns import (
    Atom,
    Cell,
    Error,
    Noun,
    atom_value,
    cell_content,
    kind,
    _ErrorType,
)
from .subtract import sub, sub_cell
from .swap import swap

__all__ = [
    "evaluate",
    "Opcode",
    "Atom",
    "Cell",
    "Error",
    "Noun",
    "atom_value",
    "cell_content",
    "kind",
    "noun",
    "sub",
    "sub_cell",
    "eq",
    "eq_cell",
    "swap",
    "NounCoreError",
    "NounTypeError",
    "StepLimitExceeded",
]
