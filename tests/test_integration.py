"""End-to-end scenarios through the public entry point."""

from noun_core import Atom, Cell, Error, evaluate, noun


def test_kind_of_error_is_error():
    assert evaluate(Cell(Atom(0), Error)) is Error


def test_kind_of_cell_is_cell():
    assert evaluate(noun(0, 1, 2)) == Atom(1)


def test_kind_of_atom_is_atom():
    assert evaluate(noun(0, 1)) == Atom(0)


def test_referentially_transparent():
    term = noun(4, 5, (0, 1, 9), (1, 9, (4, 7)))
    assert evaluate(term) == evaluate(term)


def test_input_not_mutated():
    operand = noun((1, 2), (3, 4))
    term = Cell(Atom(3), operand)
    evaluate(term)
    assert term == Cell(Atom(3), noun((1, 2), (3, 4)))
    assert term.right is operand


def test_shared_subtree_in_both_branches():
    shared = noun(1, 1)
    # [5 [0 [2 0]]] → 2, [5 [1 [0 [shared shared]]]] → [shared shared], eq → 1
    term = noun(4, 5, (0, 2, 0), (1, 0, Cell(shared, shared)))
    assert evaluate(term) == Atom(1)
