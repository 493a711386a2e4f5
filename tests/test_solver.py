"""Integration-style tests for the top-level solve interface."""

import pytest

from solver import solve_puzzle
from src.zebra.constraints import ZEBRA_CONSTRAINTS, is_, same_house
from src.zebra.model import Color
from src.zebra.puzzle import ZebraPuzzle


def test_solve_default_puzzle(known_solution):
    assert solve_puzzle() == known_solution


def test_solve_accepts_puzzle_instance(known_solution):
    puzzle = ZebraPuzzle()
    houses = solve_puzzle(puzzle)
    assert houses == known_solution
    assert puzzle.solution is houses


def test_solve_accepts_constraint_list(known_solution):
    assert solve_puzzle(list(ZEBRA_CONSTRAINTS)) == known_solution


def test_solve_small_custom_puzzle():
    houses = solve_puzzle([same_house(is_("position", 2), is_("color", Color.IVORY))])
    assert houses[1].color == Color.IVORY
    assert [h.position for h in houses] == [1, 2, 3, 4, 5]


def test_solve_rejects_other_inputs():
    with pytest.raises(TypeError):
        solve_puzzle({"id": "zebra"})
    with pytest.raises(TypeError):
        solve_puzzle(["not a constraint"])
