"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts nothing (the classic puzzle), a
`ZebraPuzzle`, or a sequence of constraints to solve the five-house row against.
"""

from typing import Any, Tuple

from src.zebra.constraints import Constraint
from src.zebra.model import House
from src.zebra.puzzle import ZebraPuzzle


def solve_puzzle(puzzle: Any = None) -> Tuple[House, ...]:
    """
    Solve a puzzle and return its houses ordered by position.
    Accepts:
      - None (the classic fourteen-clue puzzle)
      - ZebraPuzzle instances (used directly; their cached row is reused)
      - Lists or tuples of Constraint objects
    """
    if puzzle is None:
        puzzle = ZebraPuzzle()
    elif isinstance(puzzle, (list, tuple)) and all(isinstance(c, Constraint) for c in puzzle):
        puzzle = ZebraPuzzle(puzzle)
    elif not isinstance(puzzle, ZebraPuzzle):
        raise TypeError("solve_puzzle expects a ZebraPuzzle instance or a sequence of constraints")

    return puzzle.solve()


__all__ = ["solve_puzzle"]
