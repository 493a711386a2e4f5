"""Zebra puzzle model, clues, backtracking search and query layer."""

from .model import (
    Cigarette,
    Color,
    Drink,
    House,
    Nationality,
    NoSolutionError,
    Pet,
    QueryMatchError,
    ZebraError,
)
from .constraints import ZEBRA_CONSTRAINTS, Equivalence, RelativePosition, all_satisfied
from .solver_core import SolverConfig, solve
from .puzzle import ZebraPuzzle

__all__ = [
    "Cigarette",
    "Color",
    "Drink",
    "House",
    "Nationality",
    "Pet",
    "ZebraError",
    "NoSolutionError",
    "QueryMatchError",
    "ZEBRA_CONSTRAINTS",
    "Equivalence",
    "RelativePosition",
    "all_satisfied",
    "SolverConfig",
    "solve",
    "ZebraPuzzle",
]
