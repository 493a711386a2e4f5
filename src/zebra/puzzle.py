"""Query layer over the solved zebra puzzle."""

from typing import Any, Optional, Sequence

from . import solver_core
from .constraints import ZEBRA_CONSTRAINTS, Constraint
from .model import Drink, House, Nationality, Pet, QueryMatchError, check_attribute
from .solver_core import Houses, SolverConfig
from src.utils.trace import Tracer


class ZebraPuzzle:
    """
    A puzzle instance: a fixed constraint set plus the row that satisfies it.
    The row is computed on the first query and kept for the life of the instance.
    Search steps are only recorded when a tracer is passed in.
    """

    def __init__(
        self,
        constraints: Sequence[Constraint] = ZEBRA_CONSTRAINTS,
        config: Optional[SolverConfig] = None,
        tracer: Optional[Tracer] = None,
    ) -> None:
        self.constraints = tuple(constraints)
        self.config = config or SolverConfig()
        self.tracer = tracer or Tracer(enabled=False)
        self._solution: Optional[Houses] = None

    def solve(self) -> Houses:
        if self._solution is None:
            self._solution = solver_core.solve(self.constraints, self.config, self.tracer)
        return self._solution

    @property
    def solution(self) -> Houses:
        return self.solve()

    def count_solutions(self) -> int:
        return len(solver_core.enumerate_solutions(self.constraints, self.config))

    def house_with(self, attribute: str, value: Any) -> House:
        check_attribute(attribute)
        matches = [house for house in self.solve() if getattr(house, attribute) == value]
        if len(matches) != 1:
            raise QueryMatchError(
                f"Expected exactly one house with {attribute} == {value!r}, found {len(matches)}"
            )
        return matches[0]

    def nationality_with_drink(self, drink: Drink) -> Nationality:
        return self.house_with("drink", drink).nationality

    def nationality_with_pet(self, pet: Pet) -> Nationality:
        return self.house_with("pet", pet).nationality

    def drinks_water(self) -> Nationality:
        return self.nationality_with_drink(Drink.WATER)

    def owns_zebra(self) -> Nationality:
        return self.nationality_with_pet(Pet.ZEBRA)
