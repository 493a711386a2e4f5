"""The zebra puzzle clues as inspectable constraint objects.

Two constraint shapes cover every clue:
- Equivalence: two house conditions that are either both true or both false
  for every house ("the Englishman lives in the red house").
- RelativePosition: every house matching a source condition needs a neighbor
  (at the given position offsets) matching a target condition ("the Norwegian
  lives next to the blue house").

Both are evaluated on partial lists of houses, so the search can reject a
branch before the row is complete.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Sequence, Tuple

from .model import (
    POSITIONS,
    Cigarette,
    Color,
    Drink,
    House,
    Nationality,
    Pet,
    check_attribute,
)


@dataclass(frozen=True)
class Condition:
    """A single-house test: `attribute == value`."""

    attribute: str
    value: Any

    def __post_init__(self) -> None:
        check_attribute(self.attribute)

    def holds(self, house: House) -> bool:
        return getattr(house, self.attribute) == self.value

    def __str__(self) -> str:
        value = self.value.value if isinstance(self.value, Enum) else self.value
        return f"{self.attribute} == {value}"


class Constraint(abc.ABC):
    """Predicate over a (possibly partial) list of houses."""

    description: str = ""

    @property
    @abc.abstractmethod
    def scope(self) -> FrozenSet[str]:
        """House attributes the constraint reads."""

    @abc.abstractmethod
    def is_satisfied(self, houses: Sequence[House]) -> bool:
        ...

    def involves(self, attribute: str) -> bool:
        return attribute in self.scope

    def __str__(self) -> str:
        return self.description or repr(self)


@dataclass(frozen=True)
class Equivalence(Constraint):
    first: Condition
    second: Condition
    description: str = ""

    @property
    def scope(self) -> FrozenSet[str]:
        return frozenset((self.first.attribute, self.second.attribute))

    def is_satisfied(self, houses: Sequence[House]) -> bool:
        return all(self.first.holds(house) == self.second.holds(house) for house in houses)


@dataclass(frozen=True)
class RelativePosition(Constraint):
    source: Condition
    offsets: Tuple[int, ...]
    target: Condition
    description: str = ""

    @property
    def scope(self) -> FrozenSet[str]:
        return frozenset(("position", self.source.attribute, self.target.attribute))

    def neighbors(self, position: int) -> Tuple[int, ...]:
        """Candidate neighbor positions; anything off the row is dropped."""
        candidates = (position + offset for offset in self.offsets)
        return tuple(p for p in candidates if p in POSITIONS)

    def is_satisfied(self, houses: Sequence[House]) -> bool:
        placed = [house for house in houses if house.position is not None]
        by_position: Dict[int, House] = {house.position: house for house in placed}
        for house in placed:
            if not self.source.holds(house):
                continue
            if not any(self._admits(by_position.get(p)) for p in self.neighbors(house.position)):
                return False
        return True

    def _admits(self, neighbor: Optional[House]) -> bool:
        # A position nobody occupies yet can still receive a matching house.
        return neighbor is None or self.target.holds(neighbor)


def is_(attribute: str, value: Any) -> Condition:
    return Condition(attribute, value)


def same_house(first: Condition, second: Condition, description: str = "") -> Equivalence:
    return Equivalence(first, second, description or f"{first} <=> {second}")


def immediately_left_of(source: Condition, target: Condition, description: str = "") -> RelativePosition:
    return RelativePosition(source, (1,), target, description or f"{source} left of {target}")


def next_to(source: Condition, target: Condition, description: str = "") -> RelativePosition:
    return RelativePosition(source, (-1, 1), target, description or f"{source} next to {target}")


def first_violation(constraints: Iterable[Constraint], houses: Sequence[House]) -> Optional[Constraint]:
    for constraint in constraints:
        if not constraint.is_satisfied(houses):
            return constraint
    return None


def all_satisfied(constraints: Iterable[Constraint], houses: Sequence[House]) -> bool:
    """Check whether every constraint holds for the current (partial) row."""
    return first_violation(constraints, houses) is None


ZEBRA_CONSTRAINTS: Tuple[Constraint, ...] = (
    same_house(
        is_("nationality", Nationality.ENGLISHMAN),
        is_("color", Color.RED),
        "The Englishman lives in the red house.",
    ),
    same_house(
        is_("nationality", Nationality.SPANIARD),
        is_("pet", Pet.DOG),
        "The Spaniard owns the dog.",
    ),
    same_house(
        is_("drink", Drink.COFFEE),
        is_("color", Color.GREEN),
        "Coffee is drunk in the green house.",
    ),
    same_house(
        is_("nationality", Nationality.UKRAINIAN),
        is_("drink", Drink.TEA),
        "The Ukrainian drinks tea.",
    ),
    immediately_left_of(
        is_("color", Color.IVORY),
        is_("color", Color.GREEN),
        "The green house is immediately to the right of the ivory house.",
    ),
    same_house(
        is_("cigarette", Cigarette.OLD_GOLD),
        is_("pet", Pet.SNAILS),
        "The Old Gold smoker owns snails.",
    ),
    same_house(
        is_("cigarette", Cigarette.KOOLS),
        is_("color", Color.YELLOW),
        "Kools are smoked in the yellow house.",
    ),
    same_house(
        is_("position", 3),
        is_("drink", Drink.MILK),
        "Milk is drunk in the middle house.",
    ),
    same_house(
        is_("nationality", Nationality.NORWEGIAN),
        is_("position", 1),
        "The Norwegian lives in the first house.",
    ),
    next_to(
        is_("cigarette", Cigarette.CHESTERFIELD),
        is_("pet", Pet.FOX),
        "The man who smokes Chesterfields lives in the house next to the man with the fox.",
    ),
    next_to(
        is_("cigarette", Cigarette.KOOLS),
        is_("pet", Pet.HORSE),
        "Kools are smoked in the house next to the house where the horse is kept.",
    ),
    same_house(
        is_("cigarette", Cigarette.LUCKY_STRIKE),
        is_("drink", Drink.ORANGE_JUICE),
        "The Lucky Strike smoker drinks orange juice.",
    ),
    same_house(
        is_("nationality", Nationality.JAPANESE),
        is_("cigarette", Cigarette.PARLIAMENT),
        "The Japanese smokes Parliaments.",
    ),
    next_to(
        is_("nationality", Nationality.NORWEGIAN),
        is_("color", Color.BLUE),
        "The Norwegian lives next to the blue house.",
    ),
)
