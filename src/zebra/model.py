"""Zebra puzzle data structures: attribute enums, the House record, errors."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

HOUSE_COUNT = 5
POSITIONS: Tuple[int, ...] = tuple(range(1, HOUSE_COUNT + 1))


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    IVORY = "ivory"
    YELLOW = "yellow"
    BLUE = "blue"


class Nationality(str, Enum):
    ENGLISHMAN = "englishman"
    SPANIARD = "spaniard"
    UKRAINIAN = "ukrainian"
    NORWEGIAN = "norwegian"
    JAPANESE = "japanese"


class Pet(str, Enum):
    DOG = "dog"
    SNAILS = "snails"
    FOX = "fox"
    HORSE = "horse"
    ZEBRA = "zebra"


class Drink(str, Enum):
    COFFEE = "coffee"
    TEA = "tea"
    MILK = "milk"
    ORANGE_JUICE = "orange juice"
    WATER = "water"


class Cigarette(str, Enum):
    OLD_GOLD = "old gold"
    KOOLS = "kools"
    CHESTERFIELD = "chesterfield"
    LUCKY_STRIKE = "lucky strike"
    PARLIAMENT = "parliament"


@dataclass(frozen=True)
class House:
    """
    One house of the row. Fields left as None are not assigned yet; the search
    fills a house in attribute order while checking the clues.
    """

    position: Optional[int] = None
    color: Optional[Color] = None
    nationality: Optional[Nationality] = None
    pet: Optional[Pet] = None
    drink: Optional[Drink] = None
    cigarette: Optional[Cigarette] = None

    def is_complete(self) -> bool:
        return all(getattr(self, name) is not None for name in ATTRIBUTES)

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in ATTRIBUTES}


# Order in which the search fills in a house.
ATTRIBUTES: Tuple[str, ...] = tuple(f.name for f in fields(House))

DOMAINS: Dict[str, Tuple[Any, ...]] = {
    "position": POSITIONS,
    "color": tuple(Color),
    "nationality": tuple(Nationality),
    "pet": tuple(Pet),
    "drink": tuple(Drink),
    "cigarette": tuple(Cigarette),
}


def check_attribute(attribute: str) -> str:
    if attribute not in DOMAINS:
        raise ValueError(
            f"Unknown house attribute {attribute!r}; expected one of {', '.join(ATTRIBUTES)}"
        )
    return attribute


class ZebraError(RuntimeError):
    """Internal consistency failure: the clues or the solver are broken."""


class NoSolutionError(ZebraError):
    """The whole search space was exhausted without an accepted assignment."""


class QueryMatchError(ZebraError):
    """A query over the solved houses did not match exactly one house."""
