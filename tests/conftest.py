import pytest

from src.zebra.model import Cigarette, Color, Drink, House, Nationality, Pet


@pytest.fixture
def known_solution():
    """The published answer to the five-house puzzle, ordered by position."""
    return (
        House(1, Color.YELLOW, Nationality.NORWEGIAN, Pet.FOX, Drink.WATER, Cigarette.KOOLS),
        House(2, Color.BLUE, Nationality.UKRAINIAN, Pet.HORSE, Drink.TEA, Cigarette.CHESTERFIELD),
        House(3, Color.RED, Nationality.ENGLISHMAN, Pet.SNAILS, Drink.MILK, Cigarette.OLD_GOLD),
        House(4, Color.IVORY, Nationality.SPANIARD, Pet.DOG, Drink.ORANGE_JUICE, Cigarette.LUCKY_STRIKE),
        House(5, Color.GREEN, Nationality.JAPANESE, Pet.ZEBRA, Drink.COFFEE, Cigarette.PARLIAMENT),
    )
