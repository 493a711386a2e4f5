"""Unit tests for the zebra domain model."""

import pytest

from src.zebra.model import ATTRIBUTES, DOMAINS, POSITIONS, House, Color, check_attribute


def test_every_domain_has_five_distinct_values():
    for attribute in ATTRIBUTES:
        values = DOMAINS[attribute]
        assert len(values) == 5
        assert len(set(values)) == 5


def test_position_domain_is_one_to_five():
    assert POSITIONS == (1, 2, 3, 4, 5)
    assert DOMAINS["position"] == POSITIONS


def test_attribute_order_starts_with_position():
    assert ATTRIBUTES == ("position", "color", "nationality", "pet", "drink", "cigarette")


def test_partial_house_is_not_complete(known_solution):
    assert not House(position=2, color=Color.BLUE).is_complete()
    assert all(house.is_complete() for house in known_solution)


def test_as_dict_exposes_every_field():
    house = House(position=3, color=Color.RED)
    assert house.as_dict() == {
        "position": 3,
        "color": Color.RED,
        "nationality": None,
        "pet": None,
        "drink": None,
        "cigarette": None,
    }


def test_unknown_attribute_is_rejected():
    with pytest.raises(ValueError):
        check_attribute("roof")
