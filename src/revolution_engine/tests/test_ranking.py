"""
Tests for role assignment, exchange partners and role labels.
"""

import pytest

from revolution_engine.constants import RoleTheme, RoleTier
from revolution_engine.ids import PlayerId
from revolution_engine.labels import THEME_LABELS, label_for, role_label
from revolution_engine.ranking import (
    assign_roles, exchange_count, exchange_partner, has_vice_roles, is_higher_tier,
    players_with_role,
)
from revolution_engine.rules import create_rules


def order(count):
    return [PlayerId(f"p{i}") for i in range(count)]


def test_three_player_roles():
    roles = assign_roles(order(3), 3)
    assert [roles[p] for p in order(3)] == [RoleTier.TOP, RoleTier.MIDDLE, RoleTier.BOTTOM]


def test_four_player_roles():
    roles = assign_roles(order(4), 4)
    assert [roles[p] for p in order(4)] == [
        RoleTier.TOP, RoleTier.MIDDLE, RoleTier.MIDDLE, RoleTier.BOTTOM,
    ]


def test_five_player_roles():
    roles = assign_roles(order(5), 5)
    assert [roles[p] for p in order(5)] == [
        RoleTier.TOP, RoleTier.SECOND, RoleTier.MIDDLE, RoleTier.FOURTH, RoleTier.BOTTOM,
    ]


def test_six_player_roles():
    roles = assign_roles(order(6), 6)
    assert [roles[p] for p in order(6)] == [
        RoleTier.TOP, RoleTier.SECOND, RoleTier.MIDDLE, RoleTier.MIDDLE,
        RoleTier.FOURTH, RoleTier.BOTTOM,
    ]
    assert players_with_role(roles, RoleTier.MIDDLE) == (PlayerId("p2"), PlayerId("p3"))


@pytest.mark.parametrize("count", [0, 1, 2, 7])
def test_unsupported_table_sizes(count):
    assert assign_roles(order(count), count) == {}


def test_order_length_must_match():
    assert assign_roles(order(3), 4) == {}


def test_vice_roles():
    assert not has_vice_roles(3)
    assert not has_vice_roles(4)
    assert has_vice_roles(5)
    assert has_vice_roles(6)


def test_exchange_partners():
    assert exchange_partner(RoleTier.TOP) == RoleTier.BOTTOM
    assert exchange_partner(RoleTier.BOTTOM) == RoleTier.TOP
    assert exchange_partner(RoleTier.SECOND) == RoleTier.FOURTH
    assert exchange_partner(RoleTier.FOURTH) == RoleTier.SECOND
    assert exchange_partner(RoleTier.MIDDLE) is None

    assert exchange_count(RoleTier.TOP) == 2
    assert exchange_count(RoleTier.BOTTOM) == 2
    assert exchange_count(RoleTier.SECOND) == 1
    assert exchange_count(RoleTier.FOURTH) == 1
    assert exchange_count(RoleTier.MIDDLE) == 0


def test_tier_ordering():
    assert is_higher_tier(RoleTier.TOP, RoleTier.SECOND)
    assert is_higher_tier(RoleTier.MIDDLE, RoleTier.FOURTH)
    assert not is_higher_tier(RoleTier.BOTTOM, RoleTier.FOURTH)


def test_every_theme_labels_every_tier():
    for theme in RoleTheme:
        assert set(THEME_LABELS[theme]) == set(RoleTier)


def test_role_labels():
    assert role_label(RoleTier.TOP) == "President"
    assert role_label(RoleTier.BOTTOM, RoleTheme.ROYAL) == "Beggar"
    assert role_label(RoleTier.TOP, RoleTheme.CORPORATE) == "CEO"


def test_custom_labels_override_theme():
    config = create_rules(
        role_theme=RoleTheme.MILITARY,
        custom_role_labels={RoleTier.TOP: "Boss"},
    )
    assert label_for(RoleTier.TOP, config) == "Boss"
    assert label_for(RoleTier.BOTTOM, config) == "Recruit"
    assert label_for(None, config) is None
