# src/revolution_engine/ranking.py

from typing import Dict, Optional, Sequence, Tuple

from .constants import EXCHANGE_COUNTS, RoleTier
from .ids import PlayerId

ROLE_TABLES: Dict[int, Tuple[RoleTier, ...]] = {
    3: (RoleTier.TOP, RoleTier.MIDDLE, RoleTier.BOTTOM),
    4: (RoleTier.TOP, RoleTier.MIDDLE, RoleTier.MIDDLE, RoleTier.BOTTOM),
    5: (RoleTier.TOP, RoleTier.SECOND, RoleTier.MIDDLE, RoleTier.FOURTH, RoleTier.BOTTOM),
    6: (RoleTier.TOP, RoleTier.SECOND, RoleTier.MIDDLE, RoleTier.MIDDLE,
        RoleTier.FOURTH, RoleTier.BOTTOM),
}

EXCHANGE_PARTNERS: Dict[RoleTier, RoleTier] = {
    RoleTier.TOP: RoleTier.BOTTOM,
    RoleTier.BOTTOM: RoleTier.TOP,
    RoleTier.SECOND: RoleTier.FOURTH,
    RoleTier.FOURTH: RoleTier.SECOND,
}


def role_table(player_count: int) -> Tuple[RoleTier, ...]:
    """Roles by finishing position for a table size; empty when unsupported."""
    return ROLE_TABLES.get(player_count, ())


def assign_roles(finishing_order: Sequence[PlayerId], player_count: int) -> Dict[PlayerId, RoleTier]:
    """
    Map each player in the finishing order to a role tier.

    Args:
        finishing_order: Player ids, first to empty their hand first
        player_count: Number of seated players

    Returns:
        player id -> tier, or an empty mapping for unsupported table sizes
    """
    roles = role_table(player_count)
    if not roles or len(finishing_order) != player_count:
        return {}
    return dict(zip(finishing_order, roles))


def has_vice_roles(player_count: int) -> bool:
    """Second and Fourth exist only at tables of five or more."""
    return player_count >= 5


def exchange_partner(tier: RoleTier) -> Optional[RoleTier]:
    return EXCHANGE_PARTNERS.get(tier)


def exchange_count(tier: RoleTier) -> int:
    return EXCHANGE_COUNTS[tier]


def is_higher_tier(tier_a: RoleTier, tier_b: RoleTier) -> bool:
    return tier_a > tier_b


def players_with_role(roles: Dict[PlayerId, RoleTier], tier: RoleTier) -> Tuple[PlayerId, ...]:
    return tuple(player_id for player_id, role in roles.items() if role == tier)
