"""
Exchange phase logic for role-based card exchanges.

After a round at a table with vice roles, each lower tier hands its best
cards up to its partner and the partner hands back cards of its choice.
Selections are validated against the hands as dealt and only change hands
once every exchange has been submitted.
"""

from dataclasses import replace
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import ExchangeQuality, RoleTier
from .ids import PlayerId
from .models import Card, PendingExchange, Player
from .ranking import exchange_count, exchange_partner, players_with_role
from .shuffle import remove_cards

# Lower tiers give first in the listing; each pair also gets a return leg.
GIVING_TIERS: Tuple[RoleTier, ...] = (RoleTier.BOTTOM, RoleTier.FOURTH)


def build_pending_exchanges(roles: Mapping[PlayerId, RoleTier]) -> Tuple[PendingExchange, ...]:
    """
    Create the exchanges owed between paired tiers.

    Args:
        roles: Role of every seated player for the coming round

    Returns:
        For each (lower, upper) pair: lower gives its best cards to upper,
        upper gives any cards back
    """
    roles = dict(roles)
    pending: List[PendingExchange] = []
    for lower_tier in GIVING_TIERS:
        upper_tier = exchange_partner(lower_tier)
        lower = players_with_role(roles, lower_tier)
        upper = players_with_role(roles, upper_tier)
        if len(lower) != 1 or len(upper) != 1:
            continue
        count = exchange_count(lower_tier)
        pending.append(PendingExchange(
            from_player=lower[0],
            to_player=upper[0],
            count=count,
            quality=ExchangeQuality.BEST,
        ))
        pending.append(PendingExchange(
            from_player=upper[0],
            to_player=lower[0],
            count=count,
            quality=ExchangeQuality.ANY,
        ))
    return tuple(pending)


def find_open_exchange(
    pending: Sequence[PendingExchange],
    player_id: PlayerId
) -> Optional[int]:
    """Index of the player's uncompleted exchange, if any."""
    for index, exchange in enumerate(pending):
        if exchange.from_player == player_id and not exchange.completed:
            return index
    return None


def record_selection(
    pending: Sequence[PendingExchange],
    index: int,
    cards: Sequence[Card]
) -> Tuple[PendingExchange, ...]:
    updated = list(pending)
    updated[index] = replace(pending[index], completed=True, cards=tuple(cards))
    return tuple(updated)


def apply_exchanges(
    players: Sequence[Player],
    pending: Sequence[PendingExchange]
) -> Tuple[Player, ...]:
    """Move every selected card from its giver to its receiver."""
    given: Dict[PlayerId, List[Card]] = {}
    received: Dict[PlayerId, List[Card]] = {}
    for exchange in pending:
        given.setdefault(exchange.from_player, []).extend(exchange.cards)
        received.setdefault(exchange.to_player, []).extend(exchange.cards)

    result = []
    for player in players:
        hand = remove_cards(player.hand, given.get(player.id, []))
        hand = hand + tuple(received.get(player.id, []))
        result.append(replace(player, hand=hand))
    return tuple(result)


def get_pending_exchange_actions(pending: Sequence[PendingExchange]) -> Dict[PlayerId, PendingExchange]:
    """Open exchange for each player who still owes cards."""
    return {
        exchange.from_player: exchange
        for exchange in pending
        if not exchange.completed
    }
