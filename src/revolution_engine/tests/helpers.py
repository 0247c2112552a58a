"""Shared builders for engine tests."""

from dataclasses import replace

from revolution_engine.engine import add_player, create_game, start_game
from revolution_engine.ids import GameId, PlayerId
from revolution_engine.models import Card
from revolution_engine.shuffle import create_deck, sort_by_rank


def pid(i):
    return PlayerId(f"p{i}")


def cards(*ids):
    return [Card.from_id(card_id) for card_id in ids]


def new_game(player_count, config=None):
    state = create_game(GameId("game-1"), pid(0), config)
    for i in range(player_count):
        state = add_player(state, pid(i), f"Player {i}")
    return state


def started_game(player_count, seed=42, config=None):
    return start_game(new_game(player_count, config), seed)


def rig(state, *hands, current=0):
    """Give each seat a known hand; every other card is set aside as undealt."""
    players = tuple(
        replace(player, hand=tuple(cards(*hand)))
        for player, hand in zip(state.players, hands)
    )
    held = {card for player in players for card in player.hand}
    undealt = tuple(card for card in create_deck() if card not in held)
    return replace(
        state,
        players=players,
        undealt=undealt,
        discard_pile=(),
        retired=(),
        history=(),
        last_play=None,
        current_player_index=current,
    )


def lowest_single(hand):
    """Weakest card of a hand that is not a Two."""
    return next(card for card in reversed(sort_by_rank(hand)) if card.rank.value != "2")
