"""Game engine: the state machine driving a Revolution game.

Every operation takes a ``GameState`` and returns a new one. Checks run
before anything is built, so a rejected action raises a ``GameError`` and
leaves no trace.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from .constants import RoleTier
from .errors import (
    CannotPassNow, CardsNotInHand, DuplicateAction, GameFull, InvalidExchange,
    InvalidCardCount, InvalidPlay, NotYourTurn, PlayerNotFound, WrongPhase,
)
from .exchange import apply_exchanges, build_pending_exchanges, find_open_exchange, record_selection
from .ids import GameId, PlayerId
from .models import (
    Card, CardExchange, GameOver, GameState, Play, Player, Playing, RoundOver,
    WaitingForPlayers,
)
from .ranking import assign_roles, has_vice_roles
from .rules import GameConfig, default_rules
from .shuffle import (
    Shuffler, create_deck, deal_cards, missing_cards, remove_cards, shuffle, validate_deck,
)
from .validate import can_pass, clears_pile, triggers_revolution, validate_exchange, validate_play

logger = logging.getLogger(__name__)


# Queries

def seat_of(state: GameState, player_id: PlayerId) -> Optional[int]:
    for seat, player in enumerate(state.players):
        if player.id == player_id:
            return seat
    return None


def find_player(state: GameState, player_id: PlayerId) -> Optional[Player]:
    seat = seat_of(state, player_id)
    return state.players[seat] if seat is not None else None


def current_player(state: GameState) -> Optional[Player]:
    return state.current_player


def is_leading_trick(state: GameState) -> bool:
    """True when nothing is on the table to beat."""
    return state.last_play is None


def active_players(state: GameState) -> List[Player]:
    """Players still holding cards this round."""
    return [player for player in state.players if not player.is_finished]


def finishing_order(state: GameState) -> Tuple[PlayerId, ...]:
    finished = [player for player in state.players if player.is_finished]
    finished.sort(key=lambda p: p.finishing_position)
    return tuple(player.id for player in finished)


def validate_card_conservation(state: GameState) -> bool:
    """
    Every card of the deck is held exactly once: in a hand, on the table,
    in a cleared trick, or set aside at the deal. False before the first deal.
    """
    cards: List[Card] = []
    for player in state.players:
        cards.extend(player.hand)
    cards.extend(state.discard_pile)
    cards.extend(state.retired)
    cards.extend(state.undealt)
    return validate_deck(cards)


# Internal helpers

def _require_phase(state: GameState, phase_type) -> None:
    if not isinstance(state.phase, phase_type):
        raise WrongPhase(phase_type.name, state.phase.name)


def _require_seat(state: GameState, player_id: PlayerId) -> int:
    seat = seat_of(state, player_id)
    if seat is None:
        raise PlayerNotFound(player_id)
    return seat


def _require_turn(state: GameState, player_id: PlayerId) -> int:
    seat = _require_seat(state, player_id)
    if seat != state.current_player_index:
        raise NotYourTurn()
    return seat


def _replace_seat(players: Tuple[Player, ...], seat: int, player: Player) -> Tuple[Player, ...]:
    return players[:seat] + (player,) + players[seat + 1:]


def _clear_passes(players: Sequence[Player]) -> Tuple[Player, ...]:
    return tuple(replace(p, has_passed=False) if p.has_passed else p for p in players)


def _next_active_seat(players: Sequence[Player], seat: int) -> int:
    """Next seat clockwise whose player still holds cards; finished seats are skipped."""
    count = len(players)
    for step in range(1, count + 1):
        candidate = (seat + step) % count
        if not players[candidate].is_finished:
            return candidate
    return seat


def _finished_count(players: Sequence[Player]) -> int:
    return sum(1 for player in players if player.is_finished)


def _deal(players: Sequence[Player], seed: int, shuffler: Optional[Shuffler]):
    deck = shuffle(create_deck(), seed, shuffler)
    return deal_cards(deck, players)


def _score_table(state: GameState) -> Tuple[Tuple[PlayerId, int], ...]:
    return tuple((player.id, state.score_of(player.id)) for player in state.players)


def _end_round(state: GameState) -> GameState:
    """Finish the last player holding cards and move to RoundOver."""
    players = state.players
    position = _finished_count(players)
    for seat, player in enumerate(players):
        if not player.is_finished:
            position += 1
            players = _replace_seat(players, seat, replace(player, finishing_position=position))
            logger.info(f"Game {state.id}: {player.name} finished last (position {position})")

    finished = replace(state, players=players)
    order = finishing_order(finished)

    # Top gets player_count - 1 points, Bottom gets none.
    scores = tuple(
        (player.id, state.score_of(player.id) + len(players) - player.finishing_position)
        for player in players
    )

    logger.info(f"Game {state.id}: round {state.round_number} over, order {[str(pid) for pid in order]}")
    return replace(finished, phase=RoundOver(finishing_order=order), scores=scores)


# Transitions

def create_game(
    game_id: GameId,
    host_id: PlayerId,
    config: Optional[GameConfig] = None,
    now: float = 0.0
) -> GameState:
    """Create a game waiting for players."""
    return GameState(
        id=game_id,
        config=config or default_rules,
        host_id=host_id,
        created_at=now,
    )


def add_player(state: GameState, player_id: PlayerId, name: str) -> GameState:
    """Seat a new player; join order fixes turn order."""
    _require_phase(state, WaitingForPlayers)
    if seat_of(state, player_id) is not None:
        raise DuplicateAction(f"join:{player_id}")
    if len(state.players) >= state.config.max_players:
        raise GameFull()

    player = Player(id=player_id, name=name)
    logger.debug(f"Game {state.id}: {name} ({player_id}) took seat {len(state.players)}")
    return replace(state, players=state.players + (player,), scores=state.scores + ((player_id, 0),))


def start_game(state: GameState, seed: int, shuffler: Optional[Shuffler] = None) -> GameState:
    """Deal the first round. Seat 0 leads."""
    _require_phase(state, WaitingForPlayers)
    if len(state.players) < state.config.min_players:
        raise InvalidPlay(f"Need at least {state.config.min_players} players to start")

    players, undealt = _deal(state.players, seed, shuffler)
    logger.info(f"Game {state.id}: started with {len(players)} players (seed {seed})")
    return replace(
        state,
        players=players,
        undealt=undealt,
        phase=Playing(),
        current_player_index=0,
        discard_pile=(),
        retired=(),
        history=(),
        last_play=None,
        revolution_active=False,
        round_number=1,
    )


def play_cards(
    state: GameState,
    player_id: PlayerId,
    cards: Sequence[Card],
    now: float = 0.0
) -> GameState:
    """
    Play cards from the current player's hand.

    A clearing play (Twos or four of a kind) retires the pile and resets
    every pass, but still stands as the play to beat. The turn always moves
    to the next seat still holding cards.
    """
    _require_phase(state, Playing)
    seat = _require_turn(state, player_id)
    cards = tuple(cards)
    player = state.players[seat]

    missing = missing_cards(player.hand, cards)
    if missing:
        raise CardsNotInHand(missing)
    validate_play(cards, state.last_play, state.revolution_active).raise_for_error()

    cleared = clears_pile(cards)
    play = Play(player_id=player_id, cards=cards, cleared_pile=cleared, timestamp=now)
    hand = remove_cards(player.hand, cards)

    position = player.finishing_position
    if not hand:
        position = _finished_count(state.players) + 1
    players = _replace_seat(
        state.players,
        seat,
        replace(player, hand=hand, has_passed=False, finishing_position=position),
    )

    revolution_active = state.revolution_active
    if state.config.revolution_enabled and triggers_revolution(cards):
        revolution_active = not revolution_active
        logger.info(f"Game {state.id}: revolution {'on' if revolution_active else 'off'}")

    if cleared:
        discard_pile = ()
        retired = state.retired + state.discard_pile + cards
        players = _clear_passes(players)
    else:
        discard_pile = state.discard_pile + cards
        retired = state.retired

    logger.debug(f"Game {state.id}: {player.name} played {' '.join(card.id for card in cards)}")
    new_state = replace(
        state,
        players=players,
        discard_pile=discard_pile,
        retired=retired,
        history=(play,) + state.history,
        last_play=play,
        revolution_active=revolution_active,
    )

    if not hand:
        logger.info(f"Game {state.id}: {player.name} finished in position {position}")
        if len(active_players(new_state)) <= 1:
            return _end_round(new_state)

    return replace(new_state, current_player_index=_next_active_seat(players, seat))


def pass_turn(state: GameState, player_id: PlayerId) -> GameState:
    """
    Pass on the current trick. Once every other player still in the round
    has passed, the author of the last play wins the trick and leads.
    """
    _require_phase(state, Playing)
    seat = _require_turn(state, player_id)
    if not can_pass(is_leading_trick(state)):
        raise CannotPassNow()

    player = state.players[seat]
    players = _replace_seat(state.players, seat, replace(player, has_passed=True))
    logger.debug(f"Game {state.id}: {player.name} passed")

    author = seat_of(state, state.last_play.player_id)
    contenders = [p for i, p in enumerate(players) if i != author and not p.is_finished]
    if all(p.has_passed for p in contenders):
        players = _clear_passes(players)
        if players[author].is_finished:
            leader = _next_active_seat(players, author)
        else:
            leader = author
        logger.debug(f"Game {state.id}: trick won by {players[author].name}, {players[leader].name} leads")
        return replace(
            state,
            players=players,
            discard_pile=(),
            retired=state.retired + state.discard_pile,
            last_play=None,
            current_player_index=leader,
        )

    return replace(state, players=players, current_player_index=_next_active_seat(players, seat))


def start_next_round(state: GameState, seed: int, shuffler: Optional[Shuffler] = None) -> GameState:
    """
    Assign roles from the finished round and deal the next one.

    The Top leads. Tables with vice roles go through the card exchange first.
    When the configured number of rounds has been played the game ends instead.
    """
    _require_phase(state, RoundOver)
    if state.config.is_final_round(state.round_number):
        logger.info(f"Game {state.id}: over after {state.round_number} rounds")
        return replace(state, phase=GameOver(final_scores=_score_table(state)))

    player_count = len(state.players)
    roles = assign_roles(state.phase.finishing_order, player_count)
    ranked = tuple(replace(p, role=roles.get(p.id)) for p in state.players)
    players, undealt = _deal(ranked, seed, shuffler)

    top_seat = next((seat for seat, p in enumerate(players) if p.role == RoleTier.TOP), 0)
    if has_vice_roles(player_count):
        phase = CardExchange(pending=build_pending_exchanges(roles))
    else:
        phase = Playing()

    logger.info(f"Game {state.id}: round {state.round_number + 1} dealt, entering {phase.name}")
    return replace(
        state,
        players=players,
        undealt=undealt,
        phase=phase,
        current_player_index=top_seat,
        discard_pile=(),
        retired=(),
        history=(),
        last_play=None,
        revolution_active=False,
        round_number=state.round_number + 1,
    )


def submit_exchange(state: GameState, player_id: PlayerId, cards: Sequence[Card]) -> GameState:
    """
    Submit the cards a player owes in the exchange phase. Once every exchange
    is in, cards change hands and play begins.
    """
    _require_phase(state, CardExchange)
    seat = _require_seat(state, player_id)
    pending = state.phase.pending

    index = find_open_exchange(pending, player_id)
    if index is None:
        raise InvalidExchange("No exchange pending for this player")
    exchange = pending[index]

    cards = tuple(cards)
    if len(cards) != exchange.count:
        raise InvalidCardCount(exchange.count, len(cards))
    validate_exchange(
        cards, exchange.quality, state.players[seat].hand, state.revolution_active
    ).raise_for_error()

    pending = record_selection(pending, index, cards)
    logger.debug(f"Game {state.id}: {state.players[seat].name} submitted {len(cards)} exchange cards")
    if all(exchange.completed for exchange in pending):
        logger.info(f"Game {state.id}: card exchange complete")
        return replace(state, players=apply_exchanges(state.players, pending), phase=Playing())
    return replace(state, phase=CardExchange(pending=pending))
