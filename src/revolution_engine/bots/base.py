"""
Base bot interface and utilities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..engine import find_player, is_leading_trick, pass_turn, play_cards, submit_exchange
from ..exchange import get_pending_exchange_actions
from ..ids import PlayerId
from ..models import Card, CardExchange, GameState, PendingExchange, Playing
from ..shuffle import group_by_rank
from ..validate import validate_play


class BotAction:
    """Represents a bot action."""

    def __init__(self, action_type: str, cards: Sequence[Card] = ()):
        self.type = action_type
        self.cards = tuple(cards)

    @classmethod
    def play(cls, cards: Sequence[Card]) -> 'BotAction':
        """Create a play action."""
        return cls('play', cards)

    @classmethod
    def pass_turn(cls) -> 'BotAction':
        """Create a pass action."""
        return cls('pass')

    @classmethod
    def exchange(cls, cards: Sequence[Card]) -> 'BotAction':
        """Create an exchange action."""
        return cls('exchange', cards)

    def __repr__(self) -> str:
        return f"BotAction({self.type!r}, {[card.id for card in self.cards]})"


class BaseBot(ABC):
    """Abstract base class for bot players."""

    def __init__(self, player_id: PlayerId):
        self.player_id = player_id

    @abstractmethod
    def choose_action(self, state: GameState) -> Optional[BotAction]:
        """
        Choose an action based on the current game state.

        Returns:
            BotAction to take, or None if no action needed
        """
        pass

    def get_player_hand(self, state: GameState) -> List[Card]:
        """Get this bot's current hand."""
        player = find_player(state, self.player_id)
        return list(player.hand) if player else []

    def is_my_turn(self, state: GameState) -> bool:
        """Check if it's this bot's turn."""
        if not isinstance(state.phase, Playing):
            return False
        current = state.current_player
        return current is not None and current.id == self.player_id

    def get_pending_exchange(self, state: GameState) -> Optional[PendingExchange]:
        """Exchange this bot still owes, if any."""
        if not isinstance(state.phase, CardExchange):
            return None
        return get_pending_exchange_actions(state.phase.pending).get(self.player_id)

    def get_valid_plays(self, state: GameState) -> List[List[Card]]:
        """
        Get all valid plays this bot can make: for each rank held, every
        count when leading, or the required count when following. Twos may
        always be played singly.
        """
        hand = self.get_player_hand(state)
        if not hand:
            return []

        valid_plays = []
        for cards in group_by_rank(hand).values():
            if is_leading_trick(state):
                counts = range(1, len(cards) + 1)
            else:
                counts = sorted({state.last_play.count, 1})
            for count in counts:
                candidate = cards[:count]
                if len(candidate) == count and validate_play(
                    candidate, state.last_play, state.revolution_active
                ).valid:
                    valid_plays.append(candidate)

        return valid_plays


def apply_action(state: GameState, player_id: PlayerId, action: BotAction, now: float = 0.0) -> GameState:
    """Run a bot's chosen action through the engine."""
    if action.type == 'play':
        return play_cards(state, player_id, action.cards, now)
    if action.type == 'pass':
        return pass_turn(state, player_id)
    if action.type == 'exchange':
        return submit_exchange(state, player_id, action.cards)
    raise ValueError(f"Unknown bot action: {action.type}")
