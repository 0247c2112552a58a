"""
Greedy bot implementation with basic heuristics.
"""

from typing import List, Optional

from .base import BaseBot, BotAction
from ..comparator import effective_rank
from ..constants import ExchangeQuality, Rank
from ..models import Card, GameState
from ..shuffle import sort_by_rank


class GreedyBot(BaseBot):
    """
    Greedy bot that sheds its weakest cards first.

    Strategy:
    - Lead the weakest rank, as many copies as held
    - Follow with the weakest rank that beats the table
    - Keep Twos back until nothing else works
    - Hand over the weakest cards allowed during exchange
    """

    def choose_action(self, state: GameState) -> Optional[BotAction]:
        """Choose the best action for the current state."""
        exchange = self.get_pending_exchange(state)
        if exchange is not None:
            return self._choose_exchange(state, exchange.count, exchange.quality)

        if self.is_my_turn(state):
            return self._choose_play_action(state)

        return None

    def _choose_play_action(self, state: GameState) -> BotAction:
        """Choose whether to play cards or pass."""
        valid_plays = self.get_valid_plays(state)

        if not valid_plays:
            return BotAction.pass_turn()

        return BotAction.play(min(valid_plays, key=lambda play: self._score_play(state, play)))

    def _score_play(self, state: GameState, cards: List[Card]):
        """Lower is better: Twos last, then weakest rank, then most cards."""
        rank = cards[0].rank
        return (
            rank == Rank.TWO,
            effective_rank(rank, state.revolution_active),
            -len(cards),
        )

    def _choose_exchange(self, state: GameState, count: int, quality: ExchangeQuality) -> BotAction:
        ordered = sort_by_rank(self.get_player_hand(state), state.revolution_active)
        if quality == ExchangeQuality.BEST:
            return BotAction.exchange(ordered[:count])
        return BotAction.exchange(ordered[len(ordered) - count:])
