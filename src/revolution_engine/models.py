"""Game models and data structures"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .constants import (
    SUIT_SYMBOLS, ConnectionState, ExchangeQuality, Rank, RoleTier, Suit,
)
from .ids import GameId, PlayerId
from .rules import GameConfig


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @classmethod
    def from_id(cls, card_id: str) -> 'Card':
        """Parse ids like ``3D``, ``10H`` or ``AS``."""
        try:
            return cls(Rank(card_id[:-1]), Suit(card_id[-1]))
        except ValueError:
            raise ValueError(f"Invalid card id: {card_id}") from None

    @property
    def id(self) -> str:
        """Compact id such as ``10H`` or ``QS``."""
        return f"{self.rank.value}{self.suit.value}"

    def label(self) -> str:
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Player:
    id: PlayerId
    name: str
    hand: Tuple[Card, ...] = ()
    role: Optional[RoleTier] = None
    finishing_position: Optional[int] = None
    connection: ConnectionState = ConnectionState.CONNECTED
    has_passed: bool = False

    @property
    def is_finished(self) -> bool:
        return self.finishing_position is not None

    @property
    def hand_count(self) -> int:
        return len(self.hand)


@dataclass(frozen=True)
class Play:
    player_id: PlayerId
    cards: Tuple[Card, ...]
    cleared_pile: bool
    timestamp: float

    @property
    def rank(self) -> Rank:
        return self.cards[0].rank

    @property
    def count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class PendingExchange:
    from_player: PlayerId
    to_player: PlayerId
    count: int
    quality: ExchangeQuality
    completed: bool = False
    cards: Tuple[Card, ...] = ()  # giver's selection, moved once every exchange is in


# Game phases. Each phase is its own frozen type; GamePhase is the closed union.

@dataclass(frozen=True)
class WaitingForPlayers:
    name = "waiting_for_players"


@dataclass(frozen=True)
class Playing:
    name = "playing"


@dataclass(frozen=True)
class RoundOver:
    finishing_order: Tuple[PlayerId, ...]
    name = "round_over"


@dataclass(frozen=True)
class CardExchange:
    pending: Tuple[PendingExchange, ...]
    name = "card_exchange"

    @property
    def is_complete(self) -> bool:
        return all(exchange.completed for exchange in self.pending)


@dataclass(frozen=True)
class GameOver:
    final_scores: Tuple[Tuple[PlayerId, int], ...]
    name = "game_over"


GamePhase = Union[WaitingForPlayers, Playing, RoundOver, CardExchange, GameOver]


@dataclass(frozen=True)
class GameState:
    id: GameId
    config: GameConfig
    host_id: PlayerId
    created_at: float = 0.0
    players: Tuple[Player, ...] = ()
    phase: GamePhase = field(default_factory=WaitingForPlayers)
    current_player_index: int = 0
    discard_pile: Tuple[Card, ...] = ()  # cards of the trick in progress
    retired: Tuple[Card, ...] = ()  # cards of cleared tricks
    undealt: Tuple[Card, ...] = ()  # deal remainder
    history: Tuple[Play, ...] = ()  # most recent first
    last_play: Optional[Play] = None
    revolution_active: bool = False
    round_number: int = 0
    scores: Tuple[Tuple[PlayerId, int], ...] = ()  # (player, total) in seat order
    sequence: int = 0  # reserved for idempotent actions

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    def score_of(self, player_id: PlayerId) -> int:
        return next((score for pid, score in self.scores if pid == player_id), 0)
