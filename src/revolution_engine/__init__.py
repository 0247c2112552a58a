"""Rules engine for the Revolution (President) climbing card game."""

from .constants import ConnectionState, ExchangeQuality, Rank, RoleTheme, RoleTier, Suit
from .engine import (
    add_player, create_game, pass_turn, play_cards, start_game, start_next_round,
    submit_exchange, validate_card_conservation,
)
from .errors import GameError, Severity
from .ids import GameId, PlayerId, SessionId
from .models import (
    Card, CardExchange, GameOver, GamePhase, GameState, PendingExchange, Play, Player,
    Playing, RoundOver, WaitingForPlayers,
)
from .rules import GameConfig, create_rules, default_rules

__version__ = "1.0.0"
