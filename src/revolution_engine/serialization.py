"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, List, Optional

import orjson

from .ids import PlayerId
from .labels import label_for
from .models import CardExchange, GameOver, GamePhase, GameState, PendingExchange, Play, RoundOver


def sanitize_state(state: GameState, viewer_id: Optional[PlayerId] = None) -> Dict[str, Any]:
    """
    Sanitize game state for transmission to clients.

    Args:
        state: Game state to sanitize
        viewer_id: ID of the player viewing the state (to show their cards)

    Returns:
        Sanitized state dictionary safe for JSON transmission
    """
    current = state.current_player
    sanitized = {
        "id": str(state.id),
        "host_id": str(state.host_id),
        "phase": _serialize_phase(state.phase, viewer_id),
        "round_number": state.round_number,
        "turn": str(current.id) if current else None,
        "revolution_active": state.revolution_active,
        "last_play": _serialize_play(state.last_play) if state.last_play else None,
        "discard_pile": [card.id for card in state.discard_pile],
        "history": [_serialize_play(play) for play in state.history],
        "scores": {str(player_id): score for player_id, score in state.scores},
        "players": {},
        "rules": _serialize_rule_config(state),
    }

    for seat, player in enumerate(state.players):
        sanitized_player = {
            "id": str(player.id),
            "name": player.name,
            "seat": seat,
            "role": player.role.name.lower() if player.role else None,
            "role_label": label_for(player.role, state.config),
            "finishing_position": player.finishing_position,
            "passed": player.has_passed,
            "connection": player.connection.value,
            "hand_count": player.hand_count,
        }

        # Show full hand only to the viewer
        if viewer_id is not None and player.id == viewer_id:
            sanitized_player["hand"] = [card.id for card in player.hand]

        sanitized["players"][str(player.id)] = sanitized_player

    return sanitized


def dumps_state(state: GameState, viewer_id: Optional[PlayerId] = None) -> bytes:
    """JSON-encode the sanitized view of a state."""
    return orjson.dumps(sanitize_state(state, viewer_id), option=orjson.OPT_NON_STR_KEYS)


def _serialize_play(play: Play) -> Dict[str, Any]:
    return {
        "player_id": str(play.player_id),
        "cards": [card.id for card in play.cards],
        "cleared_pile": play.cleared_pile,
        "timestamp": play.timestamp,
    }


def _serialize_exchange(exchange: PendingExchange, viewer_id: Optional[PlayerId]) -> Dict[str, Any]:
    serialized = {
        "from": str(exchange.from_player),
        "to": str(exchange.to_player),
        "count": exchange.count,
        "quality": exchange.quality.value,
        "completed": exchange.completed,
    }
    # The giver sees their own selection; everyone else only that it happened.
    if viewer_id is not None and exchange.from_player == viewer_id:
        serialized["cards"] = [card.id for card in exchange.cards]
    return serialized


def _serialize_phase(phase: GamePhase, viewer_id: Optional[PlayerId]) -> Dict[str, Any]:
    serialized: Dict[str, Any] = {"name": phase.name}
    if isinstance(phase, RoundOver):
        serialized["finishing_order"] = [str(pid) for pid in phase.finishing_order]
    elif isinstance(phase, CardExchange):
        serialized["pending"] = [_serialize_exchange(e, viewer_id) for e in phase.pending]
    elif isinstance(phase, GameOver):
        serialized["final_scores"] = {str(pid): score for pid, score in phase.final_scores}
    return serialized


def _serialize_rule_config(state: GameState) -> Dict[str, Any]:
    """Serialize rule configuration."""
    return state.config.model_dump(mode="json")


def serialize_player_for_list(state: GameState) -> List[Dict[str, Any]]:
    """Lobby listing of seated players."""
    return [
        {
            "id": str(player.id),
            "name": player.name,
            "seat": seat,
            "connection": player.connection.value,
        }
        for seat, player in enumerate(state.players)
    ]


def get_public_game_info(state: GameState) -> Dict[str, Any]:
    """Get public information about a game for listings."""
    return {
        "id": str(state.id),
        "phase": state.phase.name,
        "player_count": state.player_count,
        "max_players": state.config.max_players,
        "players": serialize_player_for_list(state),
    }
