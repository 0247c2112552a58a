"""
Game rule configuration and validation.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DECK_SIZE, MAX_SUPPORTED_PLAYERS, MIN_SUPPORTED_PLAYERS, RoleTheme, RoleTier,
)


class GameConfig(BaseModel):
    """Configuration for game rules and settings."""

    model_config = ConfigDict(frozen=True)

    min_players: int = Field(
        default=MIN_SUPPORTED_PLAYERS,
        ge=MIN_SUPPORTED_PLAYERS,
        le=MAX_SUPPORTED_PLAYERS,
        description="Minimum number of players required to start"
    )
    max_players: int = Field(
        default=MAX_SUPPORTED_PLAYERS,
        ge=MIN_SUPPORTED_PLAYERS,
        le=MAX_SUPPORTED_PLAYERS,
        description="Maximum number of players allowed"
    )
    include_jokers: bool = Field(
        default=False,
        description="Reserved; the deck never contains jokers"
    )
    revolution_enabled: bool = Field(
        default=True,
        description="Whether a non-Two four-of-a-kind inverts the rank order"
    )
    twos_clear_pile: bool = Field(
        default=True,
        description="Reserved; Twos always clear the pile"
    )
    rounds_to_play: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of rounds before the game ends (None = unlimited)"
    )
    exchange_timeout_ms: int = Field(
        default=60_000,
        ge=0,
        description="Time allowed to submit exchange cards (not enforced by the engine)"
    )
    disconnect_grace_period_ms: int = Field(
        default=120_000,
        ge=0,
        description="Grace period before a disconnected player is removed (not enforced)"
    )
    turn_timeout_ms: int = Field(
        default=30_000,
        ge=0,
        description="Turn timeout in milliseconds (not enforced by the engine)"
    )
    role_theme: RoleTheme = Field(
        default=RoleTheme.CLASSIC,
        description="Display theme for role labels"
    )
    custom_role_labels: Optional[Dict[RoleTier, str]] = Field(
        default=None,
        description="Per-tier label overrides applied on top of the theme"
    )

    @field_validator('max_players')
    @classmethod
    def validate_max_players(cls, v, info):
        """Validate maximum players is not below minimum."""
        min_players = info.data.get('min_players', MIN_SUPPORTED_PLAYERS)
        if v < min_players:
            raise ValueError(f'max_players ({v}) must be >= min_players ({min_players})')
        return v

    @field_validator('custom_role_labels')
    @classmethod
    def validate_custom_labels(cls, v):
        if v is not None and any(not label.strip() for label in v.values()):
            raise ValueError('custom role labels must not be blank')
        return v

    def validate_player_count(self, player_count: int) -> bool:
        """Check if a player count is valid for this configuration."""
        return self.min_players <= player_count <= self.max_players

    def get_deck_size(self) -> int:
        return DECK_SIZE

    def is_final_round(self, round_number: int) -> bool:
        return self.rounds_to_play is not None and round_number >= self.rounds_to_play


# Default configuration instance
default_rules = GameConfig()


def create_rules(**overrides) -> GameConfig:
    """Create a GameConfig with optional overrides."""
    config_dict = default_rules.model_dump()
    config_dict.update(overrides)
    return GameConfig(**config_dict)
