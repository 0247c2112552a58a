"""
Tests for rule configuration and error classification.
"""

import pytest
from pydantic import ValidationError

from revolution_engine.constants import RoleTier
from revolution_engine.errors import (
    CannotPassNow, CardsNotInHand, DuplicateAction, ErrorCode, GameFull, GameNotStarted,
    InvalidCardCount, InvalidExchange, InvalidPlay, InvalidSequence, InvalidSessionToken,
    NotYourTurn, PlayerNotFound, RateLimitExceeded, SessionExpired, Severity, WrongPhase,
    classify, error_code, is_recoverable,
)
from revolution_engine.ids import PlayerId
from revolution_engine.rules import GameConfig, create_rules, default_rules


def test_default_rules():
    assert default_rules.min_players == 3
    assert default_rules.max_players == 6
    assert default_rules.revolution_enabled
    assert default_rules.rounds_to_play is None
    assert default_rules.get_deck_size() == 52


def test_create_rules_overrides():
    config = create_rules(max_players=4, rounds_to_play=3)
    assert config.max_players == 4
    assert config.rounds_to_play == 3
    assert config.min_players == default_rules.min_players


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_players": 2},
        {"max_players": 7},
        {"min_players": 5, "max_players": 4},
        {"rounds_to_play": 0},
        {"custom_role_labels": {RoleTier.TOP: "  "}},
    ],
)
def test_invalid_rules_rejected(overrides):
    with pytest.raises(ValidationError):
        create_rules(**overrides)


def test_player_count_bounds():
    config = GameConfig(min_players=4, max_players=5)
    assert not config.validate_player_count(3)
    assert config.validate_player_count(4)
    assert config.validate_player_count(5)
    assert not config.validate_player_count(6)


def test_final_round():
    assert not default_rules.is_final_round(100)
    config = create_rules(rounds_to_play=2)
    assert not config.is_final_round(1)
    assert config.is_final_round(2)


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        default_rules.max_players = 4


@pytest.mark.parametrize(
    ("error", "severity"),
    [
        (InvalidPlay("bad"), Severity.RECOVERABLE),
        (NotYourTurn(), Severity.RECOVERABLE),
        (WrongPhase("playing", "round_over"), Severity.RECOVERABLE),
        (InvalidCardCount(2, 1), Severity.RECOVERABLE),
        (CardsNotInHand(1), Severity.RECOVERABLE),
        (CannotPassNow(), Severity.RECOVERABLE),
        (InvalidExchange("bad"), Severity.RECOVERABLE),
        (DuplicateAction("p0:1"), Severity.RECOVERABLE),
        (PlayerNotFound(PlayerId("ghost")), Severity.GAME_ENDING),
        (SessionExpired(), Severity.GAME_ENDING),
        (InvalidSessionToken(), Severity.GAME_ENDING),
        (RateLimitExceeded(), Severity.GAME_ENDING),
        (GameFull(), Severity.FATAL),
        (GameNotStarted(), Severity.FATAL),
        (InvalidSequence(3, 5), Severity.FATAL),
    ],
)
def test_error_severity(error, severity):
    assert classify(error) == severity
    assert is_recoverable(error) == (severity == Severity.RECOVERABLE)


def test_error_messages_carry_code():
    error = WrongPhase("playing", "round_over")
    assert str(error).startswith("[WRONG_PHASE]")
    assert error.expected == "playing"
    assert error.actual == "round_over"
    assert error_code(error) == ErrorCode.WRONG_PHASE
    assert error_code(ValueError("x")) is None
