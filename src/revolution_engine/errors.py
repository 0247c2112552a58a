# src/revolution_engine/errors.py

from enum import Enum
from typing import Optional


class Severity(str, Enum):
    """What the surrounding room should do with an error."""
    RECOVERABLE = "recoverable"  # report to the caller, who may retry
    GAME_ENDING = "game_ending"  # remove the offending player, game continues
    FATAL = "fatal"  # tear down and rebuild the room


class ErrorCode(str, Enum):
    INVALID_PLAY = "INVALID_PLAY"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    WRONG_PHASE = "WRONG_PHASE"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    INVALID_CARD_COUNT = "INVALID_CARD_COUNT"
    CARDS_NOT_IN_HAND = "CARDS_NOT_IN_HAND"
    CANNOT_PASS_NOW = "CANNOT_PASS_NOW"
    GAME_FULL = "GAME_FULL"
    GAME_NOT_STARTED = "GAME_NOT_STARTED"
    INVALID_EXCHANGE = "INVALID_EXCHANGE"
    INVALID_SEQUENCE = "INVALID_SEQUENCE"
    DUPLICATE_ACTION = "DUPLICATE_ACTION"
    SESSION_EXPIRED = "SESSION_EXPIRED"
    INVALID_SESSION_TOKEN = "INVALID_SESSION_TOKEN"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


class GameError(Exception):
    """Base exception for game-related errors."""
    code: ErrorCode
    severity: Severity

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"[{self.code.value}] {message}")


class InvalidPlay(GameError):
    code = ErrorCode.INVALID_PLAY
    severity = Severity.RECOVERABLE

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class NotYourTurn(GameError):
    code = ErrorCode.NOT_YOUR_TURN
    severity = Severity.RECOVERABLE

    def __init__(self):
        super().__init__("It's not your turn")


class WrongPhase(GameError):
    code = ErrorCode.WRONG_PHASE
    severity = Severity.RECOVERABLE

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected phase {expected}, game is in {actual}")


class PlayerNotFound(GameError):
    code = ErrorCode.PLAYER_NOT_FOUND
    severity = Severity.GAME_ENDING

    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"Player {player_id} is not seated in this game")


class InvalidCardCount(GameError):
    code = ErrorCode.INVALID_CARD_COUNT
    severity = Severity.RECOVERABLE

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Must play exactly {expected} cards (got {actual})")


class CardsNotInHand(GameError):
    code = ErrorCode.CARDS_NOT_IN_HAND
    severity = Severity.RECOVERABLE

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{count} of the selected cards are not in your hand")


class CannotPassNow(GameError):
    code = ErrorCode.CANNOT_PASS_NOW
    severity = Severity.RECOVERABLE

    def __init__(self):
        super().__init__("The player leading a trick cannot pass")


class GameFull(GameError):
    code = ErrorCode.GAME_FULL
    severity = Severity.FATAL

    def __init__(self):
        super().__init__("Game is full")


class GameNotStarted(GameError):
    code = ErrorCode.GAME_NOT_STARTED
    severity = Severity.FATAL

    def __init__(self):
        super().__init__("Game has not started")


class InvalidExchange(GameError):
    code = ErrorCode.INVALID_EXCHANGE
    severity = Severity.RECOVERABLE

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InvalidSequence(GameError):
    code = ErrorCode.INVALID_SEQUENCE
    severity = Severity.FATAL

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected sequence {expected}, got {actual}")


class DuplicateAction(GameError):
    code = ErrorCode.DUPLICATE_ACTION
    severity = Severity.RECOVERABLE

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Action {key} was already applied")


class SessionExpired(GameError):
    code = ErrorCode.SESSION_EXPIRED
    severity = Severity.GAME_ENDING

    def __init__(self):
        super().__init__("Session expired")


class InvalidSessionToken(GameError):
    code = ErrorCode.INVALID_SESSION_TOKEN
    severity = Severity.GAME_ENDING

    def __init__(self):
        super().__init__("Invalid session token")


class RateLimitExceeded(GameError):
    code = ErrorCode.RATE_LIMIT_EXCEEDED
    severity = Severity.GAME_ENDING

    def __init__(self):
        super().__init__("Rate limit exceeded")


def classify(error: GameError) -> Severity:
    return error.severity


def is_recoverable(error: GameError) -> bool:
    return error.severity == Severity.RECOVERABLE


def error_code(error: Exception) -> Optional[ErrorCode]:
    """Stable code for an engine error, None for anything else."""
    if isinstance(error, GameError):
        return error.code
    return None
