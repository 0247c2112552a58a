"""
Legality checks for plays, passes and exchanges.
"""

from typing import Optional, Sequence

from .comparator import is_higher_rank
from .constants import FOUR_OF_A_KIND, ExchangeQuality, Rank
from .errors import CardsNotInHand, GameError, InvalidCardCount, InvalidExchange, InvalidPlay
from .models import Card, Play
from .shuffle import all_same_rank, missing_cards, sort_by_rank


class ValidationResult:
    """Result of a rule check."""

    def __init__(self, valid: bool, error: Optional[GameError] = None):
        self.valid = valid
        self.error = error

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(valid=True)

    @classmethod
    def failure(cls, error: GameError) -> 'ValidationResult':
        return cls(valid=False, error=error)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        if self.valid:
            return "ValidationResult(valid=True)"
        return f"ValidationResult(valid=False, error={self.error!r})"


def is_twos(cards: Sequence[Card]) -> bool:
    return all_same_rank(cards) and cards[0].rank == Rank.TWO


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return len(cards) == FOUR_OF_A_KIND and all_same_rank(cards)


def validate_play(
    cards: Sequence[Card],
    last_play: Optional[Play],
    revolution_active: bool
) -> ValidationResult:
    """
    Validate a set of cards against the play currently on the table.

    Args:
        cards: Cards being played
        last_play: The play to beat, None when leading a trick
        revolution_active: Whether the rank order is inverted

    Returns:
        ValidationResult carrying the rejection error, if any
    """
    if not cards:
        return ValidationResult.failure(InvalidPlay("No cards to play"))

    if not all_same_rank(cards):
        return ValidationResult.failure(InvalidPlay("All cards must be the same rank"))

    # Twos outrank everything in both modes.
    if cards[0].rank == Rank.TWO:
        return ValidationResult.success()

    if last_play is None:
        return ValidationResult.success()

    if len(cards) != last_play.count:
        return ValidationResult.failure(InvalidCardCount(last_play.count, len(cards)))

    if not is_higher_rank(cards[0].rank, last_play.rank, revolution_active):
        return ValidationResult.failure(InvalidPlay(
            f"Rank {cards[0].rank.value} does not beat {last_play.rank.value}"
        ))

    return ValidationResult.success()


def clears_pile(cards: Sequence[Card]) -> bool:
    """Twos and any four-of-a-kind clear the pile."""
    return is_twos(cards) or is_four_of_a_kind(cards)


def triggers_revolution(cards: Sequence[Card]) -> bool:
    """A four-of-a-kind of anything but Twos flips the rank order."""
    return is_four_of_a_kind(cards) and cards[0].rank != Rank.TWO


def validate_exchange(
    cards: Sequence[Card],
    quality: ExchangeQuality,
    hand: Sequence[Card],
    revolution_active: bool
) -> ValidationResult:
    """
    Validate cards handed over during the exchange phase.

    ``BEST`` requires exactly the top cards of the hand, card for card; an
    equally ranked card that is not among them is rejected.
    """
    missing = missing_cards(hand, cards)
    if missing:
        return ValidationResult.failure(CardsNotInHand(missing))

    if len(set(cards)) != len(cards):
        return ValidationResult.failure(InvalidExchange("Cannot give the same card twice"))

    if quality == ExchangeQuality.ANY:
        return ValidationResult.success()

    best = sort_by_rank(hand, revolution_active)[:len(cards)]
    if set(best) != set(cards):
        return ValidationResult.failure(InvalidExchange(
            f"Must give your {len(cards)} best cards: {', '.join(card.id for card in best)}"
        ))

    return ValidationResult.success()


def can_pass(is_leading_trick: bool) -> bool:
    return not is_leading_trick
