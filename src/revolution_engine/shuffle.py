"""
Card shuffling and dealing utilities.
"""

import random
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .comparator import effective_rank
from .constants import DECK_SIZE, NORMAL_ORDER, SUITS, Rank
from .models import Card, Player

# 64-bit LCG parameters (Knuth's MMIX).
LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407
LCG_MASK = (1 << 64) - 1


def create_deck() -> List[Card]:
    """Create a standard 52-card deck."""
    return [Card(rank, suit) for rank in NORMAL_ORDER for suit in SUITS]


def linear_congruential(value: int) -> int:
    """One LCG step; the low bits are dropped because they cycle quickly."""
    return ((value * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK) >> 33


class Shuffler(ABC):
    """Deterministic permutation of a deck from a seed."""

    @abstractmethod
    def shuffle(self, deck: Sequence[Card], seed: int) -> List[Card]:
        pass


class LcgShuffler(Shuffler):
    """
    Draws the card at ``linear_congruential(seed + i) % remaining`` for each
    draw ``i``. Reproducible, not cryptographically secure.
    """

    def shuffle(self, deck: Sequence[Card], seed: int) -> List[Card]:
        remaining = list(deck)
        shuffled = []
        draw_seed = seed
        while remaining:
            index = linear_congruential(draw_seed) % len(remaining)
            shuffled.append(remaining.pop(index))
            draw_seed += 1
        return shuffled


class SystemRandomShuffler(Shuffler):
    """Seeded Mersenne Twister shuffle."""

    def shuffle(self, deck: Sequence[Card], seed: int) -> List[Card]:
        deck_copy = list(deck)
        random.Random(seed).shuffle(deck_copy)
        return deck_copy


DEFAULT_SHUFFLER: Shuffler = LcgShuffler()


def shuffle(deck: Sequence[Card], seed: int, shuffler: Optional[Shuffler] = None) -> List[Card]:
    """
    Shuffle a deck deterministically.

    Args:
        deck: Cards to shuffle (left untouched)
        seed: Seed for the permutation
        shuffler: Strategy to use, the LCG shuffler by default

    Returns:
        Shuffled copy of the deck
    """
    return (shuffler or DEFAULT_SHUFFLER).shuffle(deck, seed)


def deal_cards(
    deck: Sequence[Card],
    players: Sequence[Player]
) -> Tuple[Tuple[Player, ...], Tuple[Card, ...]]:
    """
    Deal cards evenly to all players.

    Every player gets ``len(deck) // len(players)`` cards, dealt round-robin
    in seating order.

    Returns:
        The players holding their new hands, and the cards left undealt
    """
    if not players:
        return (), tuple(deck)

    player_count = len(players)
    cards_per_player = len(deck) // player_count
    dealt = cards_per_player * player_count

    hands: List[List[Card]] = [[] for _ in players]
    for i, card in enumerate(deck[:dealt]):
        hands[i % player_count].append(card)

    dealt_players = tuple(
        Player(
            id=player.id,
            name=player.name,
            hand=tuple(hand),
            role=player.role,
            connection=player.connection,
        )
        for player, hand in zip(players, hands)
    )
    return dealt_players, tuple(deck[dealt:])


def sort_by_rank(cards: Iterable[Card], revolution_active: bool = False) -> List[Card]:
    """Sort cards strongest first; equal ranks keep their relative order."""
    return sorted(cards, key=lambda c: effective_rank(c.rank, revolution_active), reverse=True)


def all_same_rank(cards: Sequence[Card]) -> bool:
    return bool(cards) and all(card.rank == cards[0].rank for card in cards)


def count_rank(cards: Iterable[Card], rank: Rank) -> int:
    return sum(1 for card in cards if card.rank == rank)


def group_by_rank(cards: Iterable[Card]) -> Dict[Rank, List[Card]]:
    groups: Dict[Rank, List[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    return groups


def missing_cards(hand: Iterable[Card], cards: Iterable[Card]) -> int:
    """Number of cards (counting repeats) that ``hand`` cannot supply."""
    available = Counter(hand)
    wanted = Counter(cards)
    return sum(max(0, count - available[card]) for card, count in wanted.items())


def contains_cards(hand: Iterable[Card], cards: Iterable[Card]) -> bool:
    """Multiset containment: every card, with repeats, is in the hand."""
    return missing_cards(hand, cards) == 0


def remove_cards(hand: Sequence[Card], cards: Iterable[Card]) -> Tuple[Card, ...]:
    """Remove one occurrence of each card, keeping the order of what is left."""
    remaining = list(hand)
    for card in cards:
        remaining.remove(card)
    return tuple(remaining)


def unique_cards(cards: Iterable[Card]) -> List[Card]:
    """Drop repeated cards, first occurrence wins."""
    return list(dict.fromkeys(cards))


def validate_deck(deck: Sequence[Card]) -> bool:
    """A full deck: exactly 52 cards, no duplicates."""
    return len(deck) == DECK_SIZE and len(set(deck)) == DECK_SIZE
