"""Game constants and enumerations"""

from enum import Enum, IntEnum
from typing import Dict, List


class Rank(str, Enum):
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"
    TWO = "2"


class Suit(str, Enum):
    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"


class RoleTier(IntEnum):
    """Finishing-order hierarchy. Larger values rank higher."""
    BOTTOM = 1
    FOURTH = 2
    MIDDLE = 3
    SECOND = 4
    TOP = 5


class ExchangeQuality(str, Enum):
    BEST = "best"
    ANY = "any"


class ConnectionState(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"  # within the grace period
    REMOVED = "removed"


class RoleTheme(str, Enum):
    CLASSIC = "classic"
    PRESIDENT = "president"
    ROYAL = "royal"
    CORPORATE = "corporate"
    MILITARY = "military"
    DAIFUGO = "daifugo"


NORMAL_ORDER: List[Rank] = [
    Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.EIGHT,
    Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE, Rank.TWO,
]
SUITS: List[Suit] = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]

DECK_SIZE = len(NORMAL_ORDER) * len(SUITS)

# A same-rank play of this many cards clears the pile.
FOUR_OF_A_KIND = 4

MIN_SUPPORTED_PLAYERS = 3
MAX_SUPPORTED_PLAYERS = 6

# Cards handed over between exchange partners, keyed by either partner's tier.
EXCHANGE_COUNTS: Dict[RoleTier, int] = {
    RoleTier.TOP: 2,
    RoleTier.BOTTOM: 2,
    RoleTier.SECOND: 1,
    RoleTier.FOURTH: 1,
    RoleTier.MIDDLE: 0,
}

SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}
