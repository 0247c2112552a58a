"""
Tests for the card model, rank ordering and deck operations.
"""

import pytest

from revolution_engine.comparator import (
    compare_rank, compare_ranks, effective_rank, get_highest_rank, get_rank_order, get_lowest_rank, is_higher_rank,
    is_lower_rank, sort_ranks,
)
from revolution_engine.constants import NORMAL_ORDER, SUITS, Rank, Suit
from revolution_engine.ids import PlayerId
from revolution_engine.models import Card, Player
from revolution_engine.shuffle import (
    LcgShuffler, SystemRandomShuffler, all_same_rank, contains_cards, count_rank,
    create_deck, deal_cards, group_by_rank, linear_congruential, missing_cards,
    remove_cards, shuffle, sort_by_rank, unique_cards, validate_deck,
)


def cards(*ids):
    return [Card.from_id(card_id) for card_id in ids]


def test_deck_has_52_unique_cards():
    deck = create_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert validate_deck(deck)
    for rank in NORMAL_ORDER:
        assert count_rank(deck, rank) == 4
    for suit in SUITS:
        assert sum(1 for card in deck if card.suit == suit) == 13


def test_validate_deck_rejects_bad_decks():
    deck = create_deck()
    assert not validate_deck(deck[:-1])
    assert not validate_deck(deck[:-1] + [deck[0]])


def test_card_ids_round_trip():
    for card in create_deck():
        assert Card.from_id(card.id) == card
    assert Card.from_id("10H") == Card(Rank.TEN, Suit.HEARTS)
    with pytest.raises(ValueError):
        Card.from_id("1X")


def test_card_identity_uses_rank_and_suit():
    assert Card(Rank.ACE, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
    assert Card(Rank.ACE, Suit.SPADES) != Card(Rank.ACE, Suit.HEARTS)
    assert Card(Rank.ACE, Suit.SPADES) != Card(Rank.KING, Suit.SPADES)


def test_rank_comparison():
    """Test rank comparison logic."""
    assert compare_ranks(Rank.THREE, Rank.TWO, revolution=False) < 0
    assert compare_ranks(Rank.THREE, Rank.TWO, revolution=True) > 0
    assert compare_rank(Rank.THREE, Rank.TWO, False) == -1
    assert compare_rank(Rank.THREE, Rank.TWO, True) == 1
    for rank in NORMAL_ORDER:
        assert compare_ranks(rank, rank, revolution=False) == 0
        assert compare_rank(rank, rank, True) == 0
        assert compare_ranks(rank, rank, revolution=True) == 0

    assert is_higher_rank(Rank.FOUR, Rank.THREE)
    assert is_higher_rank(Rank.ACE, Rank.KING)
    assert is_higher_rank(Rank.TWO, Rank.ACE)

    # Revolution: lower is higher
    assert is_lower_rank(Rank.FOUR, Rank.THREE, revolution=True)
    assert is_higher_rank(Rank.KING, Rank.ACE, revolution=True)


def test_rank_orders_are_mirrors():
    assert get_rank_order(False)[0] == Rank.THREE
    assert get_rank_order(True) == list(reversed(get_rank_order(False)))
    normal = [effective_rank(rank) for rank in NORMAL_ORDER]
    revolution = [effective_rank(rank, revolution=True) for rank in NORMAL_ORDER]
    assert normal == sorted(normal)
    assert revolution == sorted(revolution, reverse=True)
    assert set(normal) == set(revolution)


def test_highest_and_lowest_rank():
    ranks = [Rank.FIVE, Rank.TWO, Rank.JACK]
    assert get_highest_rank(ranks) == Rank.TWO
    assert get_lowest_rank(ranks) == Rank.FIVE
    assert get_highest_rank(ranks, revolution=True) == Rank.FIVE
    assert get_lowest_rank(ranks, revolution=True) == Rank.TWO
    assert sort_ranks(ranks) == [Rank.FIVE, Rank.JACK, Rank.TWO]
    with pytest.raises(ValueError):
        get_highest_rank([])


def test_shuffle_is_deterministic():
    deck = create_deck()
    assert shuffle(deck, 42) == shuffle(deck, 42)
    assert shuffle(deck, 1) != shuffle(deck, 2)


def test_shuffle_is_a_permutation():
    deck = create_deck()
    shuffled = shuffle(deck, 7)
    assert shuffled != deck
    assert sorted(shuffled, key=lambda c: c.id) == sorted(deck, key=lambda c: c.id)
    assert deck == create_deck()  # input untouched


def test_lcg_shuffle_draw_order():
    deck = create_deck()[:5]
    remaining = list(deck)
    expected = []
    for i in range(5):
        expected.append(remaining.pop(linear_congruential(100 + i) % len(remaining)))
    assert LcgShuffler().shuffle(deck, 100) == expected


def test_shuffler_is_pluggable():
    deck = create_deck()
    shuffled = shuffle(deck, 42, shuffler=SystemRandomShuffler())
    assert shuffled == SystemRandomShuffler().shuffle(deck, 42)
    assert validate_deck(shuffled)


@pytest.mark.parametrize(
    ("player_count", "per_player", "remainder"),
    [
        (3, 17, 1),
        (4, 13, 0),
        (5, 10, 2),
        (6, 8, 4),
    ],
)
def test_deal_cards_evenly(player_count, per_player, remainder):
    players = [Player(id=PlayerId(f"p{i}"), name=f"Player {i}") for i in range(player_count)]
    deck = shuffle(create_deck(), 3)
    dealt, undealt = deal_cards(deck, players)

    assert [len(p.hand) for p in dealt] == [per_player] * player_count
    assert len(undealt) == remainder
    all_cards = [card for p in dealt for card in p.hand] + list(undealt)
    assert validate_deck(all_cards)
    # Seating order and identity preserved
    assert [p.id for p in dealt] == [p.id for p in players]
    assert dealt[0].hand[0] == deck[0]
    assert dealt[1].hand[0] == deck[1]


def test_deal_resets_round_flags():
    player = Player(id=PlayerId("p0"), name="Alice", has_passed=True, finishing_position=2)
    dealt, _ = deal_cards(create_deck(), [player])
    assert not dealt[0].has_passed
    assert dealt[0].finishing_position is None
    assert len(dealt[0].hand) == 52


def test_sort_by_rank():
    hand = cards("5H", "2S", "KD", "5C", "3H")
    assert [c.id for c in sort_by_rank(hand)] == ["2S", "KD", "5H", "5C", "3H"]
    assert [c.id for c in sort_by_rank(hand, revolution_active=True)] == ["3H", "5H", "5C", "KD", "2S"]


def test_multiset_helpers():
    hand = cards("5H", "5C", "9D", "QS")
    assert all_same_rank(cards("5H", "5C"))
    assert not all_same_rank(cards("5H", "9D"))
    assert not all_same_rank([])
    assert count_rank(hand, Rank.FIVE) == 2
    assert contains_cards(hand, cards("5H", "QS"))
    assert not contains_cards(hand, cards("5H", "5H"))
    assert missing_cards(hand, cards("5H", "5H", "AS")) == 2
    assert remove_cards(hand, cards("5C", "QS")) == tuple(cards("5H", "9D"))
    with pytest.raises(ValueError):
        remove_cards(hand, cards("AS"))
    assert unique_cards(cards("5H", "5C", "5H")) == cards("5H", "5C")
    assert {rank: len(group) for rank, group in group_by_rank(hand).items()} == {
        Rank.FIVE: 2, Rank.NINE: 1, Rank.QUEEN: 1,
    }
