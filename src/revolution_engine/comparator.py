"""
Rank comparison logic with support for revolution.
"""

from typing import Dict, List

from .constants import NORMAL_ORDER, Rank

# Numeric strength of each rank. Three is weakest and Two strongest in normal
# play; revolution mirrors the order.
NORMAL_VALUES: Dict[Rank, int] = {rank: index + 3 for index, rank in enumerate(NORMAL_ORDER)}
REVOLUTION_VALUES: Dict[Rank, int] = {
    rank: NORMAL_VALUES[NORMAL_ORDER[-1]] + NORMAL_VALUES[NORMAL_ORDER[0]] - value
    for rank, value in NORMAL_VALUES.items()
}


def get_rank_order(revolution: bool) -> List[Rank]:
    """Ranks from weakest to strongest under the given mode."""
    if revolution:
        return list(reversed(NORMAL_ORDER))
    return list(NORMAL_ORDER)


def effective_rank(rank: Rank, revolution: bool = False) -> int:
    if revolution:
        return REVOLUTION_VALUES[rank]
    return NORMAL_VALUES[rank]


def compare_ranks(rank_a: Rank, rank_b: Rank, revolution: bool = False) -> int:
    """
    Compare two ranks.

    Returns:
        < 0 if rank_a is lower than rank_b
        0 if ranks are equal
        > 0 if rank_a is higher than rank_b
    """
    return effective_rank(rank_a, revolution) - effective_rank(rank_b, revolution)


def compare_rank(rank_a: Rank, rank_b: Rank, revolution: bool = False) -> int:
    """Three-way comparison normalised to -1, 0 or 1."""
    difference = compare_ranks(rank_a, rank_b, revolution)
    return (difference > 0) - (difference < 0)


def is_higher_rank(rank_a: Rank, rank_b: Rank, revolution: bool = False) -> bool:
    """Check if rank_a is higher than rank_b."""
    return compare_ranks(rank_a, rank_b, revolution) > 0


def is_lower_rank(rank_a: Rank, rank_b: Rank, revolution: bool = False) -> bool:
    """Check if rank_a is lower than rank_b."""
    return compare_ranks(rank_a, rank_b, revolution) < 0


def get_highest_rank(ranks: List[Rank], revolution: bool = False) -> Rank:
    """Get the highest rank from a list of ranks."""
    if not ranks:
        raise ValueError("Cannot get highest rank from empty list")

    return max(ranks, key=lambda r: effective_rank(r, revolution))


def get_lowest_rank(ranks: List[Rank], revolution: bool = False) -> Rank:
    """Get the lowest rank from a list of ranks."""
    if not ranks:
        raise ValueError("Cannot get lowest rank from empty list")

    return min(ranks, key=lambda r: effective_rank(r, revolution))


def sort_ranks(ranks: List[Rank], revolution: bool = False, reverse: bool = False) -> List[Rank]:
    """Sort ranks according to current ordering."""
    return sorted(ranks, key=lambda r: effective_rank(r, revolution), reverse=reverse)
