"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand classification and comparison (hands.py)

Batched evaluation lives in batch.py and is imported separately since it
needs PyTorch.
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    RANK_VALUES,
    HAND_SIZE,
    InvalidInput,
    InvalidSuit,
    InvalidRank,
    make_card,
    get_rank_value,
    get_rank_counts,
    get_straight_high,
    is_straight,
    is_flush,
    create_standard_deck,
    sort_cards,
)

from .hands import (
    HandCategory,
    Hand,
    HandEvaluation,
    HandError,
    WrongHandSize,
    DuplicateCard,
    make_hand,
    hand_from_string,
    evaluate_hand,
    compare_evaluations,
    compare_hands,
    can_beat,
    get_hand_categories,
    describe_categories,
    make_cards_from_ranks,
    make_cards_from_string,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "RANK_VALUES",
    "HAND_SIZE",
    "InvalidInput",
    "InvalidSuit",
    "InvalidRank",
    "make_card",
    "get_rank_value",
    "get_rank_counts",
    "get_straight_high",
    "is_straight",
    "is_flush",
    "create_standard_deck",
    "sort_cards",
    # Hands
    "HandCategory",
    "Hand",
    "HandEvaluation",
    "HandError",
    "WrongHandSize",
    "DuplicateCard",
    "make_hand",
    "hand_from_string",
    "evaluate_hand",
    "compare_evaluations",
    "compare_hands",
    "can_beat",
    "get_hand_categories",
    "describe_categories",
    "make_cards_from_ranks",
    "make_cards_from_string",
]
