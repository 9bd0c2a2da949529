"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank constants and their strength values (2-14, Ace high)
- Card representation and construction
- Suit definitions
- Straight and flush detection over five cards
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Union


class Rank(IntEnum):
    """Card ranks. The value of each member is its strength (2-14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Always high; the wheel is handled by straight detection


class Suit(IntEnum):
    """Card suits. Only equality matters (flush detection)."""

    HEART = 0
    DIAMOND = 1
    SPADE = 2
    CLUB = 3


# Rank symbols for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.SPADE: "♠",
    Suit.CLUB: "♣",
}

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}

# Symbol to suit mapping, with ASCII aliases in either case
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"H": Suit.HEART, "D": Suit.DIAMOND, "S": Suit.SPADE, "C": Suit.CLUB})
SYMBOL_TO_SUIT.update({"h": Suit.HEART, "d": Suit.DIAMOND, "s": Suit.SPADE, "c": Suit.CLUB})

# Rank label -> strength
RANK_VALUES = {symbol: int(rank) for rank, symbol in RANK_SYMBOLS.items()}

MIN_RANK_VALUE = int(Rank.TWO)
MAX_RANK_VALUE = int(Rank.ACE)

HAND_SIZE = 5

# Ace counted as 1 in the five-high straight
WHEEL_VALUES = frozenset([14, 2, 3, 4, 5])
WHEEL_HIGH = 5


class InvalidInput(ValueError):
    """Raised when a card cannot be built from the given suit or rank."""

    pass


class InvalidSuit(InvalidInput):
    """Raised for a suit outside the four standard suits."""

    pass


class InvalidRank(InvalidInput):
    """Raised for a rank outside 2-10, J, Q, K, A."""

    pass


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Equality is structural; suits carry no order.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @property
    def value(self) -> int:
        """Strength of the card's rank (2-14)."""
        return int(self.rank)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'A♥', '10♠' or 'QD'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            InvalidSuit: If the last character is not a suit
            InvalidRank: If the leading characters are not a rank label
        """
        if not s:
            raise InvalidInput("Empty card string")
        return make_card(s[-1], s[:-1])


SuitLike = Union[Suit, str]
RankLike = Union[Rank, str, int]


def _to_suit(suit: SuitLike) -> Suit:
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str) and suit in SYMBOL_TO_SUIT:
        return SYMBOL_TO_SUIT[suit]
    raise InvalidSuit(f"Invalid suit: {suit!r}")


def _to_rank(rank: RankLike) -> Rank:
    if isinstance(rank, Rank):
        return rank
    if isinstance(rank, str):
        label = rank.upper()
        if label in SYMBOL_TO_RANK:
            return SYMBOL_TO_RANK[label]
    elif isinstance(rank, int) and not isinstance(rank, bool):
        if MIN_RANK_VALUE <= rank <= MAX_RANK_VALUE:
            return Rank(rank)
    raise InvalidRank(f"Invalid rank: {rank!r}")


def make_card(suit: SuitLike, rank: RankLike) -> Card:
    """Build a card, validating suit then rank.

    Args:
        suit: Suit member, suit symbol ('♥') or ASCII alias ('H', 'h')
        rank: Rank member, rank label ('10', 'J', 'A') or strength 2-14

    Raises:
        InvalidSuit: If the suit is not one of the four suits
        InvalidRank: If the rank is not one of the thirteen ranks
    """
    checked_suit = _to_suit(suit)
    checked_rank = _to_rank(rank)
    return Card(rank=checked_rank, suit=checked_suit)


def get_rank_value(rank: Union[Rank, str]) -> int:
    """Strength of a rank: 2-10 face value, J=11, Q=12, K=13, A=14."""
    if isinstance(rank, Rank):
        return int(rank)
    return RANK_VALUES[rank]


def get_rank_counts(cards: Sequence[Card]) -> List[int]:
    """Count occurrences of each rank value.

    Returns:
        List of length 15 indexed by rank value; slots 0 and 1 are always 0
    """
    counts = [0] * (MAX_RANK_VALUE + 1)
    for card in cards:
        counts[card.rank] += 1
    return counts


def get_straight_high(values: Sequence[int]) -> Optional[int]:
    """Top value of the straight formed by five rank values, or None.

    The wheel (A-2-3-4-5) is five-high. No other wrap-around counts.
    """
    distinct = set(values)
    if len(values) != HAND_SIZE or len(distinct) != HAND_SIZE:
        return None
    if distinct == WHEEL_VALUES:
        return WHEEL_HIGH
    ordered = sorted(distinct)
    if ordered[-1] - ordered[0] == HAND_SIZE - 1:
        return ordered[-1]
    return None


def is_straight(values: Sequence[int]) -> bool:
    """Check whether five rank values are consecutive (wheel included)."""
    return get_straight_high(values) is not None


def is_flush(cards: Sequence[Card]) -> bool:
    """Check whether every card shares the first card's suit."""
    return all(card.suit == cards[0].suit for card in cards)


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: Sequence[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank. Cards of equal rank keep their input order."""
    return sorted(cards, key=lambda card: card.rank, reverse=descending)
