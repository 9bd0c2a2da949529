"""Hand construction, classification, and comparison.

Hand categories (weakest to strongest):
- High card
- One pair
- Two pair
- Three of a kind
- Straight: five consecutive ranks, A-2-3-4-5 counts as five-high
- Flush: five cards of one suit
- Full house: three of one rank + two of another
- Four of a kind
- Straight flush
- Royal flush: 10-J-Q-K-A of one suit

Classification checks categories strongest first and the first match wins.
Pairs, trips and quads are found from rank counts before straights are
considered, so a hand is never tested for a plain straight once it holds
a repeated rank.

Comparison rules:
- Category first
- Then the primary value (pair rank, trips rank, straight top, ...)
- Then kickers pairwise in order
- Suits never break ties
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .ranks import (
    Card,
    Rank,
    Suit,
    HAND_SIZE,
    MAX_RANK_VALUE,
    MIN_RANK_VALUE,
    RANK_SYMBOLS,
    get_rank_counts,
    get_straight_high,
    is_flush,
)


class HandCategory(IntEnum):
    """Hand categories ordered by strength (higher value = stronger)."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        """Display name, e.g. 'Three of a Kind'."""
        words = self.name.replace("_", " ").title().split()
        return " ".join(w.lower() if w in ("Of", "A") else w for w in words)


# Bit layout of HandEvaluation.score: 4 bits per value, category on top
SCORE_SLOTS = HAND_SIZE
SCORE_BITS = 4
CATEGORY_SHIFT = SCORE_SLOTS * SCORE_BITS


class HandError(ValueError):
    """Raised when a list of cards cannot form a hand."""

    pass


class WrongHandSize(HandError):
    """Raised when a hand does not hold exactly five cards."""

    pass


class DuplicateCard(HandError):
    """Raised when the same card appears twice in a hand."""

    pass


@dataclass(frozen=True)
class Hand:
    """A validated five-card hand.

    The stored order is the order the cards were given in; it is kept for
    display only and has no effect on evaluation.
    """

    cards: Tuple[Card, ...]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)


@dataclass(frozen=True)
class HandEvaluation:
    """Result of classifying a hand.

    Attributes:
        category: The hand category
        value: Primary rank value within the category
        kickers: Tie-break values in comparison order; count depends on category
    """

    category: HandCategory
    value: int
    kickers: Tuple[int, ...] = ()

    @property
    def key(self) -> Tuple[int, ...]:
        """Comparison key: (category, value, *kickers)."""
        return (int(self.category), self.value) + tuple(self.kickers)

    @property
    def score(self) -> int:
        """Single integer with the same ordering as the comparison key."""
        slots = [self.value] + list(self.kickers)
        slots += [0] * (SCORE_SLOTS - len(slots))
        score = int(self.category) << CATEGORY_SHIFT
        for i, slot in enumerate(slots):
            score |= slot << (SCORE_BITS * (SCORE_SLOTS - 1 - i))
        return score

    def describe(self) -> str:
        """Human readable summary, e.g. 'Two Pair, A over K'."""
        label = self.category.label
        value = _value_symbol(self.value)
        if self.category == HandCategory.ROYAL_FLUSH:
            return label
        if self.category in (
            HandCategory.HIGH_CARD,
            HandCategory.STRAIGHT,
            HandCategory.FLUSH,
            HandCategory.STRAIGHT_FLUSH,
        ):
            return f"{label}, {value}-high"
        if self.category == HandCategory.TWO_PAIR:
            return f"{label}, {value} over {_value_symbol(self.kickers[0])}"
        if self.category == HandCategory.FULL_HOUSE:
            return f"{label}, {value} full of {_value_symbol(self.kickers[0])}"
        return f"{label}, {value}"

    def __str__(self) -> str:
        return self.describe()


def _value_symbol(value: int) -> str:
    return RANK_SYMBOLS[Rank(value)]


# ============================================================================
# Construction
# ============================================================================


def make_hand(cards: Sequence[Card]) -> Hand:
    """Validate five cards and wrap them in a Hand.

    Args:
        cards: Sequence of Card objects, in display order

    Returns:
        Hand holding the cards in the given order

    Raises:
        WrongHandSize: If there are not exactly five cards
        DuplicateCard: If any card appears more than once
    """
    cards = tuple(cards)
    if len(cards) != HAND_SIZE:
        raise WrongHandSize(f"A hand must contain exactly {HAND_SIZE} cards, got {len(cards)}")

    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(f"Duplicate card: {card}")
        seen.add(card)

    return Hand(cards=cards)


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits for variety.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "A♥ K♠ Q♦ J♣ 9♥" or "AH KS QD JC 9H"."""
    return [Card.from_string(cs) for cs in s.split()]


def hand_from_string(s: str) -> Hand:
    """Parse and validate a hand from space-separated card strings."""
    return make_hand(make_cards_from_string(s))


# ============================================================================
# Evaluation
# ============================================================================


def evaluate_hand(hand: Union[Hand, Sequence[Card]]) -> HandEvaluation:
    """Classify a valid five-card hand.

    The hand is assumed to hold five distinct cards; this is not re-checked.

    Args:
        hand: Hand (or plain sequence of five cards)

    Returns:
        HandEvaluation with category, primary value and kickers
    """
    cards = tuple(hand)
    values = sorted((int(card.rank) for card in cards), reverse=True)
    counts = get_rank_counts(cards)
    flush = is_flush(cards)
    straight_high = get_straight_high(values)

    if flush and straight_high is not None:
        if straight_high == MAX_RANK_VALUE:
            return HandEvaluation(HandCategory.ROYAL_FLUSH, MAX_RANK_VALUE)
        return HandEvaluation(HandCategory.STRAIGHT_FLUSH, straight_high)

    # Group rank values by count, highest rank first
    quads: List[int] = []
    trips: List[int] = []
    pairs: List[int] = []
    singles: List[int] = []
    for value in range(MAX_RANK_VALUE, MIN_RANK_VALUE - 1, -1):
        count = counts[value]
        if count == 4:
            quads.append(value)
        elif count == 3:
            trips.append(value)
        elif count == 2:
            pairs.append(value)
        elif count == 1:
            singles.append(value)

    if quads:
        return HandEvaluation(HandCategory.FOUR_OF_A_KIND, quads[0], (singles[0],))

    if trips and pairs:
        return HandEvaluation(HandCategory.FULL_HOUSE, trips[0], (pairs[0],))

    if trips:
        return HandEvaluation(HandCategory.THREE_OF_A_KIND, trips[0], tuple(singles))

    if len(pairs) == 2:
        # Lower pair always precedes the odd card
        return HandEvaluation(HandCategory.TWO_PAIR, pairs[0], (pairs[1], singles[0]))

    if pairs:
        return HandEvaluation(HandCategory.ONE_PAIR, pairs[0], tuple(singles))

    if straight_high is not None:
        return HandEvaluation(HandCategory.STRAIGHT, straight_high)

    if flush:
        return HandEvaluation(HandCategory.FLUSH, values[0], tuple(values[1:]))

    return HandEvaluation(HandCategory.HIGH_CARD, values[0], tuple(values[1:]))


# ============================================================================
# Comparison
# ============================================================================


def compare_evaluations(eval1: HandEvaluation, eval2: HandEvaluation) -> int:
    """Compare two evaluations.

    Returns:
        1 if eval1 is stronger, -1 if weaker, 0 for a tie
    """
    if eval1.category != eval2.category:
        return 1 if eval1.category > eval2.category else -1

    if eval1.value != eval2.value:
        return 1 if eval1.value > eval2.value else -1

    for kicker1, kicker2 in zip(eval1.kickers, eval2.kickers):
        if kicker1 != kicker2:
            return 1 if kicker1 > kicker2 else -1

    return 0


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 > hand2, negative if hand1 < hand2, zero for a tie
    """
    return compare_evaluations(evaluate_hand(hand1), evaluate_hand(hand2))


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return compare_hands(hand1, hand2) > 0


def get_hand_categories() -> List[HandCategory]:
    """Get all hand categories, weakest first."""
    return list(HandCategory)


def describe_categories() -> Dict[HandCategory, str]:
    """Get a description of requirements for each hand category.

    Returns:
        Dict mapping HandCategory to description string
    """
    return {
        HandCategory.HIGH_CARD: "No other combination; highest card plays",
        HandCategory.ONE_PAIR: "Two cards of the same rank",
        HandCategory.TWO_PAIR: "Two pairs of different ranks",
        HandCategory.THREE_OF_A_KIND: "Three cards of the same rank",
        HandCategory.STRAIGHT: "Five consecutive ranks (A-2-3-4-5 is five-high)",
        HandCategory.FLUSH: "Five cards of the same suit",
        HandCategory.FULL_HOUSE: "Three of one rank + a pair of another",
        HandCategory.FOUR_OF_A_KIND: "Four cards of the same rank",
        HandCategory.STRAIGHT_FLUSH: "Straight with all cards of the same suit",
        HandCategory.ROYAL_FLUSH: "10-J-Q-K-A of the same suit",
    }
