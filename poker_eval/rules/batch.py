"""Batched hand evaluation with PyTorch.

This module provides:
- A fixed card encoding (52 card indices)
- Vectorized classification of many five-card hands at once
- Packed integer scores identical to HandEvaluation.score

Key insight: once every hand is reduced to a [13] rank-count row, each
category test is a handful of tensor reductions, and the kicker order for
every category except straights is "rank values sorted by (count, value)
descending". That ordering is computed once for the whole batch.
"""

import logging
from typing import List, Optional, Sequence, Union

import torch
import torch.nn.functional as F

from .hands import CATEGORY_SHIFT, SCORE_BITS, SCORE_SLOTS, Hand, HandCategory
from .ranks import HAND_SIZE, MAX_RANK_VALUE, MIN_RANK_VALUE, WHEEL_HIGH, WHEEL_VALUES, Card, Rank, Suit

logger = logging.getLogger(__name__)

NUM_RANKS = MAX_RANK_VALUE - MIN_RANK_VALUE + 1
NUM_CARDS = NUM_RANKS * len(Suit)


# Card encoding: 0-51 (4 suits × 13 ranks)
# card_idx = suit * 13 + (rank - 2)
def card_to_idx(card: Card) -> int:
    """Convert Card to index 0-51."""
    return card.suit.value * NUM_RANKS + (card.rank.value - MIN_RANK_VALUE)


def idx_to_card(idx: int) -> Card:
    """Convert index 0-51 to Card."""
    suit = Suit(idx // NUM_RANKS)
    rank = Rank(idx % NUM_RANKS + MIN_RANK_VALUE)
    return Card(rank=rank, suit=suit)


def default_device() -> torch.device:
    """CUDA when available, else CPU."""
    return torch.device("cuda" if torch.cuda.is_available() else "cpu")


class BatchHandEvaluator:
    """Vectorized hand evaluation.

    Keeps lookup tensors on the chosen device to avoid transfers.
    """

    def __init__(self, device: Optional[torch.device] = None):
        self.device = device if device is not None else default_device()
        logger.debug("BatchHandEvaluator using device %s", self.device)
        self._build_tensors()

    def _build_tensors(self):
        """Build constant tensors used by every batch."""
        # Rank value of each rank slot: [13] = 2..14
        self.rank_values = torch.arange(
            MIN_RANK_VALUE, MAX_RANK_VALUE + 1, device=self.device, dtype=torch.long
        )

        # Rank slots present in the wheel (A-2-3-4-5)
        wheel = torch.zeros(NUM_RANKS, dtype=torch.bool, device=self.device)
        for value in WHEEL_VALUES:
            wheel[value - MIN_RANK_VALUE] = True
        self.wheel_mask = wheel

        # Bit offset of each value slot in the packed score
        self.slot_shifts = torch.tensor(
            [SCORE_BITS * (SCORE_SLOTS - 1 - i) for i in range(SCORE_SLOTS)],
            device=self.device,
            dtype=torch.long,
        )

    def evaluate_batched(self, cards: torch.Tensor) -> torch.Tensor:
        """Compute packed scores for a batch of hands.

        Args:
            cards: [batch, 5] card indices (0-51), five distinct cards per row

        Returns:
            [batch] int64 scores; higher score = stronger hand
        """
        cards = cards.to(device=self.device, dtype=torch.long)
        batch_size = cards.shape[0]
        rank_slots = cards % NUM_RANKS  # [batch, 5]
        suits = cards // NUM_RANKS  # [batch, 5]

        rank_counts = F.one_hot(rank_slots, NUM_RANKS).sum(dim=1)  # [batch, 13]
        present = rank_counts > 0

        flush = (suits == suits[:, :1]).all(dim=1)

        # Straights: five distinct ranks spanning four, or exactly the wheel
        all_distinct = present.sum(dim=1) == HAND_SIZE
        high_slot = rank_slots.max(dim=1).values
        low_slot = rank_slots.min(dim=1).values
        wheel = (present == self.wheel_mask.unsqueeze(0)).all(dim=1)
        straight = (all_distinct & (high_slot - low_slot == HAND_SIZE - 1)) | wheel
        straight_high = torch.where(
            wheel, torch.full_like(high_slot, WHEEL_HIGH), high_slot + MIN_RANK_VALUE
        )

        num_pairs = (rank_counts == 2).sum(dim=1)
        has_trips = (rank_counts == 3).any(dim=1)
        has_quads = (rank_counts == 4).any(dim=1)

        # Assign weakest to strongest; each stronger match overrides
        category = torch.full(
            (batch_size,), int(HandCategory.HIGH_CARD), device=self.device, dtype=torch.long
        )
        steps = [
            (num_pairs == 1, HandCategory.ONE_PAIR),
            (num_pairs == 2, HandCategory.TWO_PAIR),
            (has_trips, HandCategory.THREE_OF_A_KIND),
            (straight, HandCategory.STRAIGHT),
            (flush, HandCategory.FLUSH),
            (has_trips & (num_pairs == 1), HandCategory.FULL_HOUSE),
            (has_quads, HandCategory.FOUR_OF_A_KIND),
            (flush & straight, HandCategory.STRAIGHT_FLUSH),
            (flush & straight & (straight_high == MAX_RANK_VALUE), HandCategory.ROYAL_FLUSH),
        ]
        for condition, hand_category in steps:
            category = torch.where(condition, torch.full_like(category, int(hand_category)), category)

        # Value order for every non-straight category: (count, value) descending
        weighted = rank_counts * 16 + self.rank_values
        sort_keys = torch.where(present, weighted, torch.zeros_like(weighted))
        sorted_keys = sort_keys.sort(dim=1, descending=True).values[:, :SCORE_SLOTS]
        ordered_values = torch.where(sorted_keys > 0, sorted_keys % 16, torch.zeros_like(sorted_keys))

        # Straight categories carry only their top value
        straight_values = torch.zeros_like(ordered_values)
        straight_values[:, 0] = straight_high
        is_straight_category = (
            (category == int(HandCategory.STRAIGHT))
            | (category == int(HandCategory.STRAIGHT_FLUSH))
            | (category == int(HandCategory.ROYAL_FLUSH))
        )
        slots = torch.where(is_straight_category.unsqueeze(1), straight_values, ordered_values)

        return (category << CATEGORY_SHIFT) | (slots << self.slot_shifts).sum(dim=1)

    def categories_from_scores(self, scores: torch.Tensor) -> torch.Tensor:
        """Extract the category from packed scores."""
        return scores >> CATEGORY_SHIFT

    def compare_batched(self, cards1: torch.Tensor, cards2: torch.Tensor) -> torch.Tensor:
        """Compare two batches of hands row by row.

        Returns:
            [batch] tensor of 1 (first stronger), -1 (second stronger) or 0
        """
        return torch.sign(self.evaluate_batched(cards1) - self.evaluate_batched(cards2))

    def evaluate_hands(self, hands: Sequence[Union[Hand, Sequence[Card]]]) -> List[int]:
        """Evaluate Hand objects and return their packed scores."""
        if not hands:
            return []
        return self.evaluate_batched(cards_to_tensor(hands, self.device)).tolist()


def cards_to_tensor(
    hands: Sequence[Union[Hand, Sequence[Card]]], device: Optional[torch.device] = None
) -> torch.Tensor:
    """Convert hands to a [batch, 5] tensor of card indices."""
    indices = [[card_to_idx(card) for card in hand] for hand in hands]
    return torch.tensor(indices, device=device, dtype=torch.long)
