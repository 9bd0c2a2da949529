"""Parity checks between the batched evaluator and the scalar evaluator.

Every packed score from the batch path must equal HandEvaluation.score for
the same hand, so both orderings agree.
"""

from typing import List
import random

import torch

from poker_eval.rules import Card, Hand, HandCategory, create_standard_deck, evaluate_hand, hand_from_string, make_hand
from poker_eval.rules.batch import (
    NUM_CARDS,
    BatchHandEvaluator,
    card_to_idx,
    cards_to_tensor,
    idx_to_card,
)


def _make_random_hands(rng: random.Random, count: int) -> List[Hand]:
    deck = create_standard_deck()
    return [make_hand(rng.sample(deck, 5)) for _ in range(count)]


def test_card_index_encoding_covers_deck():
    indices = {card_to_idx(card) for card in create_standard_deck()}
    assert indices == set(range(NUM_CARDS))
    for idx in range(NUM_CARDS):
        assert card_to_idx(idx_to_card(idx)) == idx


def test_batch_matches_scalar_on_random_hands():
    device = torch.device("cpu")
    evaluator = BatchHandEvaluator(device)
    rng = random.Random(123)

    hands = _make_random_hands(rng, 2000)
    scores = evaluator.evaluate_batched(cards_to_tensor(hands, device)).tolist()

    for hand, score in zip(hands, scores):
        assert score == evaluate_hand(hand).score, str(hand)


def test_batch_matches_scalar_for_every_category():
    evaluator = BatchHandEvaluator(torch.device("cpu"))
    hands = [
        hand_from_string(s)
        for s in [
            "AH KS QD JC 9H",
            "AH AS KD QC JH",
            "9H 9S 3D 3C KH",
            "AH AS AD KC QH",
            "AH 2S 3D 4C 5H",
            "AH KS QD JC 10H",
            "AH JH 9H 6H 3H",
            "2H 2S 2D AC AH",
            "9H 9S 9D 9C 2H",
            "AD 2D 3D 4D 5D",
            "9S 8S 7S 6S 5S",
            "AH KH QH JH 10H",
        ]
    ]
    scores = evaluator.evaluate_hands(hands)
    assert scores == [evaluate_hand(hand).score for hand in hands]

    categories = evaluator.categories_from_scores(torch.tensor(scores)).tolist()
    assert categories == [int(evaluate_hand(hand).category) for hand in hands]
    assert categories[-1] == HandCategory.ROYAL_FLUSH


def test_compare_batched_signs():
    device = torch.device("cpu")
    evaluator = BatchHandEvaluator(device)
    first = [hand_from_string("AH AS KD KC QH"), hand_from_string("AH 2S 3D 4C 5H"), hand_from_string("AH KS QD JC 9H")]
    second = [hand_from_string("KH KS QD QC JH"), hand_from_string("2H 3S 4D 5C 6H"), hand_from_string("AS KD QC JH 9S")]

    result = evaluator.compare_batched(cards_to_tensor(first, device), cards_to_tensor(second, device))
    assert result.tolist() == [1, -1, 0]


def test_evaluate_hands_accepts_card_lists():
    evaluator = BatchHandEvaluator(torch.device("cpu"))
    cards: List[Card] = list(hand_from_string("AH AS KD QC JH"))
    assert evaluator.evaluate_hands([cards]) == [evaluate_hand(cards).score]
    assert evaluator.evaluate_hands([]) == []
