#!/usr/bin/env python3
"""Smoke test for the hand evaluator.

This script evaluates N random hands to verify basic functionality:
- Every hand gets exactly one category
- compare(a, a) == 0 and compare(a, b) == -compare(b, a)
- Packed scores order hands exactly like compare()
- The batched evaluator agrees with the scalar evaluator

Usage:
    python -m poker_eval.scripts.smoke_eval --hands 1000
    python -m poker_eval.scripts.smoke_eval --hands 5000 --seed 42 --verbose
"""

import argparse
import logging
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import torch

from poker_eval.rules import (
    Hand,
    HandCategory,
    compare_evaluations,
    create_standard_deck,
    evaluate_hand,
    make_hand,
)
from poker_eval.rules.batch import BatchHandEvaluator, cards_to_tensor

logger = logging.getLogger(__name__)


@dataclass
class SmokeConfig:
    """Smoke test configuration."""

    num_hands: int = 1000
    seed: Optional[int] = None
    batch_check: bool = True
    device: Optional[str] = None
    verbose: bool = False


def sample_hands(num_hands: int, rng: np.random.Generator) -> List[Hand]:
    """Draw independent five-card hands from a fresh deck each time."""
    deck = create_standard_deck()
    hands = []
    for _ in range(num_hands):
        picks = rng.choice(len(deck), size=5, replace=False)
        hands.append(make_hand([deck[int(i)] for i in picks]))
    return hands


def run_smoke(config: SmokeConfig) -> dict:
    """Run all checks and return statistics.

    Returns:
        Dict with category counts and error counts per check
    """
    seed = config.seed
    if seed is None:
        seed = int(np.random.default_rng().integers(0, 2**32))
    rng = np.random.default_rng(seed)
    hands = sample_hands(config.num_hands, rng)

    stats = {
        "seed": seed,
        "categories": Counter(),
        "category_errors": 0,
        "symmetry_errors": 0,
        "score_errors": 0,
        "batch_errors": 0,
    }

    evaluations = [evaluate_hand(hand) for hand in hands]
    for evaluation in evaluations:
        if not isinstance(evaluation.category, HandCategory):
            stats["category_errors"] += 1
            continue
        stats["categories"][evaluation.category.name] += 1

    # Pair each hand with the next one
    for i, eval_a in enumerate(evaluations):
        eval_b = evaluations[(i + 1) % len(evaluations)]
        forward = compare_evaluations(eval_a, eval_b)
        if compare_evaluations(eval_a, eval_a) != 0 or forward != -compare_evaluations(eval_b, eval_a):
            stats["symmetry_errors"] += 1
            if config.verbose:
                print(f"  Symmetry error: {hands[i]} vs {hands[(i + 1) % len(hands)]}")
        score_sign = (eval_a.score > eval_b.score) - (eval_a.score < eval_b.score)
        if score_sign != forward:
            stats["score_errors"] += 1

    if config.batch_check and hands:
        device = torch.device(config.device) if config.device else None
        batch = BatchHandEvaluator(device)
        scores = batch.evaluate_batched(cards_to_tensor(hands, batch.device)).tolist()
        for hand, evaluation, score in zip(hands, evaluations, scores):
            if score != evaluation.score:
                stats["batch_errors"] += 1
                logger.warning("Batch mismatch for %s: %d != %d", hand, score, evaluation.score)

    return stats


def main():
    parser = argparse.ArgumentParser(description="Smoke test for the poker hand evaluator")
    parser.add_argument(
        "--hands",
        type=int,
        default=1000,
        help="Number of random hands to evaluate (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: None for random)",
    )
    parser.add_argument(
        "--device",
        type=str,
        default=None,
        help="Torch device for the batch check (default: cuda if available)",
    )
    parser.add_argument(
        "--no-batch",
        action="store_true",
        help="Skip the batched evaluator parity check",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed output",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.hands < 1:
        print("Error: --hands must be at least 1")
        sys.exit(1)

    config = SmokeConfig(
        num_hands=args.hands,
        seed=args.seed,
        batch_check=not args.no_batch,
        device=args.device,
        verbose=args.verbose,
    )

    print(f"Evaluating {config.num_hands} hand(s)...")
    start_time = time.time()
    stats = run_smoke(config)
    elapsed = time.time() - start_time

    print(f"\n=== Summary (seed={stats['seed']}) ===")
    for category in HandCategory:
        print(f"  {category.label:<16} {stats['categories'][category.name]}")
    print(f"  Time: {elapsed:.2f}s")
    print(f"  Category errors: {stats['category_errors']}")
    print(f"  Symmetry errors: {stats['symmetry_errors']}")
    print(f"  Score errors: {stats['score_errors']}")
    print(f"  Batch errors: {stats['batch_errors']}")

    errors = (
        stats["category_errors"]
        + stats["symmetry_errors"]
        + stats["score_errors"]
        + stats["batch_errors"]
    )
    if errors > 0:
        print(f"\nFAILED: {errors} error(s) detected")
        sys.exit(1)

    print("\nPASSED: All checks completed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
