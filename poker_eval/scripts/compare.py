#!/usr/bin/env python
"""Evaluate one hand, or compare two hands, from the command line.

Cards are written as rank + suit, separated by spaces. Suits may be given
as symbols (♥ ♦ ♠ ♣) or letters (H D S C).

Usage:
    python -m poker_eval.scripts.compare "A♥ K♠ Q♦ J♣ 9♥"
    python -m poker_eval.scripts.compare "AH AS KD KC QH" "KH KS QD QC JH"
    python -m poker_eval.scripts.compare "AH AS KD KC QH" "KH KS QD QC JH" --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from poker_eval.rules import (
    Hand,
    HandEvaluation,
    InvalidInput,
    HandError,
    compare_evaluations,
    evaluate_hand,
    hand_from_string,
)

logger = logging.getLogger(__name__)

# Exit status for malformed hands
EXIT_BAD_INPUT = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def evaluation_to_dict(hand: Hand, evaluation: HandEvaluation) -> dict:
    """JSON-friendly view of an evaluated hand."""
    return {
        "cards": [str(card) for card in hand],
        "category": evaluation.category.name,
        "value": evaluation.value,
        "kickers": list(evaluation.kickers),
        "description": evaluation.describe(),
    }


def format_evaluation(hand: Hand, evaluation: HandEvaluation) -> str:
    kickers = ", ".join(str(k) for k in evaluation.kickers) or "-"
    return f"{hand}: {evaluation.describe()} (value={evaluation.value}, kickers=[{kickers}])"


def run(hand_strings: List[str], as_json: bool = False) -> str:
    """Evaluate the given hands and render the report.

    Raises:
        InvalidInput: If a card cannot be parsed
        HandError: If a hand has the wrong size or repeats a card
    """
    hands = [hand_from_string(s) for s in hand_strings]
    evaluations = [evaluate_hand(hand) for hand in hands]
    result: Optional[int] = None
    if len(hands) == 2:
        result = compare_evaluations(evaluations[0], evaluations[1])

    if as_json:
        payload = {"hands": [evaluation_to_dict(h, e) for h, e in zip(hands, evaluations)]}
        if result is not None:
            payload["result"] = result
        return json.dumps(payload, ensure_ascii=False)

    lines = [format_evaluation(h, e) for h, e in zip(hands, evaluations)]
    if result is not None:
        if result > 0:
            lines.append("Winner: first hand")
        elif result < 0:
            lines.append("Winner: second hand")
        else:
            lines.append("Tie")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate or compare five-card poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_eval.scripts.compare "A♥ K♠ Q♦ J♣ 9♥"
  python -m poker_eval.scripts.compare "AH AS KD KC QH" "KH KS QD QC JH" --json
        """,
    )
    parser.add_argument("hands", nargs="+", help="One or two hands, e.g. 'AH KS QD JC 9H'")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if len(args.hands) > 2:
        parser.error("at most two hands can be compared")

    try:
        output = run(args.hands, as_json=args.json)
    except (InvalidInput, HandError) as e:
        logger.warning("Rejected input %s: %s", args.hands, e)
        print(f"Error: {e}")
        return EXIT_BAD_INPUT

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
