#!/usr/bin/env python3
import logging
import os
from typing import Dict, List

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from poker_eval.rules import (
    Card,
    Hand,
    HandError,
    HandEvaluation,
    InvalidInput,
    compare_evaluations,
    describe_categories,
    evaluate_hand,
    make_hand,
)

logger = logging.getLogger(__name__)

# ==============================================================================
# Helpers
# ==============================================================================

def parse_request_hand(cards: List[str]) -> Hand:
    """Build a validated hand or fail with HTTP 400."""
    try:
        return make_hand([Card.from_string(c.strip()) for c in cards])
    except (InvalidInput, HandError) as e:
        logger.info("Rejected hand %s: %s", cards, e)
        raise HTTPException(status_code=400, detail=str(e))


def evaluation_payload(hand: Hand, evaluation: HandEvaluation) -> Dict:
    return {
        "cards": [str(card) for card in hand],
        "category": evaluation.category.name,
        "label": evaluation.category.label,
        "value": evaluation.value,
        "kickers": list(evaluation.kickers),
        "description": evaluation.describe(),
    }


# ==============================================================================
# API
# ==============================================================================

app = FastAPI(title="Poker Eval")


class EvaluateRequest(BaseModel):
    cards: List[str]


class CompareRequest(BaseModel):
    first: List[str]
    second: List[str]


@app.get("/api/categories")
def api_categories():
    return {
        "categories": [
            {"name": category.name, "label": category.label, "strength": int(category), "requires": text}
            for category, text in describe_categories().items()
        ]
    }


@app.post("/api/evaluate")
def api_evaluate(req: EvaluateRequest):
    hand = parse_request_hand(req.cards)
    return evaluation_payload(hand, evaluate_hand(hand))


@app.post("/api/compare")
def api_compare(req: CompareRequest):
    first = parse_request_hand(req.first)
    second = parse_request_hand(req.second)
    first_eval = evaluate_hand(first)
    second_eval = evaluate_hand(second)
    result = compare_evaluations(first_eval, second_eval)
    winner = "first" if result > 0 else "second" if result < 0 else "tie"
    return {
        "first": evaluation_payload(first, first_eval),
        "second": evaluation_payload(second, second_eval),
        "result": result,
        "winner": winner,
    }

if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("POKER_EVAL_LOG_LEVEL", "INFO").upper())
    try:
        host = os.getenv("POKER_EVAL_HOST", "0.0.0.0")
        port = int(os.getenv("POKER_EVAL_PORT", "8000"))
        print(f"Starting server at http://{host}:{port}")
        uvicorn.run(app, host=host, port=port)
    except KeyboardInterrupt:
        pass
