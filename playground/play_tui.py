#!/usr/bin/env python3
"""
Compare two poker hands in the terminal.

Usage:
   python playground/play_tui.py
   python playground/play_tui.py --first "AH AS KD KC QH" --second "KH KS QD QC JH"

Input tips:
- Cards are rank + suit separated by spaces: "10H JH QH KH AH"
- Suits may be symbols (♥ ♦ ♠ ♣) or letters (H D S C)
- "quit": exit
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from poker_eval.rules import (
    Card,
    Hand,
    HandError,
    HandEvaluation,
    InvalidInput,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    Suit,
    compare_evaluations,
    evaluate_hand,
    hand_from_string,
)


# ==============================================================================
# Constants & Config
# ==============================================================================

COLOR_HEART = "red1"
COLOR_DIAMOND = "red1"
COLOR_CLUB = "green1"
COLOR_SPADE = "cyan1"
COLOR_HIGHLIGHT = "yellow"

SUIT_COLORS = {
    Suit.HEART: COLOR_HEART,
    Suit.DIAMOND: COLOR_DIAMOND,
    Suit.SPADE: COLOR_SPADE,
    Suit.CLUB: COLOR_CLUB,
}

QUIT_WORDS = {"q", "quit", "exit"}

console = Console()
logger = logging.getLogger(__name__)

# ==============================================================================
# UI Helpers
# ==============================================================================

def get_card_rich_text(card: Card) -> Text:
    """Return a Rich Text object for a card with symbol and color."""
    rank_char = RANK_SYMBOLS[card.rank]
    symbol = SUIT_SYMBOLS[card.suit]
    style = f"bold {SUIT_COLORS[card.suit]}"

    line1 = f"{rank_char:<2}   "
    line2 = f"  {symbol}  "
    line3 = f"   {rank_char:>2}"
    return Text(f"{line1}\n{line2}\n{line3}", style=style)


def render_hand_visual(hand: Hand) -> Table:
    """Render a horizontal row of cards."""
    grid = Table.grid(padding=(0, 1))
    grid.add_row(*[Panel(get_card_rich_text(c), expand=False, padding=(0, 1), border_style="white") for c in hand])
    return grid


def build_evaluation_table(evaluation: HandEvaluation) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_row("Category", Text(evaluation.category.label, style=f"bold {COLOR_HIGHLIGHT}"))
    table.add_row("Value", str(evaluation.value))
    table.add_row("Kickers", ", ".join(str(k) for k in evaluation.kickers) or "-")
    return table


def build_hand_panel(title: str, hand: Hand, evaluation: HandEvaluation, winner: bool) -> Panel:
    border = "green" if winner else "white"
    body = Group(render_hand_visual(hand), build_evaluation_table(evaluation))
    return Panel(body, title=title, subtitle=evaluation.describe(), border_style=border, box=box.ROUNDED)


def build_result_panel(result: int) -> Panel:
    if result > 0:
        text = "First hand wins"
    elif result < 0:
        text = "Second hand wins"
    else:
        text = "Tie"
    return Panel(Text(text, justify="center", style="bold green"), box=box.HEAVY)


def render_showdown(first: Hand, second: Hand) -> Group:
    """Evaluate both hands and lay out the comparison."""
    first_eval = evaluate_hand(first)
    second_eval = evaluate_hand(second)
    result = compare_evaluations(first_eval, second_eval)
    return Group(
        build_hand_panel("First", first, first_eval, result > 0),
        build_hand_panel("Second", second, second_eval, result < 0),
        build_result_panel(result),
    )


def prompt_hand(label: str) -> Optional[Hand]:
    """Ask until a valid hand is entered. Returns None on quit."""
    while True:
        raw = Prompt.ask(f"{label} hand").strip()
        if raw.lower() in QUIT_WORDS:
            return None
        try:
            return hand_from_string(raw)
        except (InvalidInput, HandError) as e:
            logger.debug("Rejected %r: %s", raw, e)
            console.print(f"[red]{e}[/red]")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Compare two five-card poker hands")
    parser.add_argument("--first", type=str, default=None, help="First hand, e.g. 'AH AS KD KC QH'")
    parser.add_argument("--second", type=str, default=None, help="Second hand")
    args = parser.parse_args(argv)

    if args.first and args.second:
        try:
            first = hand_from_string(args.first)
            second = hand_from_string(args.second)
        except (InvalidInput, HandError) as e:
            console.print(f"[red]{e}[/red]")
            return
        console.print(render_showdown(first, second))
        return

    console.print(Panel("[bold cyan]Hand Showdown[/bold cyan]", box=box.HEAVY))
    while True:
        first = prompt_hand("First")
        if first is None:
            break
        second = prompt_hand("Second")
        if second is None:
            break
        console.print(render_showdown(first, second))

        again = Prompt.ask("Compare again? (y/n)", default="y", choices=["y", "n"])
        if again != "y":
            break


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nBye.")
