"""Poker Eval - five-card poker hand evaluation.

Classifies five-card hands into the ten standard categories and orders
them by standard poker precedence, one hand at a time or in batches.
"""

__version__ = "0.1.0"
__author__ = "Poker Eval Team"

__all__ = ["__version__"]
