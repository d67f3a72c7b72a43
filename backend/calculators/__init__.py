"""
Deterministic quote calculation.

Pure Python math. Given the supply lines and profit percent of a quote,
produce the materials cost, suggested sale price and per-line breakdown.
"""

from .quote_calculator import InvalidInput, calculate_quote

__all__ = ["InvalidInput", "calculate_quote"]
