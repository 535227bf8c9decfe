"""
Negative Equity Calculation Engine

Pure calculation modules for vehicle loan negative equity payoff planning.
Every function is stateless: identical inputs always give identical outputs.
"""

from equity_payoff.calculations import amortization, payoff, validation, formatting

__all__ = ["amortization", "payoff", "validation", "formatting"]
