"""
Negative equity payoff calculator.
"""

# Keep in sync with the version declared in pyproject.toml
__version__ = "0.1.0"
