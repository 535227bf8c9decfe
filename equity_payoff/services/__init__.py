"""
Application services module.
"""

from equity_payoff.services.export import build_scenarios_csv, export_filename

__all__ = ["build_scenarios_csv", "export_filename"]
