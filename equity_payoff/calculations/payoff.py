"""
Negative Equity Payoff Scenarios

Derives negative equity (loan balance above the vehicle's value) and solves
the extra monthly payment needed to retire it over a set of payoff timelines.

Scenario totals follow a flat projection: total_paid is the total monthly
payment times the timeline, not the sum of the schedule payments. The two can
differ slightly when the schedule retires the balance early.
"""

import logging
from typing import List, Dict, Sequence
from dataclasses import dataclass

from equity_payoff.calculations.amortization import (
    calculate_monthly_payment,
    calculate_total_interest,
    generate_amortization_schedule,
)

logger = logging.getLogger(__name__)

PAYOFF_TIMELINES = (6, 12, 18, 24)

# Strategy tiers by timeline length (months, inclusive upper bounds)
AGGRESSIVE_MAX_MONTHS = 6
MODERATE_MAX_MONTHS = 12

NOTE_NO_NEGATIVE_EQUITY = "No negative equity - vehicle value exceeds loan balance"
NOTE_AGGRESSIVE = "Aggressive - Fastest payoff"
NOTE_MODERATE = "Moderate - Balanced approach"
NOTE_CONSERVATIVE = "Conservative - Lower monthly burden"


@dataclass(frozen=True)
class LoanInputs:
    """Current state of a vehicle loan."""

    remaining_balance: float
    vehicle_value: float
    current_monthly_payment: float
    annual_interest_rate: float  # Percentage (e.g., 6.5 for 6.5%)


@dataclass(frozen=True)
class PayoffScenario:
    """Payment plan that retires the negative equity over one timeline."""

    timeline: int  # months
    negative_equity: float
    extra_monthly_payment: float
    total_monthly_payment: float
    total_paid: float
    total_interest_paid: float
    note: str
    achievable: bool


def calculate_negative_equity(remaining_balance: float, vehicle_value: float) -> float:
    """Amount owed above the vehicle's value, or 0 when there is none."""
    equity = remaining_balance - vehicle_value
    return equity if equity > 0 else 0.0


def strategy_note(timeline_months: int) -> str:
    """Label a payoff timeline by how aggressive it is."""
    if timeline_months <= AGGRESSIVE_MAX_MONTHS:
        return NOTE_AGGRESSIVE
    if timeline_months <= MODERATE_MAX_MONTHS:
        return NOTE_MODERATE
    return NOTE_CONSERVATIVE


def calculate_payoff_scenario(inputs: LoanInputs, timeline_months: int) -> PayoffScenario:
    """
    Calculate the payoff scenario for a single timeline.

    The extra payment is the level payment that amortizes the negative equity
    at the loan's rate over the timeline. Interest is the sum of the interest
    column of that amortization.

    Args:
        inputs: Loan inputs
        timeline_months: Payoff timeline in months, must be positive

    Returns:
        PayoffScenario for the timeline
    """
    negative_equity = calculate_negative_equity(
        inputs.remaining_balance, inputs.vehicle_value
    )

    if negative_equity == 0:
        return PayoffScenario(
            timeline=timeline_months,
            negative_equity=0.0,
            extra_monthly_payment=0.0,
            total_monthly_payment=inputs.current_monthly_payment,
            total_paid=inputs.current_monthly_payment * timeline_months,
            total_interest_paid=0.0,
            note=NOTE_NO_NEGATIVE_EQUITY,
            achievable=True,
        )

    extra_payment = calculate_monthly_payment(
        negative_equity, inputs.annual_interest_rate, timeline_months
    )
    total_payment = inputs.current_monthly_payment + extra_payment

    schedule = generate_amortization_schedule(
        negative_equity,
        extra_payment,
        inputs.annual_interest_rate,
        max_months=timeline_months,
    )
    total_interest = calculate_total_interest(schedule)

    logger.debug(
        f"Payoff over {timeline_months} months: extra={extra_payment:.2f} "
        f"interest={total_interest:.2f} ({len(schedule)} schedule rows)"
    )

    return PayoffScenario(
        timeline=timeline_months,
        negative_equity=negative_equity,
        extra_monthly_payment=extra_payment,
        total_monthly_payment=total_payment,
        total_paid=total_payment * timeline_months,
        total_interest_paid=total_interest,
        note=strategy_note(timeline_months),
        # No feasibility ceiling is applied to the extra payment
        achievable=True,
    )


def calculate_all_scenarios(
    inputs: LoanInputs, timelines: Sequence[int] = PAYOFF_TIMELINES
) -> List[PayoffScenario]:
    """Calculate one scenario per timeline, in the order the timelines are given."""
    return [calculate_payoff_scenario(inputs, timeline) for timeline in timelines]


def curve_key(timeline: int) -> str:
    return f"{timeline}mo"


def calculate_payoff_curves(
    scenarios: Sequence[PayoffScenario], annual_rate: float
) -> List[Dict]:
    """
    Remaining negative equity month by month for each scenario.

    Produces one point per month from 0 to the longest timeline. Each point
    carries a "<timeline>mo" key for every scenario whose timeline covers that
    month: month 0 is the full negative equity, later months take the
    schedule's remaining balance and 0 once the schedule has ended.

    Args:
        scenarios: Scenarios as returned by calculate_all_scenarios
        annual_rate: Annual interest rate as a percentage

    Returns:
        List of {"month": int, "<timeline>mo": float, ...} points, empty when
        there is no negative equity
    """
    if not scenarios or scenarios[0].negative_equity == 0:
        return []

    balances = {}
    for scenario in scenarios:
        if scenario.negative_equity <= 0:
            continue
        schedule = generate_amortization_schedule(
            scenario.negative_equity,
            scenario.extra_monthly_payment,
            annual_rate,
            max_months=scenario.timeline,
        )
        balances[scenario.timeline] = [scenario.negative_equity] + [
            entry.remaining_balance for entry in schedule
        ]

    max_months = max(scenario.timeline for scenario in scenarios)
    points = []
    for month in range(max_months + 1):
        point: Dict = {"month": month}
        for timeline, series in balances.items():
            if month > timeline:
                continue
            point[curve_key(timeline)] = series[month] if month < len(series) else 0.0
        points.append(point)

    return points
