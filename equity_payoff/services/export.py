"""
Scenario export to CSV.

Builds the downloadable CSV: a header block summarizing the loan inputs
followed by one row per payoff scenario. Every cell is quoted.
"""

import csv
import io
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence

from equity_payoff.calculations.payoff import LoanInputs, PayoffScenario

logger = logging.getLogger(__name__)

EXPORT_TITLE = "Negative Equity Payment Calculator - Export"

SCENARIO_COLUMNS = [
    "Timeline (Months)",
    "Negative Equity",
    "Extra Monthly Payment",
    "Total Monthly Payment",
    "Total Amount Paid",
    "Total Interest Paid",
    "Strategy Note",
]


def _money(value: float) -> str:
    return f"{value:.2f}"


def has_exportable_scenarios(scenarios: Sequence[PayoffScenario]) -> bool:
    """Exports only make sense when there is negative equity to retire."""
    return bool(scenarios) and scenarios[0].negative_equity != 0


def export_filename(day: Optional[date] = None) -> str:
    """Download file name, stamped with the export date."""
    if day is None:
        day = date.today()
    return f"negative-equity-scenarios-{day.isoformat()}.csv"


def scenario_row(scenario: PayoffScenario) -> List[str]:
    return [
        str(scenario.timeline),
        _money(scenario.negative_equity),
        _money(scenario.extra_monthly_payment),
        _money(scenario.total_monthly_payment),
        _money(scenario.total_paid),
        _money(scenario.total_interest_paid),
        scenario.note,
    ]


def build_scenarios_csv(
    scenarios: Sequence[PayoffScenario],
    inputs: LoanInputs,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Serialize scenarios and the inputs they were computed from.

    Args:
        scenarios: Payoff scenarios, written in the given order
        inputs: Loan inputs summarized in the header block
        generated_at: Timestamp written on the "Generated on:" row

    Returns:
        CSV text with "\\n" line endings
    """
    if generated_at is None:
        generated_at = datetime.now()

    rows: List[List[str]] = [
        [EXPORT_TITLE],
        ["Generated on:", generated_at.strftime("%Y-%m-%d %H:%M:%S")],
        [""],
        ["Input Summary:"],
        ["Remaining Loan Balance:", _money(inputs.remaining_balance)],
        ["Vehicle Estimated Value:", _money(inputs.vehicle_value)],
        ["Current Monthly Payment:", _money(inputs.current_monthly_payment)],
        ["Annual Interest Rate:", f"{inputs.annual_interest_rate:.2f}%"],
        [""],
        ["Payoff Scenarios:"],
        SCENARIO_COLUMNS,
    ]
    rows.extend(scenario_row(scenario) for scenario in scenarios)

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)

    logger.info(f"Exported {len(scenarios)} payoff scenarios to CSV")
    return buffer.getvalue()
