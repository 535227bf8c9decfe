"""
Scenario export endpoints.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from equity_payoff.config import get_settings
from equity_payoff.api.calculations import LoanInputsPayload, require_valid_inputs
from equity_payoff.calculations.payoff import calculate_all_scenarios
from equity_payoff.services.export import (
    build_scenarios_csv,
    export_filename,
    has_exportable_scenarios,
)

router = APIRouter()


@router.post("/scenarios")
async def export_scenarios(payload: LoanInputsPayload):
    """Download payoff scenarios as a CSV file."""
    inputs = require_valid_inputs(payload)
    scenarios = calculate_all_scenarios(inputs, get_settings().payoff_timelines)

    if not has_exportable_scenarios(scenarios):
        raise HTTPException(status_code=400, detail="No negative equity to export")

    return Response(
        content=build_scenarios_csv(scenarios, inputs),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )
