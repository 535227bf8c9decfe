"""
Payoff calculation API endpoints.

These endpoints accept loan inputs and return calculated results.
Loan inputs are validated before any scenario is computed.
"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from equity_payoff.config import get_settings
from equity_payoff.calculations.amortization import (
    calculate_monthly_payment,
    calculate_total_interest,
    calculate_total_principal,
    generate_amortization_schedule,
    is_paid_off,
)
from equity_payoff.calculations.formatting import format_currency, format_percentage
from equity_payoff.calculations.payoff import (
    LoanInputs,
    calculate_all_scenarios,
    calculate_negative_equity,
    calculate_payoff_curves,
    calculate_payoff_scenario,
)
from equity_payoff.calculations.validation import PartialLoanInputs, validate_inputs

logger = logging.getLogger(__name__)

router = APIRouter()

# Upper bound on any term or horizon accepted from a request
MAX_MONTHS = get_settings().schedule_max_months


class LoanInputsPayload(BaseModel):
    """Loan inputs as entered by the user."""

    remaining_balance: Optional[float] = None
    vehicle_value: Optional[float] = None
    current_monthly_payment: Optional[float] = None
    annual_interest_rate: Optional[float] = None  # Percentage (e.g., 6.5)


class ValidationResponse(BaseModel):
    """Validation outcome with messages keyed by field name."""

    is_valid: bool
    errors: Dict[str, str]


class ScenarioResponse(BaseModel):
    """A single payoff scenario."""

    timeline: int
    negative_equity: float
    extra_monthly_payment: float
    total_monthly_payment: float
    total_paid: float
    total_interest_paid: float
    note: str
    achievable: bool


class FormattedScenario(BaseModel):
    """Display strings for a payoff scenario."""

    timeline: int
    extra_monthly_payment: str
    total_monthly_payment: str
    total_paid: str
    total_interest_paid: str


class ScenariosResponse(BaseModel):
    """All payoff scenarios for a set of loan inputs."""

    negative_equity: float
    annual_interest_rate: str
    scenarios: List[ScenarioResponse]
    formatted: List[FormattedScenario]


def require_valid_inputs(payload: LoanInputsPayload) -> LoanInputs:
    """Validate a payload and convert it to engine inputs, or raise 400."""
    result = validate_inputs(PartialLoanInputs(**payload.model_dump()))
    if not result.is_valid:
        errors = result.errors.as_dict()
        logger.info(f"Rejected loan inputs: {sorted(errors)}")
        raise HTTPException(status_code=400, detail=errors)
    return LoanInputs(**payload.model_dump())


@router.post("/validate", response_model=ValidationResponse)
async def validate_endpoint(payload: LoanInputsPayload):
    """Validate loan inputs without computing anything."""
    result = validate_inputs(PartialLoanInputs(**payload.model_dump()))
    return ValidationResponse(is_valid=result.is_valid, errors=result.errors.as_dict())


class NegativeEquityInput(BaseModel):
    """Input for negative equity calculation."""

    remaining_balance: float
    vehicle_value: float


@router.post("/negative-equity")
async def negative_equity_endpoint(inputs: NegativeEquityInput):
    """Calculate the amount owed above the vehicle's value."""
    return {
        "negative_equity": calculate_negative_equity(
            inputs.remaining_balance, inputs.vehicle_value
        )
    }


class PaymentInput(BaseModel):
    """Input for level payment calculation."""

    principal: float
    annual_interest_rate: float
    months: int = Field(gt=0, le=MAX_MONTHS)


@router.post("/payment")
async def payment_endpoint(inputs: PaymentInput):
    """Calculate the level monthly payment for a principal."""
    return {
        "monthly_payment": calculate_monthly_payment(
            inputs.principal, inputs.annual_interest_rate, inputs.months
        )
    }


class ScheduleInput(BaseModel):
    """Input for amortization schedule generation."""

    principal: float
    monthly_payment: float
    annual_interest_rate: float
    max_months: Optional[int] = Field(default=None, gt=0, le=MAX_MONTHS)


@router.post("/schedule")
async def schedule_endpoint(inputs: ScheduleInput):
    """Generate an amortization schedule for a fixed monthly payment."""
    max_months = inputs.max_months or get_settings().schedule_max_months

    schedule = generate_amortization_schedule(
        principal=inputs.principal,
        monthly_payment=inputs.monthly_payment,
        annual_rate=inputs.annual_interest_rate,
        max_months=max_months,
    )

    return {
        "schedule": [asdict(entry) for entry in schedule],
        "total_interest": calculate_total_interest(schedule),
        "total_principal": calculate_total_principal(schedule),
        "paid_off": is_paid_off(schedule),
    }


class ScenarioInput(BaseModel):
    """Input for a single-timeline payoff scenario."""

    inputs: LoanInputsPayload
    timeline_months: int = Field(gt=0, le=MAX_MONTHS)


@router.post("/scenario", response_model=ScenarioResponse)
async def scenario_endpoint(request: ScenarioInput):
    """Calculate the payoff scenario for one timeline."""
    inputs = require_valid_inputs(request.inputs)
    scenario = calculate_payoff_scenario(inputs, request.timeline_months)
    return ScenarioResponse(**asdict(scenario))


@router.post("/scenarios", response_model=ScenariosResponse)
async def scenarios_endpoint(payload: LoanInputsPayload):
    """Calculate payoff scenarios for every configured timeline."""
    inputs = require_valid_inputs(payload)
    scenarios = calculate_all_scenarios(inputs, get_settings().payoff_timelines)

    return ScenariosResponse(
        negative_equity=calculate_negative_equity(
            inputs.remaining_balance, inputs.vehicle_value
        ),
        annual_interest_rate=format_percentage(inputs.annual_interest_rate),
        scenarios=[ScenarioResponse(**asdict(s)) for s in scenarios],
        formatted=[
            FormattedScenario(
                timeline=s.timeline,
                extra_monthly_payment=format_currency(s.extra_monthly_payment),
                total_monthly_payment=format_currency(s.total_monthly_payment),
                total_paid=format_currency(s.total_paid),
                total_interest_paid=format_currency(s.total_interest_paid),
            )
            for s in scenarios
        ],
    )


@router.post("/payoff-curve")
async def payoff_curve_endpoint(payload: LoanInputsPayload):
    """Remaining negative equity month by month for each timeline."""
    inputs = require_valid_inputs(payload)
    scenarios = calculate_all_scenarios(inputs, get_settings().payoff_timelines)
    return {"points": calculate_payoff_curves(scenarios, inputs.annual_interest_rate)}
