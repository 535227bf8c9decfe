"""
Loan Input Validation

Advisory checks on user-entered loan values. The calculation functions accept
raw numbers unconditionally; callers decide whether to enforce these rules
before computing scenarios.
"""

import math
from typing import Dict, Optional
from dataclasses import dataclass, fields

MAX_ANNUAL_INTEREST_RATE = 50.0

REMAINING_BALANCE_MESSAGE = "Remaining balance must be greater than 0"
VEHICLE_VALUE_MESSAGE = "Vehicle value must be greater than 0"
CURRENT_MONTHLY_PAYMENT_MESSAGE = "Current monthly payment must be greater than 0"
INTEREST_RATE_MESSAGE = "Interest rate must be between 0% and 50%"


@dataclass(frozen=True)
class PartialLoanInputs:
    """Loan inputs as entered; any field may still be missing."""

    remaining_balance: Optional[float] = None
    vehicle_value: Optional[float] = None
    current_monthly_payment: Optional[float] = None
    annual_interest_rate: Optional[float] = None


@dataclass(frozen=True)
class ValidationErrors:
    """One optional message per loan input field."""

    remaining_balance: Optional[str] = None
    vehicle_value: Optional[str] = None
    current_monthly_payment: Optional[str] = None
    annual_interest_rate: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        """Messages keyed by field name, failing fields only."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def __len__(self) -> int:
        return len(self.as_dict())


@dataclass(frozen=True)
class ValidationResult:
    errors: ValidationErrors

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


def _is_missing(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def _not_positive(value: Optional[float]) -> bool:
    return _is_missing(value) or value <= 0


def validate_inputs(inputs: PartialLoanInputs) -> ValidationResult:
    """
    Validate loan inputs.

    Rules:
        remaining_balance > 0
        vehicle_value > 0
        current_monthly_payment > 0
        0 <= annual_interest_rate <= 50

    Missing or NaN values fail their rule. Accepts a PartialLoanInputs or any
    object with the same attributes (e.g. a complete LoanInputs).
    """
    rate = inputs.annual_interest_rate
    rate_invalid = (
        _is_missing(rate) or rate < 0 or rate > MAX_ANNUAL_INTEREST_RATE
    )

    errors = ValidationErrors(
        remaining_balance=(
            REMAINING_BALANCE_MESSAGE if _not_positive(inputs.remaining_balance) else None
        ),
        vehicle_value=(
            VEHICLE_VALUE_MESSAGE if _not_positive(inputs.vehicle_value) else None
        ),
        current_monthly_payment=(
            CURRENT_MONTHLY_PAYMENT_MESSAGE
            if _not_positive(inputs.current_monthly_payment)
            else None
        ),
        annual_interest_rate=INTEREST_RATE_MESSAGE if rate_invalid else None,
    )

    return ValidationResult(errors=errors)
