"""
Loan Amortization Calculations

Implements the level monthly payment formula and a month-by-month
amortization schedule used to retire a principal amount.
"""

from typing import List
from dataclasses import dataclass

DEFAULT_MAX_MONTHS = 360
ZERO_BALANCE_THRESHOLD = 0.01


@dataclass(frozen=True)
class AmortizationEntry:
    """One month of an amortization schedule."""

    month: int  # 1-based period index
    payment: float
    principal: float
    interest: float
    remaining_balance: float


def monthly_rate(annual_rate: float) -> float:
    """Convert an annual percentage rate (e.g. 6.5) to a monthly decimal rate."""
    return annual_rate / 100 / 12


def calculate_monthly_payment(
    principal: float, annual_rate: float, months: int
) -> float:
    """
    Calculate the level monthly payment that fully amortizes a principal.

    M = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Args:
        principal: Amount to amortize
        annual_rate: Annual interest rate as a percentage (e.g., 6.5 for 6.5%)
        months: Number of monthly payments, must be positive

    Returns:
        Monthly payment amount
    """
    rate = monthly_rate(annual_rate)

    if rate == 0:
        return principal / months

    # Same as P * r * (1 + r)^n / ((1 + r)^n - 1); stays finite for very long terms
    return principal * rate / (1 - (1 + rate) ** -months)


def generate_amortization_schedule(
    principal: float,
    monthly_payment: float,
    annual_rate: float,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> List[AmortizationEntry]:
    """
    Generate an amortization schedule for a fixed monthly payment.

    The schedule stops as soon as the balance is paid down to the zero
    threshold or once max_months periods have been produced. A payment that
    never covers the accrued interest retires no principal and runs to
    max_months with the balance left unchanged, so callers must check the
    last entry to know whether the loan is paid off.

    Args:
        principal: Starting balance
        monthly_payment: Payment applied every month
        annual_rate: Annual interest rate as a percentage
        max_months: Upper bound on the number of periods

    Returns:
        List of schedule entries
    """
    schedule: List[AmortizationEntry] = []
    balance = principal
    rate = monthly_rate(annual_rate)
    month = 0

    while balance > ZERO_BALANCE_THRESHOLD and month < max_months:
        month += 1

        interest = balance * rate
        # Payments below the accrued interest retire nothing; the balance never grows
        principal_pmt = max(0.0, monthly_payment - interest)

        # Final payment only covers what is left
        if principal_pmt > balance:
            principal_pmt = balance

        balance = max(0.0, balance - principal_pmt)

        schedule.append(
            AmortizationEntry(
                month=month,
                payment=principal_pmt + interest,
                principal=principal_pmt,
                interest=interest,
                remaining_balance=balance,
            )
        )

    return schedule


def calculate_total_interest(schedule: List[AmortizationEntry]) -> float:
    """Calculate total interest paid over a schedule."""
    return sum(entry.interest for entry in schedule)


def calculate_total_principal(schedule: List[AmortizationEntry]) -> float:
    """Calculate total principal retired over a schedule."""
    return sum(entry.principal for entry in schedule)


def is_paid_off(schedule: List[AmortizationEntry]) -> bool:
    """True when the last entry brought the balance down to the zero threshold."""
    if not schedule:
        return True
    return schedule[-1].remaining_balance <= ZERO_BALANCE_THRESHOLD
