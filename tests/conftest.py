"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from equity_payoff.calculations.payoff import LoanInputs


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def underwater_inputs():
    """Loan owing $9,200 more than the vehicle is worth."""
    return LoanInputs(
        remaining_balance=30000,
        vehicle_value=20800,
        current_monthly_payment=763,
        annual_interest_rate=6.5,
    )


@pytest.fixture
def positive_equity_inputs():
    """Loan with the vehicle worth more than the balance."""
    return LoanInputs(
        remaining_balance=15000,
        vehicle_value=18000,
        current_monthly_payment=350,
        annual_interest_rate=4.5,
    )


@pytest.fixture
def underwater_payload():
    """Request body matching underwater_inputs."""
    return {
        "remaining_balance": 30000,
        "vehicle_value": 20800,
        "current_monthly_payment": 763,
        "annual_interest_rate": 6.5,
    }
