"""
API routes for the payoff calculator.
"""

from fastapi import APIRouter

from equity_payoff.api import calculations, export

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(export.router, prefix="/export", tags=["export"])
