"""GET /v1/limits - Input bounds and defaults for the calculator form"""

from fastapi import APIRouter

from loan_calculator.api.v1.schemas import LimitsResponse
from loan_calculator.config import settings
from loan_calculator.domain.affordability import DEBT_SERVICE_RATIO
from loan_calculator.domain.validation import (
    MAX_ANNUAL_RATE_PERCENT,
    MAX_TENOR_MONTHS,
    MIN_TENOR_MONTHS,
)

router = APIRouter()


@router.get("/limits", response_model=LimitsResponse)
def get_limits():
    """Bounds the form should enforce before submitting a quote"""
    return LimitsResponse(
        min_tenor_months=MIN_TENOR_MONTHS,
        max_tenor_months=MAX_TENOR_MONTHS,
        max_annual_rate_percent=MAX_ANNUAL_RATE_PERCENT,
        rate_step=0.1,
        default_annual_rate_percent=settings.default_annual_rate_percent,
        debt_service_ratio=DEBT_SERVICE_RATIO,
        currency=settings.currency,
    )
