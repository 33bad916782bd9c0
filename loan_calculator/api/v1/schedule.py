"""POST /v1/schedule - Month-by-month repayment breakdown"""

import time
import random
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request

from loan_calculator.api.v1.schemas import (
    ScheduleRequest,
    ScheduleResponse,
    ScheduleRowSchema,
    ScheduleRowDisplay,
)
from loan_calculator.api.v1.errors import validation_http_error
from loan_calculator.api.dependencies import get_random_source, get_request_id
from loan_calculator.config import settings
from loan_calculator.domain.models import AmortizationRow
from loan_calculator.domain.amortization import generate_schedule
from loan_calculator.domain.validation import is_missing
from loan_calculator.domain.exceptions import ValidationError
from loan_calculator.infrastructure.observability.metrics import record_schedule
from loan_calculator.infrastructure.observability.logging import log_schedule
from loan_calculator.utils.formatting import format_schedule_row

router = APIRouter()


def build_schedule_response(rows: List[AmortizationRow]) -> ScheduleResponse:
    """Exact rows plus display rows for the breakdown table"""
    return ScheduleResponse(
        months=len(rows),
        paid_off=bool(rows) and rows[-1].remaining_balance <= 0,
        rows=[
            ScheduleRowSchema(
                month=row.month,
                amount_paid=row.amount_paid,
                interest_paid=row.interest_paid,
                remaining_balance=row.remaining_balance,
            )
            for row in rows
        ],
        display_rows=[ScheduleRowDisplay(**format_schedule_row(row)) for row in rows],
    )


def run_schedule(
    principal,
    monthly_payment,
    annual_rate_percent,
    tenor_months,
    rng: random.Random,
    request_id: str,
) -> List[AmortizationRow]:
    """
    Generate the schedule and record its outcome.

    Raises:
        HTTPException: 422 with error code when an input is rejected
    """
    start_time = time.time()

    if is_missing(annual_rate_percent):
        annual_rate_percent = settings.default_annual_rate_percent

    try:
        rows = generate_schedule(
            principal,
            monthly_payment,
            annual_rate_percent,
            tenor_months,
            rng=rng,
            variance=settings.payment_variance,
        )
    except ValidationError as e:
        raise validation_http_error(e, request_id)

    duration_ms = (time.time() - start_time) * 1000
    months_requested = int(float(tenor_months))
    record_schedule(months_requested, len(rows))
    log_schedule(request_id, months_requested, len(rows), duration_ms)

    return rows


@router.post("/schedule", response_model=ScheduleResponse)
def create_schedule(
    request_body: ScheduleRequest,
    request: Request,
    rng: random.Random = Depends(get_random_source),
):
    """
    Build a repayment breakdown for a given principal and payment.

    Payments vary by up to +/-5% each month, so repeated calls differ
    unless a seed is supplied.
    """
    request_id = get_request_id(request)

    if request_body.seed is not None:
        rng = random.Random(request_body.seed)

    try:
        rows = run_schedule(
            request_body.principal,
            request_body.monthly_payment,
            request_body.annual_rate_percent,
            request_body.tenor_months,
            rng,
            request_id,
        )
        return build_schedule_response(rows)

    except HTTPException:
        raise

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
