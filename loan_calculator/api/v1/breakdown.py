"""POST /v1/breakdown - Quote followed by its repayment schedule"""

import random
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from loan_calculator.api.v1.schemas import BreakdownRequest, BreakdownResponse
from loan_calculator.api.v1.quote import build_quote_response, run_quote
from loan_calculator.api.v1.schedule import build_schedule_response, run_schedule
from loan_calculator.api.dependencies import get_random_source, get_request_id

router = APIRouter()


@router.post("/breakdown", response_model=BreakdownResponse)
def create_breakdown(
    request_body: BreakdownRequest,
    request: Request,
    rng: random.Random = Depends(get_random_source),
):
    """
    Calculate the maximum loan, then break its repayment down by month.

    Flow:
    1. Validate entry and quote principal and payment
    2. Generate the schedule from the quoted figures
    3. Return both
    """
    request_id = get_request_id(request)

    if request_body.seed is not None:
        rng = random.Random(request_body.seed)

    try:
        inputs, quote = run_quote(request_body, request_id)
        rows = run_schedule(
            quote.max_principal,
            quote.monthly_payment,
            inputs.annual_rate_percent,
            inputs.tenor_months,
            rng,
            request_id,
        )
        return BreakdownResponse(
            quote=build_quote_response(inputs, quote),
            schedule=build_schedule_response(rows),
        )

    except HTTPException:
        raise

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
