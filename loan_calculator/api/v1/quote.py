"""POST /v1/quote - Maximum loan affordability endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from loan_calculator.api.v1.schemas import QuoteRequest, QuoteResponse, QuoteDisplay
from loan_calculator.api.v1.errors import validation_http_error
from loan_calculator.api.dependencies import get_request_id
from loan_calculator.config import settings
from loan_calculator.domain.models import LoanInputs, LoanQuote
from loan_calculator.domain.affordability import monthly_rate, quote_for_inputs
from loan_calculator.domain.validation import is_missing, parse_loan_inputs
from loan_calculator.domain.exceptions import ValidationError
from loan_calculator.infrastructure.observability.metrics import record_quote, record_validation_failure
from loan_calculator.infrastructure.observability.logging import log_quote
from loan_calculator.utils.formatting import format_currency, format_rate

router = APIRouter()


def build_quote_response(inputs: LoanInputs, quote: LoanQuote) -> QuoteResponse:
    """Combine exact quote values with their display strings"""
    return QuoteResponse(
        max_principal=quote.max_principal,
        monthly_payment=quote.monthly_payment,
        monthly_rate=monthly_rate(inputs.annual_rate_percent),
        annual_rate_percent=inputs.annual_rate_percent,
        tenor_months=inputs.tenor_months,
        currency=settings.currency,
        display=QuoteDisplay(
            max_principal=format_currency(quote.max_principal, settings.currency),
            monthly_payment=format_currency(quote.monthly_payment, settings.currency),
            income=format_currency(inputs.income, settings.currency),
            annual_rate=format_rate(inputs.annual_rate_percent),
        ),
    )


def run_quote(request_body: QuoteRequest, request_id: str) -> tuple[LoanInputs, LoanQuote]:
    """
    Validate form entry and calculate the quote.

    Raises:
        HTTPException: 422 with error code when an input is rejected
    """
    start_time = time.time()

    annual_rate_percent = request_body.annual_rate_percent
    if is_missing(annual_rate_percent):
        annual_rate_percent = settings.default_annual_rate_percent

    try:
        inputs = parse_loan_inputs(
            request_body.income,
            annual_rate_percent,
            request_body.tenor_months,
        )
    except ValidationError as e:
        record_validation_failure(e.code)
        raise validation_http_error(e, request_id)

    quote = quote_for_inputs(inputs)

    duration_ms = (time.time() - start_time) * 1000
    record_quote(quote.max_principal)
    log_quote(request_id, inputs, quote, duration_ms)

    return inputs, quote


@router.post("/quote", response_model=QuoteResponse)
def create_quote(request_body: QuoteRequest, request: Request):
    """
    Estimate how much the borrower can borrow.

    Flow:
    1. Validate income, rate and tenor
    2. Take 40% of income as the affordable monthly payment
    3. Discount that payment over the tenor to the maximum principal
    4. Return exact figures plus display strings
    """
    request_id = get_request_id(request)

    try:
        inputs, quote = run_quote(request_body, request_id)
        return build_quote_response(inputs, quote)

    except HTTPException:
        raise

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
