"""Affordability engine - maximum loan principal from net monthly income"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP

from loan_calculator.domain.models import LoanInputs, LoanQuote
from loan_calculator.domain.validation import RawNumber, parse_loan_inputs

logger = logging.getLogger(__name__)

# Share of net monthly income assumed available for loan repayment
DEBT_SERVICE_RATIO = 0.4


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate"""
    return annual_rate_percent / 100 / 12


def payment_for_principal(principal: float, rate: float, months: int) -> float:
    """Level monthly payment that repays principal over months at rate"""
    if rate == 0:
        return principal / months
    growth = (1 + rate) ** months
    return principal * (rate * growth) / (growth - 1)


def principal_for_payment(payment: float, rate: float, months: int) -> float:
    """Present value of months level payments at rate (inverse of payment_for_principal)"""
    if rate == 0:
        return payment * months
    return payment * (1 - (1 + rate) ** -months) / rate


def round_to_unit(value: float) -> float:
    """Round half up to the nearest whole currency unit"""
    return float(math.floor(value + 0.5))


def round_to_cents(value: float) -> float:
    """Round half up to 2 decimal places, using the exact binary value"""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def quote_for_inputs(inputs: LoanInputs) -> LoanQuote:
    """
    Calculate maximum principal and monthly payment for validated inputs.

    Formula (present value of an annuity):
    - affordable payment = income * 40%
    - max principal = payment * (1 - (1+r)^-n) / r
    - monthly payment = principal * r(1+r)^n / ((1+r)^n - 1)

    At a zero rate the loan is simply payment * n, repaid in equal parts.
    """
    rate = monthly_rate(inputs.annual_rate_percent)
    affordable_payment = inputs.income * DEBT_SERVICE_RATIO

    if rate == 0:
        max_principal = affordable_payment * inputs.tenor_months
        payment = affordable_payment
    else:
        max_principal = principal_for_payment(affordable_payment, rate, inputs.tenor_months)
        payment = payment_for_principal(max_principal, rate, inputs.tenor_months)

    quote = LoanQuote(
        max_principal=round_to_unit(max_principal),
        monthly_payment=round_to_cents(payment),
    )
    logger.debug(
        "Quote calculated",
        extra={
            "monthly_rate": rate,
            "tenor_months": inputs.tenor_months,
            "max_principal": quote.max_principal,
        },
    )
    return quote


def compute_quote(
    income: RawNumber,
    annual_rate_percent: RawNumber,
    tenor_months: RawNumber,
) -> LoanQuote:
    """
    Main entry point: validate raw entry and quote the maximum loan.

    Raises:
        ValidationError: missing field, non-numeric value, or tenor/rate out of range
    """
    inputs = parse_loan_inputs(income, annual_rate_percent, tenor_months)
    return quote_for_inputs(inputs)
