"""Repayment schedule generation with irregular monthly payments"""

import logging
import random
from typing import List, Optional

from loan_calculator.domain.models import AmortizationRow
from loan_calculator.domain.affordability import monthly_rate
from loan_calculator.domain.validation import check_amount, check_rate, check_tenor

logger = logging.getLogger(__name__)

# Maximum relative deviation of an actual payment from the nominal one
PAYMENT_VARIANCE = 0.05


def generate_schedule(
    principal: float,
    monthly_payment: float,
    annual_rate_percent: float,
    tenor_months: int,
    rng: Optional[random.Random] = None,
    variance: float = PAYMENT_VARIANCE,
) -> List[AmortizationRow]:
    """
    Generate a month-by-month repayment breakdown.

    Each month the borrower pays the nominal payment shifted by a uniform
    draw in [-variance, +variance], so two calls with the same inputs give
    different rows. Pass a seeded random.Random (or any object with a
    uniform(a, b) method) to make the schedule repeatable.

    Per month:
    - interest accrues on the opening balance
    - the rest of the payment reduces the balance, never below zero
    - a payment smaller than the interest leaves the balance unchanged
    - the schedule ends early once the balance reaches zero

    Args:
        principal: Opening loan balance
        monthly_payment: Nominal payment before variance
        annual_rate_percent: Annual interest rate, e.g. 22 for 22%
        tenor_months: Maximum number of rows
        rng: Random source for payment variance (default: fresh random.Random)
        variance: Variance bound as a fraction of the payment

    Returns:
        Rows in month order, at most tenor_months long

    Raises:
        ValidationError: negative amounts, rate outside 0-50% or tenor outside 1-360
    """
    balance = check_amount(principal, "principal")
    payment = check_amount(monthly_payment, "monthly_payment")
    rate = monthly_rate(check_rate(annual_rate_percent))
    months = check_tenor(tenor_months)

    if rng is None:
        rng = random.Random()

    rows: List[AmortizationRow] = []
    for month in range(1, months + 1):
        actual_payment = max(0.0, payment * (1 + rng.uniform(-variance, variance)))

        interest = balance * rate
        if actual_payment >= balance + interest:
            # (balance + interest) - interest can leave a float residue
            principal_paid = balance
        else:
            principal_paid = min(max(actual_payment - interest, 0.0), balance)
        balance = max(0.0, balance - principal_paid)

        rows.append(
            AmortizationRow(
                month=month,
                amount_paid=actual_payment,
                interest_paid=interest,
                remaining_balance=balance,
            )
        )

        if balance <= 0:
            break

    logger.debug(
        "Schedule generated",
        extra={"tenor_months": months, "rows": len(rows), "paid_off": balance <= 0},
    )
    return rows
