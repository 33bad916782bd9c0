"""Input validation for loan calculations"""

import math
from typing import Any, Union

from loan_calculator.domain.models import LoanInputs
from loan_calculator.domain.exceptions import (
    MissingFieldError,
    NotANumberError,
    TenorOutOfRangeError,
    RateOutOfRangeError,
    IncomeOutOfRangeError,
    AmountOutOfRangeError,
)

MIN_TENOR_MONTHS = 1
MAX_TENOR_MONTHS = 360
MAX_ANNUAL_RATE_PERCENT = 50.0

RawNumber = Union[int, float, str, None]


def is_missing(value: Any) -> bool:
    """True for None and blank strings (empty form fields)"""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def to_number(value: Any, field: str) -> float:
    """
    Convert a form value to a finite float.

    Raises:
        MissingFieldError: value is None or blank
        NotANumberError: value cannot be read as a finite number
    """
    if is_missing(value):
        raise MissingFieldError(f"{field} is required", field=field)

    # bool is an int subclass; a checkbox value is never a valid amount
    if isinstance(value, bool):
        raise NotANumberError(f"{field} must be a number", field=field)

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise NotANumberError(f"{field} must be a number", field=field)
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        raise NotANumberError(f"{field} must be a number", field=field)

    if not math.isfinite(number):
        raise NotANumberError(f"{field} must be a finite number", field=field)

    return number


def check_tenor(value: Any, field: str = "tenor_months") -> int:
    """Validate tenor and return it as whole months"""
    tenor = to_number(value, field)

    if tenor < MIN_TENOR_MONTHS or tenor > MAX_TENOR_MONTHS:
        raise TenorOutOfRangeError(
            f"Loan tenor must be between {MIN_TENOR_MONTHS} and {MAX_TENOR_MONTHS} months",
            field=field,
        )

    if not tenor.is_integer():
        raise NotANumberError("Loan tenor must be a whole number of months", field=field)

    return int(tenor)


def check_rate(value: Any, field: str = "annual_rate_percent") -> float:
    """Validate annual interest rate in percent"""
    rate = to_number(value, field)
    if rate < 0 or rate > MAX_ANNUAL_RATE_PERCENT:
        raise RateOutOfRangeError(
            f"Interest rate must be between 0 and {MAX_ANNUAL_RATE_PERCENT:g}%",
            field=field,
        )
    return rate


def check_amount(value: Any, field: str) -> float:
    """Validate a non-negative currency amount"""
    amount = to_number(value, field)
    if amount < 0:
        raise AmountOutOfRangeError(f"{field} must not be negative", field=field)
    return amount


def parse_loan_inputs(
    income: RawNumber,
    annual_rate_percent: RawNumber,
    tenor_months: RawNumber,
) -> LoanInputs:
    """
    Turn raw form entry into LoanInputs.

    Check order follows the calculator form:
    1. Income, tenor and rate present (income of 0 counts as not filled in)
    2. Income and tenor readable as numbers
    3. Tenor within 1-360 months
    4. Rate within 0-50%

    Raises:
        ValidationError subclass describing the first failing check
    """
    required = (("income", income), ("tenor_months", tenor_months), ("annual_rate_percent", annual_rate_percent))
    for field, value in required:
        if is_missing(value):
            raise MissingFieldError("Please fill in all fields", field=field)

    income_value = to_number(income, "income")
    to_number(tenor_months, "tenor_months")

    if income_value == 0:
        raise MissingFieldError("Please fill in all fields", field="income")
    if income_value < 0:
        raise IncomeOutOfRangeError("income must be greater than zero", field="income")

    tenor = check_tenor(tenor_months)
    rate = check_rate(annual_rate_percent)

    return LoanInputs(income=income_value, annual_rate_percent=rate, tenor_months=tenor)
