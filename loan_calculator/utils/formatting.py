"""Display formatting for amounts, rates and schedule rows"""

from typing import Dict

from loan_calculator.domain.models import AmortizationRow


def format_amount(value: float) -> str:
    """Group thousands, keep at most 2 fraction digits: 1829.5 -> '1,829.5'"""
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_currency(value: float, currency: str = "GHS") -> str:
    """Prefix a formatted amount with the currency code"""
    return f"{currency} {format_amount(value)}"


def format_rate(annual_rate_percent: float) -> str:
    """Rate as shown next to the slider, one decimal place"""
    return f"{annual_rate_percent:.1f}"


def format_schedule_row(row: AmortizationRow) -> Dict[str, str]:
    """Display strings for one breakdown table row"""
    return {
        "month": str(row.month),
        "amount_paid": format_amount(row.amount_paid),
        "interest_paid": format_amount(row.interest_paid),
        "remaining_balance": format_amount(row.remaining_balance),
    }
