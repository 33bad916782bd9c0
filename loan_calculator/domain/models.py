"""Domain models - pure Python dataclasses representing loan entities"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanInputs:
    """Validated borrower entry"""

    income: float
    annual_rate_percent: float
    tenor_months: int


@dataclass(frozen=True)
class LoanQuote:
    """Output of affordability calculation"""

    max_principal: float  # whole currency units
    monthly_payment: float  # 2 decimal places


@dataclass(frozen=True)
class AmortizationRow:
    """Single month in a repayment schedule"""

    month: int
    amount_paid: float
    interest_paid: float
    remaining_balance: float
