"""Domain-specific exceptions"""

from typing import Optional


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Loan input rejected before any calculation"""

    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class MissingFieldError(ValidationError):
    """Income or tenor absent or empty"""

    code = "missing_field"


class NotANumberError(ValidationError):
    """Value is not a finite number"""

    code = "not_a_number"


class TenorOutOfRangeError(ValidationError):
    """Tenor is not between 1 and 360 months"""

    code = "tenor_out_of_range"


class RateOutOfRangeError(ValidationError):
    """Annual rate is outside 0-50%"""

    code = "rate_out_of_range"


class IncomeOutOfRangeError(ValidationError):
    """Income is negative"""

    code = "income_out_of_range"


class AmountOutOfRangeError(ValidationError):
    """Principal or payment is negative"""

    code = "amount_out_of_range"
