"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt
from typing import List, Optional, Union

# Form fields arrive as numbers, strings or stray booleans; the domain validator decides what is acceptable
RawNumber = Optional[Union[StrictInt, StrictFloat, StrictBool, str]]


class QuoteRequest(BaseModel):
    """Request body for POST /v1/quote"""

    income: RawNumber = Field(None, description="Net monthly income")
    annual_rate_percent: RawNumber = Field(None, description="Annual interest rate in percent (0-50)")
    tenor_months: RawNumber = Field(None, description="Loan duration in months (1-360)")


class QuoteDisplay(BaseModel):
    """Formatted strings for the results panel"""

    max_principal: str
    monthly_payment: str
    income: str
    annual_rate: str


class QuoteResponse(BaseModel):
    """Response for POST /v1/quote"""

    max_principal: float
    monthly_payment: float
    monthly_rate: float
    annual_rate_percent: float
    tenor_months: int
    currency: str
    display: QuoteDisplay


class ScheduleRequest(BaseModel):
    """Request body for POST /v1/schedule"""

    principal: RawNumber = Field(None, description="Opening loan balance")
    monthly_payment: RawNumber = Field(None, description="Nominal monthly payment")
    annual_rate_percent: RawNumber = Field(None, description="Annual interest rate in percent (0-50)")
    tenor_months: RawNumber = Field(None, description="Maximum number of months (1-360)")
    seed: Optional[int] = Field(None, description="Seed for repeatable payment variance")


class ScheduleRowSchema(BaseModel):
    """Single month in a repayment schedule"""

    month: int
    amount_paid: float
    interest_paid: float
    remaining_balance: float


class ScheduleRowDisplay(BaseModel):
    """Formatted strings for one breakdown table row"""

    month: str
    amount_paid: str
    interest_paid: str
    remaining_balance: str


class ScheduleResponse(BaseModel):
    """Response for POST /v1/schedule"""

    months: int
    paid_off: bool
    rows: List[ScheduleRowSchema]
    display_rows: List[ScheduleRowDisplay]


class BreakdownRequest(QuoteRequest):
    """Request body for POST /v1/breakdown"""

    seed: Optional[int] = Field(None, description="Seed for repeatable payment variance")


class BreakdownResponse(BaseModel):
    """Response for POST /v1/breakdown"""

    quote: QuoteResponse
    schedule: ScheduleResponse


class ErrorDetail(BaseModel):
    """Body of a 422 validation failure"""

    code: str
    field: Optional[str] = None
    message: str


class LimitsResponse(BaseModel):
    """Response for GET /v1/limits"""

    min_tenor_months: int
    max_tenor_months: int
    max_annual_rate_percent: float
    rate_step: float
    default_annual_rate_percent: float
    debt_service_ratio: float
    currency: str
