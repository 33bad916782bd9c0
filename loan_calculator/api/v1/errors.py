"""Mapping of domain validation errors to HTTP responses"""

import logging
from fastapi import HTTPException

from loan_calculator.api.v1.schemas import ErrorDetail
from loan_calculator.domain.exceptions import ValidationError


def validation_http_error(error: ValidationError, request_id: str) -> HTTPException:
    """Log a rejected input and build the 422 response for it"""
    logging.warning(
        f"Validation failed: {error.message}",
        extra={"request_id": request_id, "error_code": error.code, "field": error.field},
    )
    detail = ErrorDetail(code=error.code, field=error.field, message=error.message)
    return HTTPException(status_code=422, detail=detail.model_dump())
