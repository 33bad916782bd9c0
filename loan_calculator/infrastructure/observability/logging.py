"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from loan_calculator.domain.models import LoanInputs, LoanQuote


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "loan-calculator", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "loan-calculator") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(
    request_id: str,
    inputs: LoanInputs,
    quote: LoanQuote,
    duration_ms: float,
) -> None:
    """Log structured quote outcome for analysis"""
    logging.info(
        "Quote completed",
        extra={
            "request_id": request_id,
            "step": "quote_complete",
            "annual_rate_percent": inputs.annual_rate_percent,
            "tenor_months": inputs.tenor_months,
            "max_principal": quote.max_principal,
            "monthly_payment": quote.monthly_payment,
            "duration_ms": duration_ms,
        },
    )


def log_schedule(
    request_id: str,
    months_requested: int,
    rows_generated: int,
    duration_ms: float,
) -> None:
    """Log structured schedule outcome"""
    logging.info(
        "Schedule generated",
        extra={
            "request_id": request_id,
            "step": "schedule_complete",
            "months_requested": months_requested,
            "rows_generated": rows_generated,
            "early_payoff": rows_generated < months_requested,
            "duration_ms": duration_ms,
        },
    )
