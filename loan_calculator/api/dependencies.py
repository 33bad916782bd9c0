"""Dependency injection for FastAPI endpoints"""

import random
from fastapi import Request


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_random_source() -> random.Random:
    """Provide a fresh random source for payment variance"""
    return random.Random()
