"""Pytest fixtures for testing"""

import random
import pytest
from typing import List, Tuple
from fastapi.testclient import TestClient
from loan_calculator.api.main import create_app
from loan_calculator.api.dependencies import get_random_source


class FixedVariance:
    """Random source stub that always draws the same variance"""

    def __init__(self, offset: float = 0.0):
        self.offset = offset
        self.calls: List[Tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return self.offset


@pytest.fixture
def fixed_variance():
    """Factory for deterministic variance stubs"""
    return FixedVariance


@pytest.fixture
def seeded_rng() -> random.Random:
    """Repeatable random source"""
    return random.Random(1234)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a seeded random source"""
    app = create_app()
    app.dependency_overrides[get_random_source] = lambda: random.Random(1234)
    return TestClient(app)
