"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from fin_gateway.api.main import create_app
from fin_gateway.domain.models import FinancialSnapshot


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def healthy_snapshot() -> FinancialSnapshot:
    """Saves 60% of income and spends 40%"""
    return FinancialSnapshot(total_income=100000, total_expense=40000, savings_rate=60)


@pytest.fixture
def overspending_snapshot() -> FinancialSnapshot:
    """Spends more than it earns"""
    return FinancialSnapshot(total_income=50000, total_expense=55000, savings_rate=-10)
