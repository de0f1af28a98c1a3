"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import List

from fin_gateway.config import settings
from fin_gateway.domain.models import Category, HealthStatus, TransactionType


class ParseRequest(BaseModel):
    """Request body for POST /v1/transactions/parse"""

    text: str = Field(
        ...,
        min_length=1,
        max_length=settings.max_text_length,
        description="Free-text transaction, e.g. 'Spent 500 on lunch at Zomato'",
    )


class ParseResponse(BaseModel):
    """Response for POST /v1/transactions/parse"""

    amount: float
    type: TransactionType
    category: Category
    description: str


class CategoriesResponse(BaseModel):
    """Response for GET /v1/transactions/categories"""

    categories: List[Category]


class HealthScoreRequest(BaseModel):
    """Request body for POST /v1/health-score"""

    total_income: float = Field(..., allow_inf_nan=False, description="Income for the period")
    total_expense: float = Field(..., allow_inf_nan=False, description="Expense for the period")
    savings_rate: float = Field(..., allow_inf_nan=False, description="Savings rate in percent, may be negative")


class HealthScoreResponse(BaseModel):
    """Response for POST /v1/health-score"""

    score: int
    status: HealthStatus
    message: str
    spending_ratio: int
