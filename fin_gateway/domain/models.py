"""Domain models - immutable value objects for transaction drafts and health scores"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of money movement"""

    EXPENSE = "expense"
    INCOME = "income"


class Category(str, Enum):
    """Closed set of transaction categories"""

    FOOD_AND_DINING = "Food & Dining"
    TRANSPORTATION = "Transportation"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    BILLS_AND_UTILITIES = "Bills & Utilities"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    RENT = "Rent"
    EMI = "EMI"
    INSURANCE = "Insurance"
    GIFTS = "Gifts"
    SALARY = "Salary"
    FREELANCE = "Freelance"
    BUSINESS = "Business"
    INVESTMENTS = "Investments"
    OTHER = "Other"


class HealthStatus(str, Enum):
    """Qualitative tier of a financial health score"""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class TransactionDraft:
    """Structured result of interpreting a free-text transaction"""

    amount: Decimal  # 0 when no numeral was found
    type: TransactionType
    category: Category
    description: str


@dataclass(frozen=True)
class FinancialSnapshot:
    """Aggregate figures for a scoring period"""

    total_income: float
    total_expense: float
    savings_rate: float  # percent, negative when spending exceeds income

    @classmethod
    def from_totals(cls, total_income: float, total_expense: float) -> "FinancialSnapshot":
        """Build a snapshot deriving the savings rate from the two totals"""
        net = total_income - total_expense
        savings_rate = (net / total_income * 100) if total_income > 0 else 0.0
        return cls(
            total_income=total_income,
            total_expense=total_expense,
            savings_rate=savings_rate,
        )


@dataclass(frozen=True)
class ScoreResult:
    """Output of financial health scoring"""

    score: int  # 0-100
    status: HealthStatus
    message: str
    spending_ratio: int  # percent of income spent
