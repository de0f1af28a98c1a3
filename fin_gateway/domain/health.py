"""Financial health scoring engine - maps income/expense figures to a 0-100 score"""

import logging
from decimal import Decimal
from typing import Tuple

from fin_gateway.domain.models import FinancialSnapshot, HealthStatus, ScoreResult
from fin_gateway.utils.numbers import clamp, round_half_up

logger = logging.getLogger(__name__)

BASELINE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# (minimum savings rate %, adjustment), checked top-down
SAVINGS_RATE_BANDS: Tuple[Tuple[float, int], ...] = (
    (30, 40),
    (20, 30),
    (10, 20),
    (0, 10),
)
NEGATIVE_SAVINGS_ADJUSTMENT = -10

# (spending ratio % strictly below, adjustment), checked top-down
SPENDING_RATIO_BANDS: Tuple[Tuple[float, int], ...] = (
    (50, 30),
    (60, 25),
    (70, 20),
    (80, 10),
    (90, 5),
)
OVERSPENDING_ADJUSTMENT = -10

# (minimum score, status, message), checked top-down
STATUS_TIERS: Tuple[Tuple[int, HealthStatus, str], ...] = (
    (80, HealthStatus.EXCELLENT, "Your finances are in great shape!"),
    (60, HealthStatus.GOOD, "You're managing well, keep it up!"),
    (40, HealthStatus.FAIR, "Room for improvement. Try saving more."),
)
CRITICAL_MESSAGE = "Attention needed! Review your spending."


def savings_rate_adjustment(savings_rate: float) -> int:
    """Points for how much of income is kept: +40 at 30%+, down to -10 when negative"""
    for threshold, adjustment in SAVINGS_RATE_BANDS:
        if savings_rate >= threshold:
            return adjustment
    return NEGATIVE_SAVINGS_ADJUSTMENT


def calculate_spending_ratio(total_income: float, total_expense: float) -> float:
    """Expense as a percentage of income; 100 when there is no income"""
    if total_income > 0:
        return total_expense / total_income * 100
    return 100.0


def reported_spending_ratio(total_income: float, total_expense: float) -> int:
    """Spending ratio as a whole percent, computed in Decimal so huge ratios stay finite"""
    if total_income > 0:
        ratio = Decimal(str(total_expense)) / Decimal(str(total_income)) * 100
        return round_half_up(ratio)
    return 100


def spending_ratio_adjustment(spending_ratio: float) -> int:
    """Points for spending relative to income: +30 below 50%, -10 at 90% and above"""
    for upper_bound, adjustment in SPENDING_RATIO_BANDS:
        if spending_ratio < upper_bound:
            return adjustment
    return OVERSPENDING_ADJUSTMENT


def determine_status(score: int) -> Tuple[HealthStatus, str]:
    """
    Map a final score to its tier.

    Tiers:
    - 80+:   Excellent
    - 60-79: Good
    - 40-59: Fair
    - <40:   Critical

    Returns: (status, message)
    """
    for threshold, status, message in STATUS_TIERS:
        if score >= threshold:
            return status, message
    return HealthStatus.CRITICAL, CRITICAL_MESSAGE


def calculate_health_score(snapshot: FinancialSnapshot) -> ScoreResult:
    """
    Main entry point: score a financial snapshot.

    Two signals are added to a neutral baseline of 50: the savings rate as
    reported by the caller, and the spending ratio recomputed from income and
    expense. The two are not checked against each other.
    """
    spending_ratio = calculate_spending_ratio(snapshot.total_income, snapshot.total_expense)

    raw_score = (
        BASELINE_SCORE
        + savings_rate_adjustment(snapshot.savings_rate)
        + spending_ratio_adjustment(spending_ratio)
    )
    score = clamp(round_half_up(raw_score), MIN_SCORE, MAX_SCORE)
    status, message = determine_status(score)

    logger.debug(
        "Calculated health score",
        extra={"raw_score": raw_score, "score": score, "status": status.value},
    )

    return ScoreResult(
        score=score,
        status=status,
        message=message,
        spending_ratio=reported_spending_ratio(snapshot.total_income, snapshot.total_expense),
    )
