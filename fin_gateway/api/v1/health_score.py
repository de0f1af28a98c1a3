"""POST /v1/health-score - financial health score endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fin_gateway.api.v1.schemas import HealthScoreRequest, HealthScoreResponse
from fin_gateway.api.dependencies import get_request_id
from fin_gateway.domain.health import calculate_health_score
from fin_gateway.domain.models import FinancialSnapshot
from fin_gateway.infrastructure.observability.metrics import record_health_score
from fin_gateway.infrastructure.observability.logging import log_health_score

router = APIRouter()


@router.post("/health-score", response_model=HealthScoreResponse)
def create_health_score(request_body: HealthScoreRequest, request_id: str = Depends(get_request_id)):
    """
    Score aggregate income/expense figures.

    Inputs are not cross-checked: savings_rate is used as given and the
    spending ratio is recomputed from income and expense.
    """
    start_time = time.time()
    snapshot = FinancialSnapshot(
        total_income=request_body.total_income,
        total_expense=request_body.total_expense,
        savings_rate=request_body.savings_rate,
    )

    try:
        result = calculate_health_score(snapshot)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_health_score(result.status.value)
    log_health_score(request_id, result.score, result.status.value, duration_ms)

    return HealthScoreResponse(
        score=result.score,
        status=result.status,
        message=result.message,
        spending_ratio=result.spending_ratio,
    )
