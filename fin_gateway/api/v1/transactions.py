"""POST /v1/transactions/parse - free-text transaction interpretation endpoint"""

import math
import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fin_gateway.api.v1.schemas import ParseRequest, ParseResponse, CategoriesResponse
from fin_gateway.api.dependencies import get_request_id
from fin_gateway.domain.interpreter import interpret_transaction
from fin_gateway.domain.categories import list_categories
from fin_gateway.infrastructure.observability.metrics import record_parse
from fin_gateway.infrastructure.observability.logging import log_parse

router = APIRouter()


@router.post("/transactions/parse", response_model=ParseResponse)
def parse_transaction(request_body: ParseRequest, request_id: str = Depends(get_request_id)):
    """
    Turn free text into a transaction draft for the user to review.

    The draft is a best guess: amount 0 and category Other mean nothing
    was recognised, not an error.
    """
    start_time = time.time()

    try:
        draft = interpret_transaction(request_body.text)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    amount = float(draft.amount)
    if not math.isfinite(amount):
        logging.warning("Parsed amount too large", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail="Amount is too large to represent")

    duration_ms = (time.time() - start_time) * 1000
    record_parse(draft.category.value, draft.type.value, draft.amount)
    log_parse(request_id, str(draft.amount), draft.category.value, draft.type.value, duration_ms)

    return ParseResponse(
        amount=amount,
        type=draft.type,
        category=draft.category,
        description=draft.description,
    )


@router.get("/transactions/categories", response_model=CategoriesResponse)
def get_categories():
    """List the categories a draft can resolve to, in matching order"""
    return CategoriesResponse(categories=list_categories())
