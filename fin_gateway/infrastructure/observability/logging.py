"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from fin_gateway.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_parse(request_id: str, amount: str, category: str, transaction_type: str, duration_ms: float) -> None:
    """Log structured parse outcome"""
    logging.info(
        "Transaction text parsed",
        extra={
            "request_id": request_id,
            "step": "parse_complete",
            "amount": amount,
            "category": category,
            "transaction_type": transaction_type,
            "duration_ms": duration_ms,
        },
    )


def log_health_score(request_id: str, score: int, status: str, duration_ms: float) -> None:
    """Log structured health score outcome"""
    logging.info(
        "Health score calculated",
        extra={
            "request_id": request_id,
            "step": "score_complete",
            "score": score,
            "health_status": status,
            "duration_ms": duration_ms,
        },
    )
