"""Structured logger for observability."""

import logging
from typing import Any

from app.infrastructure.config.settings import settings

# Configure service logger with JSON-like structured format
_logger = logging.getLogger("financing_comparator")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def format_fields(fields: dict[str, Any]) -> str:
    """Render fields as ``key=value`` pairs joined by `` | ``."""
    return " | ".join(f"{k}={v!r}" for k, v in fields.items())


def log_event(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    exc_info: bool = False,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a request.

    Args:
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'http', 'comparison')
        level: Log level (default: INFO)
        exc_info: Attach the active exception traceback
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    _logger.log(level, format_fields(fields), exc_info=exc_info)


def log_comparison(
    request_id: str,
    principal: float,
    term_months: int,
    recommended_option: str,
    **kwargs: Any,
) -> None:
    """
    Log a completed financing comparison.

    Args:
        request_id: Request identifier
        principal: Amount financed
        term_months: Loan term in months
        recommended_option: 'A' or 'B'
        **kwargs: Additional fields
    """
    log_event(
        request_id=request_id,
        component="comparison",
        comparison_inputs={"principal": principal, "term_months": term_months},
        recommended_option=recommended_option,
        **kwargs,
    )


def log_validation_failure(request_id: str, code: str, **kwargs: Any) -> None:
    """Log rejected client input."""
    log_event(
        request_id=request_id,
        component="validation",
        level=logging.WARNING,
        error_code=code,
        **kwargs,
    )


def log_internal_failure(request_id: str, error: BaseException, **kwargs: Any) -> None:
    """
    Log an unexpected computation failure with its traceback.

    Must be called from inside the ``except`` block handling ``error``.
    """
    log_event(
        request_id=request_id,
        component="comparison",
        level=logging.ERROR,
        exc_info=True,
        error_type=type(error.__cause__ or error).__name__,
        **kwargs,
    )


logger = _logger
