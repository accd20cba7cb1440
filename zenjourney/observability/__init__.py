"""
Observability module: structured logging, request and plan-run IDs.

Usage:
    from zenjourney.observability import get_logger, PlanContext

    logger = get_logger(__name__)

    with PlanContext() as ctx:
        logger.info("Planning", extra={"tasks": 12})
"""

from .context import (
    PlanContext,
    RequestContext,
    generate_request_id,
    generate_run_id,
    get_request_id,
    get_run_id,
    set_request_id,
)
from .logging import HumanFormatter, JSONFormatter, configure_logging, get_logger
from .middleware import CorrelationIdMiddleware

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
    # Context
    "RequestContext",
    "PlanContext",
    "get_request_id",
    "set_request_id",
    "generate_request_id",
    "get_run_id",
    "generate_run_id",
    # Middleware
    "CorrelationIdMiddleware",
]
