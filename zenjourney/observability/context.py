"""
Correlation IDs carried in context variables.

Two IDs are tracked:
- request_id: one per HTTP request (set by CorrelationIdMiddleware)
- run_id: one per DayPlanner.plan() call

Both formatters in observability.logging read them, so any log line
emitted inside a request or a planning run can be tied back to it.
"""

import contextvars
import uuid
from typing import Optional

_request_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)
_run_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "run_id", default=None
)


def get_request_id() -> Optional[str]:
    return _request_id_var.get()


def set_request_id(request_id: str) -> contextvars.Token:
    """Bind a request ID; reset with the returned token."""
    return _request_id_var.set(request_id)


def generate_request_id() -> str:
    return f"req-{uuid.uuid4().hex[:16]}"


def get_run_id() -> Optional[str]:
    return _run_id_var.get()


def generate_run_id() -> str:
    return f"plan-{uuid.uuid4().hex[:12]}"


class _BoundId:
    """Binds an ID to a context variable for the duration of a with-block."""

    _var: contextvars.ContextVar

    def __init__(self, value: str):
        self._value = value
        self._token: Optional[contextvars.Token] = None

    def __enter__(self):
        self._token = self._var.set(self._value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            self._var.reset(self._token)
            self._token = None


class RequestContext(_BoundId):
    """
    Request scope. Pass the client's X-Request-ID to keep it, or omit it
    to get a fresh one:

        with RequestContext(request_id=incoming) as ctx:
            handle(request)   # logs carry ctx.request_id
    """

    _var = _request_id_var

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id or generate_request_id()
        super().__init__(self.request_id)


class PlanContext(_BoundId):
    """One planning run: its summary, skip warnings and errors share a run_id."""

    _var = _run_id_var

    def __init__(self, run_id: Optional[str] = None):
        self.run_id = run_id or generate_run_id()
        super().__init__(self.run_id)
