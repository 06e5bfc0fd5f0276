"""Request ID management for correlating one extraction across log lines.

The request id lives in a context variable, so concurrent extractions on
different threads or tasks keep their own id.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def generate_request_id() -> str:
    """Generate a new unique request ID (UUID v4)."""
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Get current request ID from context.

    Returns:
        str: Current request ID or "no-request-id" if not set
    """
    return request_id_var.get() or "no-request-id"


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


@contextmanager
def request_scope(request_id: Optional[str] = None) -> Iterator[str]:
    """Bind a request ID for the duration of a block.

    Reuses the caller's request ID when one is already bound, otherwise
    generates a fresh one.

    Usage:
        with request_scope() as rid:
            logger.info("processing")  # log line carries rid
    """
    current = request_id or request_id_var.get() or generate_request_id()
    token = request_id_var.set(current)
    try:
        yield current
    finally:
        request_id_var.reset(token)
