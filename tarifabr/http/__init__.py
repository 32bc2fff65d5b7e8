from __future__ import annotations

from tarifabr.http.retry import RETRIABLE_EXCEPTIONS, retry_on_status, should_retry_status
from tarifabr.http.settings import get_client_kwargs, get_timeout

__all__ = [
    "RETRIABLE_EXCEPTIONS",
    "get_client_kwargs",
    "get_timeout",
    "retry_on_status",
    "should_retry_status",
]
