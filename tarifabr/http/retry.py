"""Retry com exponential backoff para requests httpx."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx
import structlog

from tarifabr import constants

logger = structlog.get_logger()

RETRIABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


def _extract_retry_after(response: httpx.Response) -> float | None:
    """Segundos do header Retry-After (numero ou data HTTP)."""
    raw = response.headers.get("Retry-After")
    if raw is None:
        return None
    try:
        return max(float(raw), 0.0)
    except ValueError:
        pass
    try:
        quando = parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        return None
    if quando.tzinfo is None:
        quando = quando.replace(tzinfo=timezone.utc)
    return max((quando - datetime.now(timezone.utc)).total_seconds(), 0.0)


def _backoff(settings: constants.HTTPSettings, attempt: int, base: float, cap: float) -> float:
    return min(base * (settings.retry_exponential_base**attempt), cap)


async def retry_on_status(
    func: Callable[[], Awaitable[httpx.Response]],
    source: str,
    max_attempts: int | None = None,
    base_delay: float | None = None,
    max_delay: float | None = None,
    retriable_exceptions: Sequence[type[Exception]] = RETRIABLE_EXCEPTIONS,
) -> httpx.Response:
    """Executa request HTTP com retry em status retriáveis e erros de transporte.

    Inspeciona o status_code da Response ao invés de depender de
    raise_for_status(). Respeita o header Retry-After quando presente.
    Status retriável e exceção de transporte consomem o mesmo contador:
    ``func`` é chamada no máximo ``max_attempts`` vezes.
    Com ``max_attempts=1`` (default do tarifabr) faz uma única tentativa.

    Args:
        func: Callable que retorna httpx.Response.
        source: Nome da fonte para logging.
        max_attempts: Máximo de tentativas.
        base_delay: Delay base em segundos.
        max_delay: Delay máximo em segundos.
        retriable_exceptions: Exceções que contam como tentativa falha.

    Returns:
        A última httpx.Response obtida. Pode ter status retriável se as
        tentativas se esgotaram; quem chama decide como tratar o status.

    Raises:
        A última exceção retriável, se a última tentativa falhou com ela.
    """
    settings = constants.HTTPSettings()
    _max = max_attempts or settings.max_retries
    _base = base_delay or settings.retry_base_delay
    _cap = max_delay or settings.retry_max_delay

    response: httpx.Response | None = None

    for attempt in range(_max):
        ultima = attempt == _max - 1
        try:
            response = await func()
        except tuple(retriable_exceptions) as e:
            if ultima:
                if _max > 1:
                    logger.error(f"{source}_retry_exhausted", attempts=_max, last_error=str(e))
                raise
            delay = _backoff(settings, attempt, _base, _cap)
            logger.warning(
                f"{source}_retriable_error",
                attempt=attempt + 1,
                error=f"{type(e).__name__}: {e}",
                delay=delay,
            )
            await asyncio.sleep(delay)
            continue

        if not should_retry_status(response.status_code):
            return response

        if not ultima:
            delay = _backoff(settings, attempt, _base, _cap)
            retry_after = _extract_retry_after(response)
            if retry_after is not None:
                delay = min(retry_after, _cap)
            logger.warning(
                f"{source}_retriable_error",
                attempt=attempt + 1,
                status=response.status_code,
                delay=delay,
            )
            await asyncio.sleep(delay)

    assert response is not None
    if _max > 1:
        logger.error(
            f"{source}_retry_exhausted",
            status=response.status_code,
            attempts=_max,
        )
    return response


def should_retry_status(status_code: int) -> bool:
    """Verifica se o status code permite retry."""
    return status_code in constants.RETRIABLE_STATUS_CODES
