"""Cliente HTTP para o datastore CKAN de dados abertos da ANEEL.

API: https://dadosabertos.aneel.gov.br/api/3/action/datastore_search
Recurso: Tarifas Homologadas das Distribuidoras de Energia Elétrica.
Sem autenticação requerida.

Filtragem server-side por subgrupo B1 e classe Residencial; o resto
(vigência, deduplicação, UF) é feito client-side pelo parser.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from tarifabr.constants import (
    ANEEL_FILTROS_RESIDENCIAL,
    ANEEL_LIMIT_PADRAO,
    ANEEL_RESOURCE_ID,
    URLS,
    Fonte,
)
from tarifabr.exceptions import NoDataError, ParseError, UpstreamUnavailableError
from tarifabr.http.retry import retry_on_status
from tarifabr.http.settings import get_client_kwargs

logger = structlog.get_logger()

DATASTORE_URL = URLS[Fonte.ANEEL]["datastore_search"]

ENVELOPE_VERSION = 1


def build_params(limit: int = ANEEL_LIMIT_PADRAO) -> dict[str, str]:
    """Monta query string do datastore_search para tarifas residenciais B1."""
    return {
        "resource_id": ANEEL_RESOURCE_ID,
        "filters": json.dumps(ANEEL_FILTROS_RESIDENCIAL, separators=(",", ":")),
        "limit": str(limit),
    }


def _parse_envelope(response: httpx.Response) -> list[dict[str, Any]]:
    """Valida envelope CKAN ``{success, result: {records, total}}``.

    Raises:
        ParseError: Corpo não é JSON ou envelope malformado.
        NoDataError: success=false ou lista de registros vazia.
    """
    try:
        data = response.json()
    except ValueError as e:
        raise ParseError(
            source="aneel",
            parser_version=ENVELOPE_VERSION,
            reason=f"Resposta não é JSON: {e}",
            snippet=response.text,
        ) from e

    if not isinstance(data, dict):
        raise ParseError(
            source="aneel",
            parser_version=ENVELOPE_VERSION,
            reason=f"Envelope inesperado: {type(data).__name__}",
        )

    if not data.get("success"):
        raise NoDataError(source="aneel", reason="success=false no envelope CKAN")

    result = data.get("result") or {}
    records = result.get("records") if isinstance(result, dict) else None
    if not records:
        raise NoDataError(source="aneel", reason="Nenhum registro retornado")

    if not isinstance(records, list):
        raise ParseError(
            source="aneel",
            parser_version=ENVELOPE_VERSION,
            reason=f"result.records não é lista: {type(records).__name__}",
        )

    return records


async def fetch_registros(
    limit: int = ANEEL_LIMIT_PADRAO,
    max_attempts: int | None = None,
) -> list[dict[str, Any]]:
    """Busca registros brutos de tarifas residenciais B1 na ANEEL.

    Uma única requisição GET por chamada (sem retry automático, a menos
    que ``max_attempts`` ou ``TARIFABR_HTTP_MAX_RETRIES`` peçam).

    Args:
        limit: Máximo de linhas retornadas pelo datastore.
        max_attempts: Total de requisições permitidas, somando status
                      retriável (408/429/5xx) e erros de transporte
                      (timeout, conexão).

    Returns:
        Lista de dicts com os registros brutos.

    Raises:
        UpstreamUnavailableError: Status não-2xx ou falha de transporte.
        NoDataError: Envelope com success=false ou sem registros.
        ParseError: Corpo inválido.
    """
    params = build_params(limit)

    logger.info("aneel_fetch_tarifas", url=DATASTORE_URL, limit=limit)

    try:
        async with httpx.AsyncClient(**get_client_kwargs(Fonte.ANEEL)) as client:
            response = await retry_on_status(
                lambda: client.get(DATASTORE_URL, params=params),
                source="aneel",
                max_attempts=max_attempts,
            )
    except httpx.HTTPError as e:
        logger.warning("aneel_http_error", error=str(e), error_type=type(e).__name__)
        raise UpstreamUnavailableError(
            source="aneel",
            url=DATASTORE_URL,
            last_error=f"{type(e).__name__}: {e}",
        ) from e

    if not 200 <= response.status_code < 300:
        logger.warning("aneel_status_error", status=response.status_code)
        raise UpstreamUnavailableError(
            source="aneel",
            url=DATASTORE_URL,
            status_code=response.status_code,
            last_error=response.reason_phrase,
        )

    records = _parse_envelope(response)

    logger.info("aneel_fetch_ok", records=len(records))
    return records
