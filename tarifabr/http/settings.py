"""Helpers centralizados para configuracao HTTP."""

from __future__ import annotations

from typing import Any

import httpx

from tarifabr.constants import Fonte, HTTPSettings


def get_timeout(settings: HTTPSettings | None = None) -> httpx.Timeout:
    """Constroi ``httpx.Timeout`` a partir de ``HTTPSettings``.

    Sempre finito: uma fonte travada nunca bloqueia o caller indefinidamente.

    Args:
        settings: Instancia de HTTPSettings. Se None, usa defaults.

    Returns:
        httpx.Timeout configurado.
    """
    s = settings or HTTPSettings()
    return httpx.Timeout(
        connect=s.timeout_connect,
        read=s.timeout_read,
        write=s.timeout_write,
        pool=s.timeout_pool,
    )


def get_client_kwargs(
    fonte: Fonte,
    settings: HTTPSettings | None = None,
    extra_headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Retorna dict pronto para ``httpx.AsyncClient(**kwargs)``.

    Args:
        fonte: Fonte de dados (vai no header ``X-Tarifabr-Source``).
        settings: Instancia de HTTPSettings. Se None, usa defaults.
        extra_headers: Headers adicionais a mesclar.

    Returns:
        Dict com ``timeout``, ``headers``, ``follow_redirects``.
    """
    from tarifabr import __version__

    timeout = get_timeout(settings)
    headers = {
        "Accept": "application/json",
        "Accept-Language": "pt-BR,pt;q=0.9,en;q=0.8",
        "User-Agent": f"tarifabr/{__version__}",
        "X-Tarifabr-Source": fonte.value,
    }
    if extra_headers:
        headers.update(extra_headers)

    return {
        "timeout": timeout,
        "headers": headers,
        "follow_redirects": True,
    }
