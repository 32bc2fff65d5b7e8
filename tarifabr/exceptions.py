"""Exceções tipadas do tarifabr."""

from __future__ import annotations


class TarifabrError(Exception):
    """Base para todas as exceções do tarifabr."""

    pass


class UpstreamUnavailableError(TarifabrError):
    """Fonte respondeu com status de erro ou não respondeu (timeout, DNS, conexão)."""

    def __init__(
        self,
        source: str,
        url: str | None = None,
        status_code: int | None = None,
        last_error: str | None = None,
    ) -> None:
        self.source = source
        self.url = url or ""
        self.status_code = status_code
        self.last_error = last_error or ""
        if status_code is not None:
            super().__init__(f"{source} unavailable: HTTP {status_code} {self.last_error}".rstrip())
        else:
            super().__init__(f"{source} unavailable: {self.last_error}")


class NoDataError(TarifabrError):
    """Fonte respondeu com sucesso, mas sem registros (ou com success=false)."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"No data from {source}: {reason}")


class ParseError(TarifabrError):
    """Falha ao parsear dados da fonte."""

    def __init__(
        self,
        source: str,
        parser_version: int,
        reason: str,
        snippet: str = "",
    ) -> None:
        self.source = source
        self.parser_version = parser_version
        self.reason = reason
        self.snippet = snippet[:500]
        super().__init__(f"Parse failed ({source} v{parser_version}): {reason}")


class PartialDataWarning(UserWarning):
    """Dados retornados estão incompletos."""

    pass
