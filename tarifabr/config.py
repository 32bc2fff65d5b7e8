"""Configuracao global do tarifabr."""

from __future__ import annotations

from dataclasses import dataclass

_config: TarifabrConfig | None = None


@dataclass
class TarifabrConfig:
    """Configuracao global do tarifabr."""

    network_enabled: bool = True
    fallback_referencia: bool = False

    log_level: str = "INFO"
    log_json: bool = True


def get_config() -> TarifabrConfig:
    global _config
    if _config is None:
        _config = TarifabrConfig()
    return _config


def reset_config() -> None:
    global _config
    _config = None


def configure(
    network_enabled: bool | None = None,
    fallback_referencia: bool | None = None,
    log_level: str | None = None,
    log_json: bool | None = None,
) -> None:
    """
    Ajusta a configuracao global.

    Args:
        network_enabled: Se False, nenhuma chamada HTTP e feita
        fallback_referencia: Usa a tabela local quando a ANEEL falha
        log_level: Nivel de log (reconfigura o structlog)
        log_json: Saida de log em JSON (False = console colorido)

    Example:
        tarifabr.config.configure(fallback_referencia=True, log_level="DEBUG")
    """
    config = get_config()

    if network_enabled is not None:
        config.network_enabled = network_enabled
    if fallback_referencia is not None:
        config.fallback_referencia = fallback_referencia
    if log_json is not None:
        config.log_json = log_json
    if log_level is not None:
        config.log_level = log_level

    if log_level is not None or log_json is not None:
        from tarifabr.utils.logging import configure_logging

        configure_logging(level=config.log_level, json_format=config.log_json)


__all__ = [
    "TarifabrConfig",
    "get_config",
    "reset_config",
    "configure",
]
