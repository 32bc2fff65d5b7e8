"""Logging estruturado do tarifabr (structlog sobre logging stdlib).

Os logs vao para stderr, para nao misturar com a saida de dados da CLI
(tabelas, CSV e JSON vao para stdout).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

NIVEIS_VALIDOS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# httpx/httpcore logam cada request em INFO
_LOGGERS_RUIDOSOS = ("httpx", "httpcore")


def resolve_nivel(level: str | int) -> int:
    """Converte 'debug', 'INFO', 20... em nivel numerico do logging."""
    if isinstance(level, int):
        return level

    nome = level.strip().upper()
    if nome == "WARN":
        nome = "WARNING"
    if nome not in NIVEIS_VALIDOS:
        raise ValueError(f"Nivel de log invalido: {level!r}. Opcoes: {', '.join(NIVEIS_VALIDOS)}")
    return int(getattr(logging, nome))


def _processadores(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_logging(
    level: str | int = "INFO",
    json_format: bool = True,
    log_file: Path | str | None = None,
) -> None:
    """
    Configura structlog para o tarifabr.

    Args:
        level: Nivel minimo (nome ou numero)
        json_format: Uma linha JSON por evento; False = console legivel
        log_file: Arquivo extra que recebe os mesmos eventos

    Raises:
        ValueError: Nivel desconhecido
    """
    nivel = resolve_nivel(level)

    structlog.configure(
        processors=_processadores(json_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(format="%(message)s", level=nivel, handlers=handlers, force=True)

    for nome in _LOGGERS_RUIDOSOS:
        logging.getLogger(nome).setLevel(max(nivel, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
