"""Parsing de datas de vigência publicadas pela ANEEL."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from tarifabr.constants import TIMEZONE_VIGENCIA


def parse_data(valor: str | date | None) -> date | None:
    """
    Converte data ISO ("2025-04-22", "2025-04-22T00:00:00") ou
    brasileira ("22/04/2025") para ``date``.

    Returns:
        date, ou None se vazio ou inválido
    """
    if valor is None:
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor

    texto = str(valor).strip()
    if not texto:
        return None

    try:
        return datetime.fromisoformat(texto.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    try:
        return datetime.strptime(texto, "%d/%m/%Y").date()
    except ValueError:
        return None


def como_data(agora: date | datetime) -> date:
    """Reduz ``datetime`` a ``date`` para comparação por dia de calendário.

    ``datetime`` com fuso é convertido para o horário de Brasília antes;
    ``datetime`` ingênuo é tomado como já local.
    """
    if isinstance(agora, datetime):
        if agora.tzinfo is not None:
            agora = agora.astimezone(ZoneInfo(TIMEZONE_VIGENCIA))
        return agora.date()
    return agora
