"""Modelos de leituras do medidor e estatísticas de consumo."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from tarifabr.models import ResultadoValidacao

LEITURA_MIN = 0
LEITURA_MAX = 999999
CONSUMO_DIARIO_MAX = 1000  # kWh por dia


class Leitura(BaseModel):
    """Leitura acumulada do medidor (kWh) em uma data."""

    id: str
    data: date
    valor: float = Field(..., ge=LEITURA_MIN, le=LEITURA_MAX)
    consumo: float | None = None


class EstatisticasConsumo(BaseModel):
    consumo_total: float = 0.0
    media_diaria: float = 0.0
    projecao_mensal: int = 0
    custo_estimado: float = 0.0


__all__ = [
    "EstatisticasConsumo",
    "Leitura",
    "ResultadoValidacao",
]
