"""Leituras do medidor: validação, consumo do período e projeção mensal."""

from tarifabr.leituras.calculos import (
    calcular_estatisticas,
    consumo_entre,
    intervalo_datas,
    validar_leitura,
)
from tarifabr.leituras.models import EstatisticasConsumo, Leitura

__all__ = [
    "EstatisticasConsumo",
    "Leitura",
    "calcular_estatisticas",
    "consumo_entre",
    "intervalo_datas",
    "validar_leitura",
]
