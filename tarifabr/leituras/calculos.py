"""Validação de leituras do medidor e estatísticas de consumo do mês."""

from __future__ import annotations

import calendar
import math
from datetime import date

import structlog

from tarifabr.custo.calculadora import estimar_custo, formatar_numero
from tarifabr.custo.models import ConfiguracaoTarifa

from .models import CONSUMO_DIARIO_MAX, LEITURA_MAX, EstatisticasConsumo, Leitura, ResultadoValidacao

logger = structlog.get_logger()

# Nos primeiros dias do mês a média por leitura é mais estável que a por dia
DIAS_PROJECAO_CONSERVADORA = 3


def validar_leitura(
    valor: float,
    leitura_inicial: float,
    leituras: list[Leitura],
) -> ResultadoValidacao:
    """Valida uma nova leitura contra a inicial e as já registradas.

    Args:
        valor: Nova leitura acumulada (kWh).
        leitura_inicial: Leitura do início do período.
        leituras: Leituras já registradas no período.

    Returns:
        ResultadoValidacao com mensagem em caso de erro.
    """
    if math.isnan(valor) or valor <= 0:
        return ResultadoValidacao(
            valido=False,
            mensagem="A leitura deve ser um número válido maior que 0",
        )

    if valor > LEITURA_MAX:
        return ResultadoValidacao(
            valido=False,
            mensagem=f"A leitura parece alta demais (máximo {formatar_numero(LEITURA_MAX)} kWh)",
        )

    if valor <= leitura_inicial:
        return ResultadoValidacao(
            valido=False,
            mensagem=(
                "A leitura deve ser maior que a leitura inicial "
                f"({formatar_numero(leitura_inicial)} kWh)"
            ),
        )

    if leituras:
        maior = max(leitura.valor for leitura in leituras)
        if valor <= maior:
            return ResultadoValidacao(
                valido=False,
                mensagem=(
                    "A leitura deve ser maior que a última registrada "
                    f"({formatar_numero(maior)} kWh)"
                ),
            )

    return ResultadoValidacao(valido=True)


def consumo_entre(inicio: float, fim: float) -> float:
    """Consumo entre duas leituras (nunca negativo)."""
    return max(0.0, fim - inicio)


def calcular_estatisticas(
    leituras: list[Leitura],
    leitura_inicial: float,
    config: ConfiguracaoTarifa,
    hoje: date | None = None,
) -> EstatisticasConsumo:
    """Consumo total, média, projeção do mês e custo estimado.

    Sem leituras, o custo estimado é só a parte fixa da conta.

    Args:
        leituras: Leituras do período.
        leitura_inicial: Leitura do início do período.
        config: Tarifa usada na estimativa de custo.
        hoje: Data de referência para a projeção (default: hoje).
    """
    if not leituras:
        return EstatisticasConsumo(custo_estimado=config.taxas_fixas)

    hoje = hoje or date.today()
    consumo_total = max(leitura.valor for leitura in leituras) - leitura_inicial
    media_diaria = consumo_total / max(len(leituras), 1)

    dias_no_mes = calendar.monthrange(hoje.year, hoje.month)[1]
    if hoje.day <= DIAS_PROJECAO_CONSERVADORA:
        projecao = round(media_diaria * dias_no_mes)
    else:
        projecao = round((consumo_total / hoje.day) * dias_no_mes)

    if media_diaria > CONSUMO_DIARIO_MAX:
        logger.warning(
            "leituras_consumo_diario_alto",
            media_diaria=media_diaria,
            limite=CONSUMO_DIARIO_MAX,
        )

    return EstatisticasConsumo(
        consumo_total=consumo_total,
        media_diaria=media_diaria,
        projecao_mensal=projecao,
        custo_estimado=estimar_custo(consumo_total, config),
    )


def intervalo_datas(leituras: list[Leitura]) -> tuple[date, date] | None:
    """Primeira e última data das leituras, ou None se vazio."""
    if not leituras:
        return None
    datas = sorted(leitura.data for leitura in leituras)
    return datas[0], datas[-1]
