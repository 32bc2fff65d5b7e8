"""Cálculo de custo da conta de luz residencial.

Dois caminhos, ambos a partir do consumo em kWh:

- ``calcular_detalhamento``: itens de custo (consumo base, bandeira,
  taxas fixas) com participação percentual, sem impostos.
- ``estimar_custo``: total estimado com impostos "por dentro" aplicados
  sobre a parcela de energia via ``aplicar_impostos``.
"""

from __future__ import annotations

import structlog

from tarifabr.models import ResultadoValidacao

from .models import BANDEIRAS, ConfiguracaoTarifa, ItemCusto

logger = structlog.get_logger()

TARIFA_MIN_KWH = 0.10
TARIFA_MAX_KWH = 2.00
TAXAS_ADICIONAIS_MAX = 200.0
ILUMINACAO_PUBLICA_MAX = 100.0


def formatar_numero(valor: float, casas: int = 0) -> str:
    """Formata número no padrão brasileiro: 1.234,56."""
    texto = f"{valor:,.{casas}f}"
    return texto.replace(",", "_").replace(".", ",").replace("_", ".")


def formatar_moeda(valor: float) -> str:
    """Formata valor monetário: R$ 1.234,56."""
    return f"R$ {formatar_numero(valor, 2)}"


def calcular_detalhamento(
    consumo_kwh: float,
    tarifa_base: float,
    adicional_bandeira: float,
    taxas_fixas: float,
) -> list[ItemCusto] | None:
    """Detalha o custo em consumo base, bandeira tarifária e taxas fixas.

    A linha da bandeira aparece sempre (inclusive na verde, com valor 0).
    As demais linhas com valor zero são omitidas. Percentuais são sobre
    a soma dos itens exibidos. Impostos não entram aqui; ver
    ``estimar_custo``.

    Args:
        consumo_kwh: Consumo no período.
        tarifa_base: R$/kWh.
        adicional_bandeira: Acréscimo da bandeira em R$/kWh.
        taxas_fixas: Valor fixo mensal (iluminação pública + taxas).

    Returns:
        Lista de ItemCusto, ou None se o consumo for zero.

    Example:
        >>> itens = calcular_detalhamento(100, 0.72518, 0.0, 41.12)
        >>> [round(i.valor, 3) for i in itens]
        [72.518, 0.0, 41.12]
    """
    if consumo_kwh == 0:
        return None

    consumo_fmt = formatar_numero(consumo_kwh)
    candidatos = [
        (
            ItemCusto(
                rotulo="Consumo base",
                descricao=f"{consumo_fmt} kWh × {formatar_moeda(tarifa_base)}",
                valor=consumo_kwh * tarifa_base,
            ),
            False,
        ),
        (
            ItemCusto(
                rotulo="Bandeira tarifária",
                descricao=(
                    "Sem acréscimo"
                    if adicional_bandeira == 0
                    else f"{consumo_fmt} kWh × R$ {formatar_numero(adicional_bandeira, 5)}"
                ),
                valor=consumo_kwh * adicional_bandeira,
            ),
            True,
        ),
        (
            ItemCusto(
                rotulo="Taxas fixas",
                descricao="Iluminação pública e taxas mensais",
                valor=taxas_fixas,
            ),
            False,
        ),
    ]

    itens = [item for item, sempre in candidatos if sempre or item.valor != 0]
    total = total_detalhamento(itens)

    for item in itens:
        item.percentual = (item.valor / total) * 100 if total else 0.0

    logger.debug("custo_detalhamento", consumo_kwh=consumo_kwh, itens=len(itens), total=total)
    return itens


def total_detalhamento(itens: list[ItemCusto] | None) -> float:
    """Soma dos itens do detalhamento (0 se não houver itens)."""
    if not itens:
        return 0.0
    return sum(item.valor for item in itens)


def detalhar(consumo_kwh: float, config: ConfiguracaoTarifa) -> list[ItemCusto] | None:
    """``calcular_detalhamento`` a partir de uma ConfiguracaoTarifa."""
    return calcular_detalhamento(
        consumo_kwh,
        config.tarifa_base,
        BANDEIRAS[config.bandeira].adicional,
        config.taxas_fixas,
    )


def aplicar_impostos(subtotal: float, aliquota: float) -> float:
    """Aplica impostos "por dentro": subtotal / (1 - alíquota).

    ICMS e PIS/COFINS incidem sobre o próprio preço final, então o valor
    com impostos é obtido por divisão, não por multiplicação.

    Raises:
        ValueError: Se a alíquota estiver fora de [0, 1).
    """
    if not 0 <= aliquota < 1:
        raise ValueError(f"Alíquota inválida: {aliquota}. Esperado 0 <= aliquota < 1")
    return subtotal / (1 - aliquota)


def estimar_custo(
    consumo_kwh: float,
    config: ConfiguracaoTarifa,
    incluir_impostos: bool = True,
) -> float:
    """Estimativa simplificada da conta.

    Energia (consumo × (tarifa base + bandeira)) com impostos por dentro,
    mais taxas fixas. As taxas fixas não recebem gross-up.

    Args:
        consumo_kwh: Consumo no período.
        config: Tarifa resolvida.
        incluir_impostos: Se False, retorna o subtotal sem impostos.

    Returns:
        Valor estimado em R$ (sem arredondamento).
    """
    energia = consumo_kwh * (config.tarifa_base + config.adicional_bandeira)
    if incluir_impostos:
        energia = aplicar_impostos(energia, config.aliquota_total)
    return energia + config.taxas_fixas


def validar_tarifa(config: ConfiguracaoTarifa) -> ResultadoValidacao:
    """Valida faixas plausíveis de tarifa e taxas; acumula todos os erros."""
    erros: list[str] = []

    if not TARIFA_MIN_KWH <= config.tarifa_base <= TARIFA_MAX_KWH:
        erros.append("Tarifa por kWh deve estar entre R$ 0,10 e R$ 2,00")

    if not 0 <= config.taxas_adicionais <= TAXAS_ADICIONAIS_MAX:
        erros.append("Taxas adicionais devem estar entre R$ 0,00 e R$ 200,00")

    if not 0 <= config.taxa_iluminacao_publica <= ILUMINACAO_PUBLICA_MAX:
        erros.append("Taxa de iluminação pública deve estar entre R$ 0,00 e R$ 100,00")

    return ResultadoValidacao(
        valido=not erros,
        mensagem="; ".join(erros) if erros else None,
        erros=erros,
    )
