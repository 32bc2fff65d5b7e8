"""Consumo e custo de eletrodomésticos.

Consumo diário = potência (W) × horas por dia / 1000, em kWh. O mensal
multiplica pelos dias de uso no mês. O custo usa a tarifa por kWh sem
impostos (tarifa base + bandeira quando vem de uma ConfiguracaoTarifa).
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from tarifabr.normalize.regions import remover_acentos

from .models import (
    APARELHOS_COMUNS,
    Aparelho,
    CategoriaAparelho,
    ConfiguracaoTarifa,
    ConsumoAparelho,
    ResumoAparelhos,
)

logger = structlog.get_logger()


def resolve_categoria(nome: str | CategoriaAparelho) -> CategoriaAparelho:
    """Resolve "climatizacao", "COZINHA"... para CategoriaAparelho.

    Raises:
        ValueError: Se categoria desconhecida.
    """
    if isinstance(nome, CategoriaAparelho):
        return nome

    chave = remover_acentos(nome).strip().lower()
    for categoria in CategoriaAparelho:
        if remover_acentos(categoria.value).lower() == chave:
            return categoria
    raise ValueError(
        f"Categoria desconhecida: '{nome}'. Opções: {[c.value for c in CategoriaAparelho]}"
    )


def aparelho_comum(nome: str, horas_por_dia: float, dias_por_mes: float = 30) -> Aparelho:
    """Cria Aparelho com potência e categoria típicas ("geladeira", "Ar Condicionado").

    Raises:
        ValueError: Se o aparelho não está em APARELHOS_COMUNS.
    """
    chave = remover_acentos(nome).strip().lower()
    for nome_comum, info in APARELHOS_COMUNS.items():
        if remover_acentos(nome_comum).lower() == chave:
            return Aparelho(
                nome=nome_comum,
                potencia_w=info.potencia_w,
                horas_por_dia=horas_por_dia,
                dias_por_mes=dias_por_mes,
                categoria=info.categoria,
            )
    raise ValueError(f"Aparelho desconhecido: '{nome}'. Opções: {list(APARELHOS_COMUNS)}")


def _tarifa_kwh(tarifa: float | ConfiguracaoTarifa) -> float:
    if isinstance(tarifa, ConfiguracaoTarifa):
        return tarifa.tarifa_base + tarifa.adicional_bandeira
    if tarifa < 0:
        raise ValueError(f"Tarifa inválida: {tarifa}. Esperado >= 0")
    return tarifa


def calcular_aparelho(aparelho: Aparelho, tarifa: float | ConfiguracaoTarifa) -> ConsumoAparelho:
    """Consumo e custo diário/mensal de um aparelho.

    Args:
        aparelho: Potência e padrão de uso.
        tarifa: R$/kWh, ou ConfiguracaoTarifa (base + bandeira, sem impostos).

    Example:
        >>> c = calcular_aparelho(aparelho_comum("Geladeira", 24), 0.8)
        >>> round(c.consumo_mensal_kwh, 1), round(c.custo_mensal, 2)
        (108.0, 86.4)
    """
    preco = _tarifa_kwh(tarifa)
    diario = aparelho.potencia_w * aparelho.horas_por_dia / 1000
    mensal = diario * aparelho.dias_por_mes
    return ConsumoAparelho(
        consumo_diario_kwh=diario,
        consumo_mensal_kwh=mensal,
        custo_diario=diario * preco,
        custo_mensal=mensal * preco,
    )


def totalizar_aparelhos(
    aparelhos: Iterable[Aparelho],
    tarifa: float | ConfiguracaoTarifa,
) -> ResumoAparelhos:
    """Soma consumo e custo de vários aparelhos, no total e por categoria.

    Categorias aparecem em ``por_categoria`` na ordem em que surgem.
    """
    resumo = ResumoAparelhos()
    for aparelho in aparelhos:
        consumo = calcular_aparelho(aparelho, tarifa)
        resumo.itens.append((aparelho, consumo))
        resumo.total = resumo.total + consumo
        resumo.por_categoria[aparelho.categoria] = (
            resumo.por_categoria.get(aparelho.categoria, ConsumoAparelho()) + consumo
        )

    logger.debug(
        "custo_aparelhos",
        aparelhos=len(resumo.itens),
        consumo_mensal_kwh=resumo.total.consumo_mensal_kwh,
    )
    return resumo
