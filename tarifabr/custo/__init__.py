"""Custo da conta de luz: bandeiras, detalhamento, estimativa com impostos e eletrodomésticos."""

from tarifabr.custo.aparelhos import (
    aparelho_comum,
    calcular_aparelho,
    resolve_categoria,
    totalizar_aparelhos,
)
from tarifabr.custo.calculadora import (
    aplicar_impostos,
    calcular_detalhamento,
    detalhar,
    estimar_custo,
    formatar_moeda,
    formatar_numero,
    total_detalhamento,
    validar_tarifa,
)
from tarifabr.custo.models import (
    APARELHOS_COMUNS,
    BANDEIRAS,
    Aparelho,
    BandeiraTarifaria,
    CategoriaAparelho,
    ConfiguracaoTarifa,
    ConsumoAparelho,
    ItemCusto,
    ResumoAparelhos,
    adicional_bandeira,
    resolve_bandeira,
)

__all__ = [
    "APARELHOS_COMUNS",
    "BANDEIRAS",
    "Aparelho",
    "BandeiraTarifaria",
    "CategoriaAparelho",
    "ConfiguracaoTarifa",
    "ConsumoAparelho",
    "ItemCusto",
    "ResumoAparelhos",
    "adicional_bandeira",
    "aparelho_comum",
    "aplicar_impostos",
    "calcular_aparelho",
    "calcular_detalhamento",
    "detalhar",
    "estimar_custo",
    "formatar_moeda",
    "formatar_numero",
    "resolve_bandeira",
    "resolve_categoria",
    "total_detalhamento",
    "totalizar_aparelhos",
    "validar_tarifa",
]
