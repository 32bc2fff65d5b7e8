"""Normalização de dados - números, datas e UFs."""

from __future__ import annotations

from .dates import como_data, parse_data
from .numbers import parse_decimal_br
from .regions import (
    listar_regioes,
    listar_ufs,
    normalizar_uf,
    uf_para_nome,
    uf_para_regiao,
)

__all__: list[str] = [
    "como_data",
    "parse_data",
    "parse_decimal_br",
    "listar_regioes",
    "listar_ufs",
    "normalizar_uf",
    "uf_para_nome",
    "uf_para_regiao",
]
