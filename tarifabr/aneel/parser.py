"""Parser para tarifas ANEEL (normalização, vigência e deduplicação).

PARSER_VERSION = 1: vírgula decimal -> float (inválido vira 0),
filtro de vigência por dia de calendário, uma entrada por sigla
(a de menor TUSD + TE).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import pandas as pd
import structlog

from tarifabr.normalize.dates import como_data, parse_data
from tarifabr.normalize.numbers import parse_decimal_br

from .models import (
    FONTE_ANEEL_API,
    MODALIDADE_PADRAO,
    POSTO_TARIFARIO_PADRAO,
    RegistroTarifaANEEL,
    TarifaResidencial,
    uf_da_distribuidora,
)

logger = structlog.get_logger()

PARSER_VERSION = 1

COLUNAS_SAIDA = [
    "sigla",
    "nome",
    "uf",
    "cnpj",
    "vigencia_inicio",
    "vigencia_fim",
    "modalidade",
    "posto_tarifario",
    "vlr_tusd",
    "vlr_te",
    "vlr_total",
    "fonte",
]


@dataclass
class ResultadoNormalizacao:
    """Tarifas normalizadas mais contadores de anomalias absorvidas."""

    tarifas: list[TarifaResidencial] = field(default_factory=list)
    registros_lidos: int = 0
    valores_invalidos: int = 0
    fora_de_vigencia: int = 0
    datas_invalidas: int = 0
    sem_sigla: int = 0
    duplicadas_descartadas: int = 0

    def avisos(self) -> list[str]:
        """Descrições legíveis das anomalias (para MetaInfo.validation_warnings)."""
        avisos = []
        if self.valores_invalidos:
            avisos.append(f"{self.valores_invalidos} valor(es) TUSD/TE inválido(s) tratados como 0")
        if self.datas_invalidas:
            avisos.append(f"{self.datas_invalidas} registro(s) com fim de vigência inválido")
        if self.sem_sigla:
            avisos.append(f"{self.sem_sigla} registro(s) sem sigla de distribuidora")
        return avisos


def _valor(raw: str, campo: str, sigla: str, resultado: ResultadoNormalizacao) -> float:
    valor = parse_decimal_br(raw)
    if valor is None:
        resultado.valores_invalidos += 1
        logger.warning("aneel_valor_invalido", campo=campo, valor=raw, sigla=sigla)
        return 0.0
    return valor


def parse_tarifas(
    records: list[dict[str, Any]],
    agora: date | datetime,
) -> ResultadoNormalizacao:
    """Normaliza registros brutos ANEEL em tarifas vigentes, uma por sigla.

    Args:
        records: Registros do datastore (dicts com nomes de coluna ANEEL).
        agora: Instante de referência, avaliado uma vez pelo caller.
               Registros com fim de vigência anterior ao dia de ``agora``
               são descartados; fim igual a hoje é mantido.

    Returns:
        ResultadoNormalizacao com as tarifas na ordem em que cada sigla
        apareceu pela primeira vez, mais contadores de anomalias.
    """
    hoje = como_data(agora)
    resultado = ResultadoNormalizacao(registros_lidos=len(records))
    por_sigla: dict[str, TarifaResidencial] = {}

    for raw in records:
        registro = RegistroTarifaANEEL.model_validate(raw)
        sigla = registro.sigla

        if not sigla:
            resultado.sem_sigla += 1
            logger.warning("aneel_registro_sem_sigla", cnpj=registro.cnpj)
            continue

        fim = parse_data(registro.vigencia_fim)
        if fim is None:
            resultado.datas_invalidas += 1
            logger.warning("aneel_vigencia_invalida", sigla=sigla, valor=registro.vigencia_fim)
            continue

        if fim < hoje:
            resultado.fora_de_vigencia += 1
            continue

        vlr_tusd = _valor(registro.vlr_tusd, "VlrTUSD", sigla, resultado)
        vlr_te = _valor(registro.vlr_te, "VlrTE", sigla, resultado)
        vlr_total = vlr_tusd + vlr_te

        atual = por_sigla.get(sigla)
        if atual is not None and atual.vlr_total <= vlr_total:
            resultado.duplicadas_descartadas += 1
            continue
        if atual is not None:
            resultado.duplicadas_descartadas += 1

        por_sigla[sigla] = TarifaResidencial(
            sigla=sigla,
            nome=sigla,
            uf=uf_da_distribuidora(sigla),
            cnpj=registro.cnpj,
            vigencia_inicio=parse_data(registro.vigencia_inicio),
            vigencia_fim=fim,
            modalidade=registro.modalidade or MODALIDADE_PADRAO,
            posto_tarifario=registro.posto_tarifario or POSTO_TARIFARIO_PADRAO,
            vlr_tusd=vlr_tusd,
            vlr_te=vlr_te,
            vlr_total=vlr_total,
            fonte=FONTE_ANEEL_API,
        )

    resultado.tarifas = list(por_sigla.values())

    logger.info(
        "aneel_parse_ok",
        registros=resultado.registros_lidos,
        distribuidoras=len(resultado.tarifas),
        fora_de_vigencia=resultado.fora_de_vigencia,
        valores_invalidos=resultado.valores_invalidos,
    )

    return resultado


def normalizar_registros(
    records: list[dict[str, Any]],
    agora: date | datetime,
) -> list[TarifaResidencial]:
    """Atalho para ``parse_tarifas(...).tarifas``."""
    return parse_tarifas(records, agora).tarifas


def filter_by_uf(tarifas: list[TarifaResidencial], uf: str | None) -> list[TarifaResidencial]:
    """Filtra tarifas por UF (comparação exata da sigla em maiúsculas)."""
    if not uf:
        return tarifas
    uf_upper = uf.strip().upper()
    return [t for t in tarifas if t.uf == uf_upper]


def ordenar_por_total(tarifas: list[TarifaResidencial]) -> list[TarifaResidencial]:
    """Ordena por tarifa total crescente (estável em empates)."""
    return sorted(tarifas, key=lambda t: t.vlr_total)


def to_dataframe(tarifas: list[TarifaResidencial]) -> pd.DataFrame:
    """Converte tarifas em DataFrame com colunas fixas."""
    if not tarifas:
        return pd.DataFrame(columns=COLUNAS_SAIDA)

    df = pd.DataFrame([t.model_dump() for t in tarifas])
    return df[COLUNAS_SAIDA]
