"""API pública do módulo ANEEL: tarifas residenciais B1 vigentes.

Consulta o datastore de tarifas homologadas, normaliza, deduplica por
distribuidora e ordena pela tarifa total (TUSD + TE, R$/MWh).
"""

from __future__ import annotations

import time
import warnings
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

import pandas as pd
import structlog

from tarifabr.config import get_config
from tarifabr.constants import ANEEL_LIMIT_PADRAO, TIMEZONE_VIGENCIA, Fonte
from tarifabr.exceptions import NoDataError, PartialDataWarning, UpstreamUnavailableError
from tarifabr.models import MetaInfo
from tarifabr.normalize.regions import normalizar_uf

from . import client, parser, referencia
from .models import TarifaResidencial

logger = structlog.get_logger()


def _finalizar(
    tarifas: list[TarifaResidencial],
    uf: str | None,
    as_dataframe: bool,
) -> list[TarifaResidencial] | pd.DataFrame:
    tarifas = parser.ordenar_por_total(parser.filter_by_uf(tarifas, uf))
    if as_dataframe:
        return parser.to_dataframe(tarifas)
    return tarifas


async def tarifas(
    uf: str | None = None,
    limit: int = ANEEL_LIMIT_PADRAO,
    *,
    fallback: bool | None = None,
    as_dataframe: bool = False,
    return_meta: bool = False,
) -> Any:
    """Busca tarifas residenciais B1 vigentes por distribuidora.

    Args:
        uf: Filtrar por UF (sigla ou nome: "SP", "Minas Gerais").
            None retorna todas.
        limit: Máximo de linhas pedidas ao datastore ANEEL.
        fallback: Se True, usa a tabela local de referência quando a ANEEL
                  estiver indisponível ou sem dados. None usa a config global.
        as_dataframe: Se True, retorna pandas DataFrame em vez de lista.
        return_meta: Se True, retorna tupla (resultado, MetaInfo).

    Returns:
        Lista de TarifaResidencial (ou DataFrame) ordenada por vlr_total,
        no máximo uma entrada por sigla.

    Raises:
        UpstreamUnavailableError: ANEEL fora do ar (status não-2xx, timeout).
        NoDataError: ANEEL respondeu sem registros.

    Example:
        >>> lista = await aneel.tarifas("MG")
        >>> lista[0].sigla, lista[0].tarifa_kwh
    """
    if uf:
        uf = normalizar_uf(uf) or uf.strip().upper()

    config = get_config()
    usar_fallback = config.fallback_referencia if fallback is None else fallback
    agora = datetime.now(ZoneInfo(TIMEZONE_VIGENCIA))

    logger.info("aneel_tarifas", uf=uf, limit=limit, fallback=usar_fallback)

    attempted = [Fonte.ANEEL.value]
    t0 = time.monotonic()
    try:
        if not config.network_enabled:
            raise UpstreamUnavailableError(
                source="aneel",
                url=client.DATASTORE_URL,
                last_error="network disabled (TarifabrConfig.network_enabled=False)",
            )
        records = await client.fetch_registros(limit=limit)
    except (UpstreamUnavailableError, NoDataError) as e:
        if not usar_fallback:
            raise
        logger.warning("aneel_fallback_referencia", uf=uf, error=str(e))
        attempted.append(Fonte.REFERENCIA.value)
        resultado = _finalizar(referencia.listar_referencia(), uf, as_dataframe)
        if return_meta:
            meta = MetaInfo(
                source=Fonte.REFERENCIA.value,
                source_url="",
                source_method="local",
                fetched_at=agora,
                records_count=len(resultado),
                validation_passed=False,
                validation_warnings=[f"ANEEL indisponível: {e}"],
                attempted_sources=attempted,
                selected_source=Fonte.REFERENCIA.value,
                filters={"uf": uf, "limit": limit},
            )
            return resultado, meta
        return resultado
    fetch_ms = int((time.monotonic() - t0) * 1000)

    t1 = time.monotonic()
    normalizacao = parser.parse_tarifas(records, agora)
    resultado = _finalizar(normalizacao.tarifas, uf, as_dataframe)
    parse_ms = int((time.monotonic() - t1) * 1000)

    avisos = normalizacao.avisos()
    if normalizacao.valores_invalidos:
        warnings.warn(avisos[0], PartialDataWarning, stacklevel=2)

    logger.info("aneel_tarifas_ok", uf=uf, distribuidoras=len(resultado))

    if return_meta:
        meta = MetaInfo(
            source=Fonte.ANEEL.value,
            source_url=client.DATASTORE_URL,
            source_method="httpx",
            fetched_at=agora,
            fetch_duration_ms=fetch_ms,
            parse_duration_ms=parse_ms,
            raw_records_count=normalizacao.registros_lidos,
            records_count=len(resultado),
            columns=parser.COLUNAS_SAIDA,
            parser_version=parser.PARSER_VERSION,
            validation_passed=not avisos,
            validation_warnings=avisos,
            attempted_sources=attempted,
            selected_source=Fonte.ANEEL.value,
            filters={"uf": uf, "limit": limit},
        )
        return resultado, meta

    return resultado


async def distribuidora_mais_barata(
    uf: str,
    *,
    fallback: bool | None = None,
) -> TarifaResidencial | None:
    """Retorna a distribuidora de menor tarifa total na UF, ou None."""
    lista = await tarifas(uf, fallback=fallback)
    return lista[0] if lista else None
