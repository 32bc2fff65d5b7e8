"""Constantes e configurações do tarifabr."""

from __future__ import annotations

from enum import StrEnum

from pydantic_settings import BaseSettings


class Fonte(StrEnum):
    ANEEL = "aneel"
    REFERENCIA = "referencia"  # Tabela local embutida, usada como fallback


URLS = {
    Fonte.ANEEL: {
        "base": "https://dadosabertos.aneel.gov.br",
        "api": "https://dadosabertos.aneel.gov.br/api/3/action",
        "datastore_search": "https://dadosabertos.aneel.gov.br/api/3/action/datastore_search",
    },
}

# Recurso "Tarifas Homologadas das Distribuidoras de Energia Elétrica"
ANEEL_RESOURCE_ID = "fcf2906c-7c32-4b9b-a637-054e7a5234f4"

ANEEL_FILTROS_RESIDENCIAL: dict[str, str] = {
    "DscSubGrupo": "B1",
    "DscClasse": "Residencial",
}

ANEEL_LIMIT_PADRAO = 10000


class HTTPSettings(BaseSettings):
    timeout_connect: float = 10.0
    timeout_read: float = 60.0
    timeout_write: float = 10.0
    timeout_pool: float = 10.0

    # 1 = sem retry automático; o caller decide se tenta de novo
    max_retries: int = 1
    retry_base_delay: float = 1.0
    retry_max_delay: float = 30.0
    retry_exponential_base: int = 2

    class Config:
        env_prefix = "TARIFABR_HTTP_"


class ImpostoSettings(BaseSettings):
    aliquota_icms: float = 0.18
    aliquota_pis_cofins: float = 0.0925
    taxa_iluminacao_publica: float = 41.12

    class Config:
        env_prefix = "TARIFABR_IMPOSTOS_"


# Datas de vigência ANEEL são dias do calendário de Brasília
TIMEZONE_VIGENCIA = "America/Sao_Paulo"

RETRIABLE_STATUS_CODES: set[int] = {408, 429, 500, 502, 503, 504}
