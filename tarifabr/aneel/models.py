"""Modelos e constantes para tarifas homologadas ANEEL (subgrupo B1 residencial).

Fonte: portal de dados abertos ANEEL (CKAN datastore).
Valores de TUSD e TE publicados em R$/MWh, com vírgula decimal.
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = structlog.get_logger()

UF_PADRAO = "SP"

MODALIDADE_PADRAO = "Convencional"
POSTO_TARIFARIO_PADRAO = "Único"

FONTE_ANEEL_API = "ANEEL_API"
FONTE_REFERENCIA_LOCAL = "REFERENCIA_LOCAL"

# Padrão (substring do nome/sigla da distribuidora) -> UF.
# Ordem de declaração só desempata padrões de mesmo tamanho; a busca
# testa sempre do padrão mais longo para o mais curto.
_DISTRIBUIDORA_UF: dict[str, str] = {
    # São Paulo
    "ENEL SP": "SP",
    "ENEL DISTRIBUICAO SAO PAULO": "SP",
    "CPFL PAULISTA": "SP",
    "CPFL PIRATININGA": "SP",
    "ELEKTRO": "SP",
    "ELETROPAULO": "SP",
    "BANDEIRANTE ENERGIA": "SP",
    "CPFL SANTA CRUZ": "SP",
    "ENERGISA SUL-SUDESTE": "SP",
    # Rio de Janeiro
    "LIGHT": "RJ",
    "ENEL RJ": "RJ",
    "ENEL DISTRIBUICAO RIO": "RJ",
    "AMPLA": "RJ",
    # Minas Gerais
    "CEMIG": "MG",
    "CEMIG DISTRIBUICAO": "MG",
    "ENERGISA MINAS GERAIS": "MG",
    "LIGHT ESCO": "MG",
    # Rio Grande do Sul
    "RGE": "RS",
    "CEEE": "RS",
    "RGE SUL": "RS",
    "ENERGISA NOVA FRIBURGO": "RS",
    # Paraná
    "COPEL": "PR",
    "COPEL DISTRIBUICAO": "PR",
    # Santa Catarina
    "CELESC": "SC",
    "CELESC DISTRIBUICAO": "SC",
    # Bahia
    "COELBA": "BA",
    "NEOENERGIA COELBA": "BA",
    # Ceará
    "ENEL CE": "CE",
    "ENEL DISTRIBUICAO CEARA": "CE",
    # Pernambuco
    "CELPE": "PE",
    "NEOENERGIA PE": "PE",
    "NEOENERGIA PERNAMBUCO": "PE",
    # Distrito Federal
    "CEB": "DF",
    "NEOENERGIA BRASILIA": "DF",
    # Goiás
    "ENEL GO": "GO",
    "ENEL DISTRIBUICAO GOIAS": "GO",
    "CELG": "GO",
    # Espírito Santo
    "EDP ESCELSA": "ES",
    "ESCELSA": "ES",
    # Mato Grosso do Sul
    "ENERGISA MS": "MS",
    "ENERGISA MATO GROSSO DO SUL": "MS",
    # Mato Grosso
    "ENERGISA MT": "MT",
    "ENERGISA MATO GROSSO": "MT",
    # Paraíba
    "ENERGISA PB": "PB",
    "ENERGISA PARAIBA": "PB",
    # Sergipe
    "ENERGISA SE": "SE",
    "ENERGISA SERGIPE": "SE",
    # Rio Grande do Norte
    "COSERN": "RN",
    "NEOENERGIA COSERN": "RN",
    # Alagoas
    "CEAL": "AL",
    "NEOENERGIA CEAL": "AL",
    # Amazonas
    "AMAZONAS ENERGIA": "AM",
    "AME": "AM",
    # Pará
    "CELPA": "PA",
    "EQUATORIAL PARA": "PA",
    # Maranhão
    "CEMAR": "MA",
    "EQUATORIAL MARANHAO": "MA",
    # Piauí
    "CEPISA": "PI",
    "EQUATORIAL PIAUI": "PI",
    # Acre
    "ELETROACRE": "AC",
    # Rondônia
    "CERON": "RO",
    "ENERGISA RONDONIA": "RO",
    # Roraima
    "RRE": "RR",
    "RORAIMA ENERGIA": "RR",
    # Amapá
    "CEA": "AP",
    "COMPANHIA DE ELETRICIDADE DO AMAPA": "AP",
    # Tocantins
    "CELTINS": "TO",
    "ENERGISA TOCANTINS": "TO",
}

DISTRIBUIDORA_UF: MappingProxyType[str, str] = MappingProxyType(_DISTRIBUIDORA_UF)

# sorted() é estável: empates de tamanho mantêm a ordem de declaração
_PADROES_POR_ESPECIFICIDADE: tuple[tuple[str, str], ...] = tuple(
    sorted(DISTRIBUIDORA_UF.items(), key=lambda item: len(item[0]), reverse=True)
)


def uf_da_distribuidora(nome: str) -> str:
    """Resolve a UF de uma distribuidora pelo nome ou sigla.

    Testa os padrões conhecidos do mais longo para o mais curto e retorna
    a UF do primeiro que aparece como substring do nome em maiúsculas.
    Nunca falha: sem correspondência, retorna ``UF_PADRAO``.

    Args:
        nome: Sigla ou nome livre (ex: "Enel SP", "CEMIG-D").

    Returns:
        Sigla UF com 2 letras.

    Example:
        >>> uf_da_distribuidora("CEMIG DISTRIBUICAO")
        'MG'
        >>> uf_da_distribuidora("LIGHT ESCO")
        'MG'
    """
    nome_upper = (nome or "").upper()

    for padrao, uf in _PADROES_POR_ESPECIFICIDADE:
        if padrao in nome_upper:
            return uf

    logger.debug("aneel_uf_nao_mapeada", distribuidora=nome, uf_padrao=UF_PADRAO)
    return UF_PADRAO


def mwh_para_kwh(valor_mwh: float) -> float:
    """Converte R$/MWh para R$/kWh."""
    return valor_mwh / 1000


class RegistroTarifaANEEL(BaseModel):
    """Registro bruto do datastore ANEEL. Campos ausentes viram string vazia."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    data_geracao: str = Field("", alias="DatGeracaoConjuntoDados")
    resolucao: str = Field("", alias="DscREH")
    sigla: str = Field("", alias="SigAgente")
    cnpj: str = Field("", alias="NumCNPJDistribuidora")
    vigencia_inicio: str = Field("", alias="DatInicioVigencia")
    vigencia_fim: str = Field("", alias="DatFimVigencia")
    base_tarifaria: str = Field("", alias="DscBaseTarifaria")
    subgrupo: str = Field("", alias="DscSubGrupo")
    modalidade: str = Field("", alias="DscModalidadeTarifaria")
    classe: str = Field("", alias="DscClasse")
    subclasse: str = Field("", alias="DscSubClasse")
    detalhe: str = Field("", alias="DscDetalhe")
    posto_tarifario: str = Field("", alias="NomPostoTarifario")
    unidade: str = Field("", alias="DscUnidadeTerciaria")
    sigla_acessante: str = Field("", alias="SigAgenteAcessante")
    vlr_tusd: str = Field("", alias="VlrTUSD")
    vlr_te: str = Field("", alias="VlrTE")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()


class TarifaResidencial(BaseModel):
    """Tarifa residencial B1 vigente de uma distribuidora."""

    sigla: str
    nome: str
    uf: str = Field(..., min_length=2, max_length=2)
    cnpj: str = ""
    vigencia_inicio: date | None = None
    vigencia_fim: date
    modalidade: str = MODALIDADE_PADRAO
    posto_tarifario: str = POSTO_TARIFARIO_PADRAO
    vlr_tusd: float = 0.0
    vlr_te: float = 0.0
    vlr_total: float = 0.0
    fonte: str = FONTE_ANEEL_API

    @field_validator("uf", mode="before")
    @classmethod
    def normalize_uf(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def tarifa_kwh(self) -> float:
        """Tarifa total (TUSD + TE) em R$/kWh."""
        return mwh_para_kwh(self.vlr_total)
