"""
Padronização de UFs e regiões brasileiras.
"""

from __future__ import annotations

import unicodedata

UFS: dict[str, dict[str, str]] = {
    "AC": {"nome": "Acre", "regiao": "Norte"},
    "AL": {"nome": "Alagoas", "regiao": "Nordeste"},
    "AP": {"nome": "Amapá", "regiao": "Norte"},
    "AM": {"nome": "Amazonas", "regiao": "Norte"},
    "BA": {"nome": "Bahia", "regiao": "Nordeste"},
    "CE": {"nome": "Ceará", "regiao": "Nordeste"},
    "DF": {"nome": "Distrito Federal", "regiao": "Centro-Oeste"},
    "ES": {"nome": "Espírito Santo", "regiao": "Sudeste"},
    "GO": {"nome": "Goiás", "regiao": "Centro-Oeste"},
    "MA": {"nome": "Maranhão", "regiao": "Nordeste"},
    "MT": {"nome": "Mato Grosso", "regiao": "Centro-Oeste"},
    "MS": {"nome": "Mato Grosso do Sul", "regiao": "Centro-Oeste"},
    "MG": {"nome": "Minas Gerais", "regiao": "Sudeste"},
    "PA": {"nome": "Pará", "regiao": "Norte"},
    "PB": {"nome": "Paraíba", "regiao": "Nordeste"},
    "PR": {"nome": "Paraná", "regiao": "Sul"},
    "PE": {"nome": "Pernambuco", "regiao": "Nordeste"},
    "PI": {"nome": "Piauí", "regiao": "Nordeste"},
    "RJ": {"nome": "Rio de Janeiro", "regiao": "Sudeste"},
    "RN": {"nome": "Rio Grande do Norte", "regiao": "Nordeste"},
    "RS": {"nome": "Rio Grande do Sul", "regiao": "Sul"},
    "RO": {"nome": "Rondônia", "regiao": "Norte"},
    "RR": {"nome": "Roraima", "regiao": "Norte"},
    "SC": {"nome": "Santa Catarina", "regiao": "Sul"},
    "SP": {"nome": "São Paulo", "regiao": "Sudeste"},
    "SE": {"nome": "Sergipe", "regiao": "Nordeste"},
    "TO": {"nome": "Tocantins", "regiao": "Norte"},
}

REGIOES: dict[str, list[str]] = {
    "Norte": ["AC", "AP", "AM", "PA", "RO", "RR", "TO"],
    "Nordeste": ["AL", "BA", "CE", "MA", "PB", "PE", "PI", "RN", "SE"],
    "Centro-Oeste": ["DF", "GO", "MT", "MS"],
    "Sudeste": ["ES", "MG", "RJ", "SP"],
    "Sul": ["PR", "RS", "SC"],
}


def remover_acentos(texto: str) -> str:
    """Remove acentos de uma string."""
    nfkd = unicodedata.normalize("NFKD", texto)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


NOMES_PARA_UF: dict[str, str] = {
    remover_acentos(info["nome"].lower()): uf for uf, info in UFS.items()
} | {uf.lower(): uf for uf in UFS}


def normalizar_uf(entrada: str) -> str | None:
    """
    Normaliza entrada para sigla UF.

    Args:
        entrada: Sigla ou nome do estado

    Returns:
        Sigla UF ou None se não encontrado

    Examples:
        >>> normalizar_uf('minas gerais')
        'MG'
        >>> normalizar_uf('sp')
        'SP'
        >>> normalizar_uf('São Paulo')
        'SP'
    """
    entrada_norm = remover_acentos(entrada.strip().lower())

    if entrada_norm.upper() in UFS:
        return entrada_norm.upper()

    return NOMES_PARA_UF.get(entrada_norm)


def uf_para_nome(uf: str) -> str:
    """
    Retorna nome completo da UF.

    Raises:
        KeyError: Se UF inválida
    """
    return UFS[uf.upper()]["nome"]


def uf_para_regiao(uf: str) -> str:
    """Retorna região da UF."""
    return UFS[uf.upper()]["regiao"]


def listar_ufs(regiao: str | None = None) -> list[str]:
    """
    Lista UFs, opcionalmente filtradas por região.

    Args:
        regiao: Filtrar por região

    Returns:
        Lista de siglas UF
    """
    if regiao:
        return REGIOES.get(regiao, [])
    return list(UFS.keys())


def listar_regioes() -> list[str]:
    """Retorna lista de regiões."""
    return list(REGIOES.keys())
