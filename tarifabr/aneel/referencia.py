"""Tabela local de tarifas de referência das principais distribuidoras.

Usada apenas como fallback opcional quando a API ANEEL está indisponível
ou não retorna dados. Valores em R$/MWh (TUSD + TE, B1 convencional).
"""

from __future__ import annotations

from datetime import date

from .models import FONTE_REFERENCIA_LOCAL, TarifaResidencial


def _ref(
    sigla: str,
    nome: str,
    uf: str,
    cnpj: str,
    tusd: float,
    te: float,
) -> TarifaResidencial:
    return TarifaResidencial(
        sigla=sigla,
        nome=nome,
        uf=uf,
        cnpj=cnpj,
        vigencia_inicio=date(2024, 1, 1),
        vigencia_fim=date(2024, 12, 31),
        vlr_tusd=tusd,
        vlr_te=te,
        vlr_total=round(tusd + te, 2),
        fonte=FONTE_REFERENCIA_LOCAL,
    )


DISTRIBUIDORAS_REFERENCIA: tuple[TarifaResidencial, ...] = (
    _ref("ENEL SP", "Enel Distribuição São Paulo", "SP", "61695227000193", 280.45, 420.32),
    _ref("CPFL PAULISTA", "CPFL Paulista", "SP", "02998611000104", 275.20, 415.80),
    _ref(
        "ENERGISA SUL-SUDESTE",
        "Energisa Sul-Sudeste - Distribuidora de Energia S.A.",
        "SP",
        "07282377000120",
        350.00,
        445.53,
    ),
    _ref("ELETROPAULO", "Eletropaulo Metropolitana", "SP", "61695227000193", 285.60, 425.40),
    _ref("LIGHT", "Light Serviços de Eletricidade", "RJ", "04336050000108", 290.15, 430.85),
    _ref("ENEL RJ", "Enel Distribuição Rio", "RJ", "78570769000176", 285.30, 425.70),
    _ref("CEMIG", "Cemig Distribuição", "MG", "06981180000116", 270.80, 410.20),
    _ref("RGE", "Rio Grande Energia", "RS", "02016440000162", 265.40, 405.60),
    _ref("COPEL", "Copel Distribuição", "PR", "04995199000198", 260.20, 400.80),
    _ref("COELBA", "Coelba", "BA", "15139629000159", 295.60, 435.40),
    _ref("ENEL CE", "Enel Distribuição Ceará", "CE", "07437908000119", 300.20, 440.80),
    _ref("NEOENERGIA PE", "Neoenergia Pernambuco", "PE", "10835932000189", 298.40, 438.60),
)


def listar_referencia(uf: str | None = None) -> list[TarifaResidencial]:
    """Retorna cópias da tabela de referência, opcionalmente filtrada por UF."""
    sigla_uf = uf.strip().upper() if uf else None
    return [
        d.model_copy()
        for d in DISTRIBUIDORAS_REFERENCIA
        if sigla_uf is None or d.uf == sigla_uf
    ]
