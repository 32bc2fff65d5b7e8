"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import date

import pytest

from tarifabr.config import reset_config


@pytest.fixture(autouse=True)
def _reset_global_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def hoje() -> date:
    return date(2025, 10, 19)


@pytest.fixture
def registro_factory():
    """Fabrica de registros no formato do datastore ANEEL (vírgula decimal)."""

    def _registro(
        sigla: str = "CEMIG-D",
        tusd: str = "325,12",
        te: str = "270,40",
        fim: str = "2099-05-27",
        inicio: str = "2025-05-28",
        modalidade: str = "Convencional",
        posto: str = "Não se aplica",
        **extra: object,
    ) -> dict:
        record = {
            "_id": 1,
            "DatGeracaoConjuntoDados": "2025-10-01",
            "DscREH": "RESOLUÇÃO HOMOLOGATÓRIA Nº 3.445",
            "SigAgente": sigla,
            "NumCNPJDistribuidora": "06981180000116",
            "DatInicioVigencia": inicio,
            "DatFimVigencia": fim,
            "DscBaseTarifaria": "Tarifa de Aplicação",
            "DscSubGrupo": "B1",
            "DscModalidadeTarifaria": modalidade,
            "DscClasse": "Residencial",
            "DscSubClasse": "Residencial",
            "DscDetalhe": "Não se aplica",
            "NomPostoTarifario": posto,
            "DscUnidadeTerciaria": "MWh",
            "SigAgenteAcessante": "Não se aplica",
            "VlrTUSD": tusd,
            "VlrTE": te,
        }
        record.update(extra)
        return record

    return _registro


@pytest.fixture
def registros_aneel(registro_factory) -> list[dict]:
    """Amostra com duplicatas, vigência vencida e valor inválido."""
    r = registro_factory
    return [
        r("CEMIG-D", "325,12", "270,40"),
        r("CEMIG-D", "300,00", "250,00", modalidade="Branca", posto="Fora ponta"),
        r("CEMIG-D", "400,00", "300,00", modalidade="Branca", posto="Ponta"),
        r("ENEL SP", "290,00", "260,00"),
        r("LIGHT SESA", "350,00", "300,00"),
        r("COPEL-DIS", "250,00", "240,00", fim="2024-06-23"),
        r("RGE SUL", "", "280,00"),
    ]
