"""Testes para tarifabr.aneel.parser."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from tarifabr.aneel import parser
from tarifabr.aneel.models import TarifaResidencial


class TestParseTarifas:
    def test_one_entry_per_sigla(self, registros_aneel, hoje):
        resultado = parser.parse_tarifas(registros_aneel, hoje)
        siglas = [t.sigla for t in resultado.tarifas]
        assert len(siglas) == len(set(siglas))
        assert set(siglas) == {"CEMIG-D", "ENEL SP", "LIGHT SESA", "RGE SUL"}

    def test_dedup_keeps_lowest_total(self, registros_aneel, hoje):
        resultado = parser.parse_tarifas(registros_aneel, hoje)
        cemig = next(t for t in resultado.tarifas if t.sigla == "CEMIG-D")
        assert cemig.vlr_total == pytest.approx(550.00)
        assert cemig.modalidade == "Branca"
        assert cemig.posto_tarifario == "Fora ponta"
        assert resultado.duplicadas_descartadas == 2

    def test_dedup_equal_total_keeps_first(self, registro_factory, hoje):
        records = [
            registro_factory("ENEL SP", "300,00", "200,00", modalidade="Convencional"),
            registro_factory("ENEL SP", "200,00", "300,00", modalidade="Branca"),
        ]
        tarifas = parser.normalizar_registros(records, hoje)
        assert len(tarifas) == 1
        assert tarifas[0].modalidade == "Convencional"

    def test_first_appearance_order_preserved(self, registros_aneel, hoje):
        tarifas = parser.normalizar_registros(registros_aneel, hoje)
        assert [t.sigla for t in tarifas] == ["CEMIG-D", "ENEL SP", "LIGHT SESA", "RGE SUL"]

    def test_expired_records_dropped(self, registros_aneel, hoje):
        resultado = parser.parse_tarifas(registros_aneel, hoje)
        assert "COPEL-DIS" not in {t.sigla for t in resultado.tarifas}
        assert resultado.fora_de_vigencia == 1

    def test_end_date_equal_today_is_kept(self, registro_factory):
        records = [registro_factory("CELESC", fim="2025-10-19")]
        tarifas = parser.normalizar_registros(records, date(2025, 10, 19))
        assert len(tarifas) == 1

    def test_end_date_yesterday_is_dropped(self, registro_factory):
        records = [registro_factory("CELESC", fim="2025-10-18")]
        tarifas = parser.normalizar_registros(records, date(2025, 10, 19))
        assert tarifas == []

    def test_datetime_reference_compares_by_day(self, registro_factory):
        records = [registro_factory("CELESC", fim="2025-10-19")]
        agora = datetime(2025, 10, 19, 23, 59, tzinfo=UTC)
        assert len(parser.normalizar_registros(records, agora)) == 1

    def test_iso_datetime_end_date(self, registro_factory, hoje):
        records = [registro_factory("CELESC", fim="2099-05-27T00:00:00")]
        tarifas = parser.normalizar_registros(records, hoje)
        assert tarifas[0].vigencia_fim == date(2099, 5, 27)

    def test_invalid_end_date_skipped(self, registro_factory, hoje):
        records = [registro_factory("CELESC", fim="sem data"), registro_factory("RGE")]
        resultado = parser.parse_tarifas(records, hoje)
        assert [t.sigla for t in resultado.tarifas] == ["RGE"]
        assert resultado.datas_invalidas == 1

    def test_missing_sigla_skipped(self, registro_factory, hoje):
        records = [registro_factory(""), registro_factory("RGE")]
        resultado = parser.parse_tarifas(records, hoje)
        assert [t.sigla for t in resultado.tarifas] == ["RGE"]
        assert resultado.sem_sigla == 1

    def test_comma_decimal_parsed(self, registro_factory, hoje):
        records = [registro_factory("CEMIG-D", "0,72518", "1,5")]
        t = parser.normalizar_registros(records, hoje)[0]
        assert t.vlr_tusd == pytest.approx(0.72518)
        assert t.vlr_te == pytest.approx(1.5)
        assert t.vlr_total == pytest.approx(2.22518)

    def test_invalid_value_becomes_zero(self, registros_aneel, hoje):
        resultado = parser.parse_tarifas(registros_aneel, hoje)
        rge = next(t for t in resultado.tarifas if t.sigla == "RGE SUL")
        assert rge.vlr_tusd == 0.0
        assert rge.vlr_te == pytest.approx(280.00)
        assert rge.vlr_total == pytest.approx(280.00)
        assert resultado.valores_invalidos == 1

    def test_garbage_value_becomes_zero(self, registro_factory, hoje):
        records = [registro_factory("RGE", "abc", "n/d")]
        resultado = parser.parse_tarifas(records, hoje)
        assert resultado.tarifas[0].vlr_total == 0.0
        assert resultado.valores_invalidos == 2

    def test_total_is_sum(self, registros_aneel, hoje):
        for t in parser.normalizar_registros(registros_aneel, hoje):
            assert t.vlr_total == pytest.approx(t.vlr_tusd + t.vlr_te)

    def test_defaults_for_missing_modalidade_and_posto(self, registro_factory, hoje):
        records = [registro_factory("RGE", modalidade="", posto="")]
        t = parser.normalizar_registros(records, hoje)[0]
        assert t.modalidade == "Convencional"
        assert t.posto_tarifario == "Único"

    def test_fields_mapped(self, registro_factory, hoje):
        t = parser.normalizar_registros([registro_factory("CEMIG-D")], hoje)[0]
        assert t.nome == "CEMIG-D"
        assert t.uf == "MG"
        assert t.cnpj == "06981180000116"
        assert t.vigencia_inicio == date(2025, 5, 28)
        assert t.fonte == "ANEEL_API"

    def test_missing_start_date_is_none(self, registro_factory, hoje):
        t = parser.normalizar_registros([registro_factory("RGE", inicio="")], hoje)[0]
        assert t.vigencia_inicio is None

    def test_empty_records(self, hoje):
        resultado = parser.parse_tarifas([], hoje)
        assert resultado.tarifas == []
        assert resultado.registros_lidos == 0
        assert resultado.avisos() == []

    def test_registros_lidos(self, registros_aneel, hoje):
        assert parser.parse_tarifas(registros_aneel, hoje).registros_lidos == 7

    def test_idempotent(self, registros_aneel, hoje):
        a = parser.normalizar_registros(registros_aneel, hoje)
        b = parser.normalizar_registros(registros_aneel, hoje)
        assert a == b


class TestAvisos:
    def test_invalid_values_reported(self, registros_aneel, hoje):
        avisos = parser.parse_tarifas(registros_aneel, hoje).avisos()
        assert len(avisos) == 1
        assert "inválido" in avisos[0]

    def test_multiple_anomalies(self, registro_factory, hoje):
        records = [
            registro_factory("", "1,0"),
            registro_factory("RGE", fim="??"),
            registro_factory("CEEE", "x"),
        ]
        avisos = parser.parse_tarifas(records, hoje).avisos()
        assert len(avisos) == 3


def _t(sigla: str, uf: str, total: float) -> TarifaResidencial:
    return TarifaResidencial(
        sigla=sigla, nome=sigla, uf=uf, vigencia_fim=date(2099, 1, 1), vlr_total=total
    )


class TestFilterByUf:
    def test_filters(self):
        tarifas = [_t("ENEL SP", "SP", 1), _t("CEMIG", "MG", 2), _t("CPFL", "SP", 3)]
        assert [t.sigla for t in parser.filter_by_uf(tarifas, "SP")] == ["ENEL SP", "CPFL"]

    def test_lowercase_uf(self):
        tarifas = [_t("CEMIG", "MG", 2)]
        assert len(parser.filter_by_uf(tarifas, " mg ")) == 1

    def test_none_returns_all(self):
        tarifas = [_t("ENEL SP", "SP", 1), _t("CEMIG", "MG", 2)]
        assert parser.filter_by_uf(tarifas, None) == tarifas

    def test_no_match(self):
        assert parser.filter_by_uf([_t("CEMIG", "MG", 2)], "AC") == []


class TestOrdenarPorTotal:
    def test_ascending(self):
        tarifas = [_t("A", "SP", 3), _t("B", "SP", 1), _t("C", "SP", 2)]
        assert [t.sigla for t in parser.ordenar_por_total(tarifas)] == ["B", "C", "A"]

    def test_stable_on_ties(self):
        tarifas = [_t("A", "SP", 2), _t("B", "SP", 1), _t("C", "SP", 2)]
        assert [t.sigla for t in parser.ordenar_por_total(tarifas)] == ["B", "A", "C"]


class TestToDataframe:
    def test_columns(self, registros_aneel, hoje):
        df = parser.to_dataframe(parser.normalizar_registros(registros_aneel, hoje))
        assert list(df.columns) == parser.COLUNAS_SAIDA
        assert len(df) == 4

    def test_empty_keeps_columns(self):
        df = parser.to_dataframe([])
        assert df.empty
        assert list(df.columns) == parser.COLUNAS_SAIDA
