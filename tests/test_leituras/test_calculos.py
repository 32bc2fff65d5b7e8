"""Testes para tarifabr.leituras."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from tarifabr.custo.calculadora import estimar_custo
from tarifabr.custo.models import ConfiguracaoTarifa
from tarifabr.leituras import Leitura
from tarifabr.leituras.calculos import (
    calcular_estatisticas,
    consumo_entre,
    intervalo_datas,
    validar_leitura,
)


@pytest.fixture
def config() -> ConfiguracaoTarifa:
    return ConfiguracaoTarifa(tarifa_base=0.72518, taxa_iluminacao_publica=41.12)


@pytest.fixture
def leituras() -> list[Leitura]:
    return [
        Leitura(id="1", data=date(2025, 10, 5), valor=1050),
        Leitura(id="2", data=date(2025, 10, 12), valor=1120),
    ]


class TestLeitura:
    def test_valid(self):
        leitura = Leitura(id="a", data=date(2025, 10, 1), valor=12345.6)
        assert leitura.consumo is None

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Leitura(id="a", data=date(2025, 10, 1), valor=-1)

    def test_above_max_rejected(self):
        with pytest.raises(ValidationError):
            Leitura(id="a", data=date(2025, 10, 1), valor=1_000_000)


class TestValidarLeitura:
    def test_valid(self, leituras):
        r = validar_leitura(1200, 1000, leituras)
        assert r.valido is True
        assert r.mensagem is None

    def test_valid_without_previous(self):
        assert validar_leitura(1001, 1000, []).valido is True

    @pytest.mark.parametrize("valor", [0, -5, float("nan")])
    def test_not_positive(self, valor):
        r = validar_leitura(valor, 1000, [])
        assert r.valido is False
        assert r.mensagem == "A leitura deve ser um número válido maior que 0"

    def test_too_high(self):
        r = validar_leitura(1_000_000, 1000, [])
        assert r.valido is False
        assert "999.999" in r.mensagem

    def test_not_above_initial(self):
        r = validar_leitura(1000, 1000, [])
        assert r.valido is False
        assert r.mensagem == "A leitura deve ser maior que a leitura inicial (1.000 kWh)"

    def test_not_above_last(self, leituras):
        r = validar_leitura(1100, 1000, leituras)
        assert r.valido is False
        assert r.mensagem == "A leitura deve ser maior que a última registrada (1.120 kWh)"

    def test_equal_to_last(self, leituras):
        assert validar_leitura(1120, 1000, leituras).valido is False


class TestConsumoEntre:
    def test_difference(self):
        assert consumo_entre(1000, 1120) == 120

    def test_never_negative(self):
        assert consumo_entre(1120, 1000) == 0.0


class TestCalcularEstatisticas:
    def test_without_readings(self, config):
        stats = calcular_estatisticas([], 1000, config, hoje=date(2025, 10, 19))
        assert stats.consumo_total == 0
        assert stats.media_diaria == 0
        assert stats.projecao_mensal == 0
        assert stats.custo_estimado == pytest.approx(41.12)

    def test_totals(self, leituras, config):
        stats = calcular_estatisticas(leituras, 1000, config, hoje=date(2025, 10, 19))
        assert stats.consumo_total == 120
        assert stats.media_diaria == 60

    def test_projection_by_day_of_month(self, leituras, config):
        stats = calcular_estatisticas(leituras, 1000, config, hoje=date(2025, 10, 19))
        assert stats.projecao_mensal == round(120 / 19 * 31)

    def test_conservative_projection_early_in_month(self, leituras, config):
        stats = calcular_estatisticas(leituras, 1000, config, hoje=date(2025, 10, 2))
        assert stats.projecao_mensal == 60 * 31

    def test_projection_day_three_is_conservative(self, leituras, config):
        stats = calcular_estatisticas(leituras, 1000, config, hoje=date(2025, 2, 3))
        assert stats.projecao_mensal == 60 * 28

    def test_cost_uses_estimate(self, leituras, config):
        stats = calcular_estatisticas(leituras, 1000, config, hoje=date(2025, 10, 19))
        assert stats.custo_estimado == pytest.approx(estimar_custo(120, config))

    def test_uses_highest_reading(self, config):
        leituras = [
            Leitura(id="2", data=date(2025, 10, 12), valor=1120),
            Leitura(id="1", data=date(2025, 10, 5), valor=1050),
        ]
        stats = calcular_estatisticas(leituras, 1000, config, hoje=date(2025, 10, 19))
        assert stats.consumo_total == 120


class TestIntervaloDatas:
    def test_empty(self):
        assert intervalo_datas([]) is None

    def test_range(self, leituras):
        assert intervalo_datas(list(reversed(leituras))) == (
            date(2025, 10, 5),
            date(2025, 10, 12),
        )
