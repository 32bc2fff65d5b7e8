"""Testes para a tabela local de referência."""

from __future__ import annotations

import pytest

from tarifabr.aneel.models import uf_da_distribuidora
from tarifabr.aneel.referencia import DISTRIBUIDORAS_REFERENCIA, listar_referencia


class TestDistribuidorasReferencia:
    def test_size(self):
        assert len(DISTRIBUIDORAS_REFERENCIA) == 12

    def test_total_is_sum(self):
        for d in DISTRIBUIDORAS_REFERENCIA:
            assert d.vlr_total == pytest.approx(d.vlr_tusd + d.vlr_te)

    def test_uf_consistent_with_mapper(self):
        for d in DISTRIBUIDORAS_REFERENCIA:
            assert uf_da_distribuidora(d.sigla) == d.uf

    def test_source_marked_local(self):
        assert {d.fonte for d in DISTRIBUIDORAS_REFERENCIA} == {"REFERENCIA_LOCAL"}

    def test_enel_sp(self):
        enel = next(d for d in DISTRIBUIDORAS_REFERENCIA if d.sigla == "ENEL SP")
        assert enel.vlr_total == pytest.approx(700.77)
        assert enel.tarifa_kwh == pytest.approx(0.70077)


class TestListarReferencia:
    def test_all(self):
        assert len(listar_referencia()) == 12

    def test_filter_uf(self):
        sp = listar_referencia("sp")
        assert len(sp) == 4
        assert all(d.uf == "SP" for d in sp)

    def test_unknown_uf(self):
        assert listar_referencia("AC") == []

    def test_returns_copy(self):
        lista = listar_referencia()
        lista.clear()
        assert len(listar_referencia()) == 12

    def test_entries_are_copies(self):
        primeira = listar_referencia()[0]
        original = primeira.vlr_total
        primeira.vlr_total = 0.0

        assert listar_referencia()[0].vlr_total == original
        assert DISTRIBUIDORAS_REFERENCIA[0].vlr_total == original

    def test_filtered_entries_are_copies(self):
        listar_referencia("RJ")[0].sigla = "ALTERADA"
        assert "ALTERADA" not in {d.sigla for d in DISTRIBUIDORAS_REFERENCIA}
