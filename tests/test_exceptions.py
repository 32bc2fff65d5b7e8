"""Testes para tarifabr.exceptions."""

from __future__ import annotations

import pytest

from tarifabr.exceptions import (
    NoDataError,
    ParseError,
    PartialDataWarning,
    TarifabrError,
    UpstreamUnavailableError,
)


class TestHierarchy:
    @pytest.mark.parametrize("exc_cls", [UpstreamUnavailableError, NoDataError, ParseError])
    def test_subclass_of_base(self, exc_cls):
        assert issubclass(exc_cls, TarifabrError)

    def test_partial_data_is_user_warning(self):
        assert issubclass(PartialDataWarning, UserWarning)


class TestUpstreamUnavailableError:
    def test_with_status(self):
        e = UpstreamUnavailableError(
            source="aneel", url="https://x", status_code=500, last_error="Internal Server Error"
        )
        assert e.status_code == 500
        assert e.url == "https://x"
        assert str(e) == "aneel unavailable: HTTP 500 Internal Server Error"

    def test_status_without_reason(self):
        e = UpstreamUnavailableError(source="aneel", status_code=503)
        assert str(e) == "aneel unavailable: HTTP 503"
        assert e.last_error == ""

    def test_transport_failure(self):
        e = UpstreamUnavailableError(source="aneel", last_error="ReadTimeout: timed out")
        assert e.status_code is None
        assert e.url == ""
        assert str(e) == "aneel unavailable: ReadTimeout: timed out"

    def test_catchable_as_base(self):
        with pytest.raises(TarifabrError):
            raise UpstreamUnavailableError(source="aneel", status_code=502)


class TestNoDataError:
    def test_message(self):
        e = NoDataError(source="aneel", reason="Nenhum registro retornado")
        assert e.reason == "Nenhum registro retornado"
        assert str(e) == "No data from aneel: Nenhum registro retornado"


class TestParseError:
    def test_attributes(self):
        e = ParseError(source="aneel", parser_version=1, reason="Resposta não é JSON")
        assert e.parser_version == 1
        assert "aneel v1" in str(e)

    def test_snippet_truncated(self):
        e = ParseError(source="aneel", parser_version=1, reason="html", snippet="x" * 2000)
        assert len(e.snippet) == 500
