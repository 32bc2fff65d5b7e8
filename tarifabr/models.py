"""Modelos compartilhados do tarifabr: metadados de proveniencia e validacao."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ResultadoValidacao(BaseModel):
    """Resultado de uma validação: válido ou não, com mensagem e lista de erros."""

    valido: bool
    mensagem: str | None = None
    erros: list[str] = Field(default_factory=list)


@dataclass
class MetaInfo:
    """Metadados de proveniencia e rastreabilidade para data lineage."""

    source: str
    source_url: str
    source_method: str
    fetched_at: datetime
    timestamp: datetime = dataclass_field(default_factory=datetime.now)
    fetch_duration_ms: int = 0
    parse_duration_ms: int = 0
    raw_records_count: int = 0
    records_count: int = 0
    columns: list[str] = dataclass_field(default_factory=list)
    tarifabr_version: str = ""
    parser_version: int = 1
    python_version: str = ""
    validation_passed: bool = True
    validation_warnings: list[str] = dataclass_field(default_factory=list)
    attempted_sources: list[str] = dataclass_field(default_factory=list)
    selected_source: str = ""
    filters: dict[str, Any] = dataclass_field(default_factory=dict)

    def __post_init__(self) -> None:
        """Preenche versoes automaticamente."""
        if not self.tarifabr_version:
            from tarifabr import __version__

            self.tarifabr_version = __version__

        if not self.python_version:
            self.python_version = sys.version.split()[0]

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario serializavel."""
        return {
            "source": self.source,
            "source_url": self.source_url,
            "source_method": self.source_method,
            "fetched_at": self.fetched_at.isoformat(),
            "timestamp": self.timestamp.isoformat(),
            "fetch_duration_ms": self.fetch_duration_ms,
            "parse_duration_ms": self.parse_duration_ms,
            "raw_records_count": self.raw_records_count,
            "records_count": self.records_count,
            "columns": self.columns,
            "tarifabr_version": self.tarifabr_version,
            "parser_version": self.parser_version,
            "python_version": self.python_version,
            "validation_passed": self.validation_passed,
            "validation_warnings": self.validation_warnings,
            "attempted_sources": self.attempted_sources,
            "selected_source": self.selected_source,
            "filters": self.filters,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serializa para JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetaInfo:
        """Reconstroi a partir de dicionario."""
        data = data.copy()

        for key in ["fetched_at", "timestamp"]:
            if data.get(key) and isinstance(data[key], str):
                data[key] = datetime.fromisoformat(data[key])

        return cls(**data)
