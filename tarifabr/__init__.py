"""tarifabr - Tarifas de energia residencial e estimativa de conta de luz."""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "Bruno"

from tarifabr import aneel, custo, leituras
from tarifabr.models import MetaInfo

__all__ = [
    "aneel",
    "custo",
    "leituras",
    "MetaInfo",
    "__version__",
]
