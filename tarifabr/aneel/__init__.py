"""ANEEL - Agência Nacional de Energia Elétrica.

Tarifas homologadas das distribuidoras (subgrupo B1, classe Residencial).
Fonte: portal de dados abertos ANEEL (dadosabertos.aneel.gov.br), sem autenticação.
"""

from tarifabr.aneel.api import distribuidora_mais_barata, tarifas
from tarifabr.aneel.models import TarifaResidencial, mwh_para_kwh, uf_da_distribuidora

__all__ = [
    "TarifaResidencial",
    "distribuidora_mais_barata",
    "mwh_para_kwh",
    "tarifas",
    "uf_da_distribuidora",
]
