"""Modelos do cálculo de custo: bandeiras tarifárias, itens e configuração de tarifa."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple

from pydantic import BaseModel, Field, computed_field, model_validator

from tarifabr.aneel.models import TarifaResidencial, mwh_para_kwh
from tarifabr.constants import ImpostoSettings


class BandeiraTarifaria(StrEnum):
    VERDE = "verde"
    AMARELA = "amarela"
    VERMELHA_1 = "vermelha_1"
    VERMELHA_2 = "vermelha_2"


class InfoBandeira(NamedTuple):
    nome: str
    descricao: str
    adicional: float  # R$/kWh
    cor: str


# Valores ANEEL por kWh, uniformes para todo o Brasil
BANDEIRAS: MappingProxyType[BandeiraTarifaria, InfoBandeira] = MappingProxyType(
    {
        BandeiraTarifaria.VERDE: InfoBandeira(
            nome="Bandeira Verde",
            descricao="Condições favoráveis de geração, sem acréscimo",
            adicional=0.0,
            cor="#22c55e",
        ),
        BandeiraTarifaria.AMARELA: InfoBandeira(
            nome="Bandeira Amarela",
            descricao="Condições menos favoráveis, R$ 1,885 a cada 100 kWh",
            adicional=0.01885,
            cor="#eab308",
        ),
        BandeiraTarifaria.VERMELHA_1: InfoBandeira(
            nome="Bandeira Vermelha - Patamar 1",
            descricao="Condições mais custosas, R$ 4,463 a cada 100 kWh",
            adicional=0.04463,
            cor="#ef4444",
        ),
        BandeiraTarifaria.VERMELHA_2: InfoBandeira(
            nome="Bandeira Vermelha - Patamar 2",
            descricao="Condições ainda mais custosas, R$ 7,877 a cada 100 kWh",
            adicional=0.07877,
            cor="#b91c1c",
        ),
    }
)


def resolve_bandeira(nome: str | BandeiraTarifaria) -> BandeiraTarifaria:
    """Resolve nome livre ("Vermelha 1", "AMARELA", "red_2") para BandeiraTarifaria.

    Raises:
        ValueError: Se bandeira desconhecida.
    """
    if isinstance(nome, BandeiraTarifaria):
        return nome

    key = nome.strip().lower().replace("-", "_").replace(" ", "_")
    aliases = {
        "green": "verde",
        "yellow": "amarela",
        "red_1": "vermelha_1",
        "red_level_1": "vermelha_1",
        "red_2": "vermelha_2",
        "red_level_2": "vermelha_2",
    }
    key = aliases.get(key, key)
    try:
        return BandeiraTarifaria(key)
    except ValueError:
        raise ValueError(
            f"Bandeira desconhecida: '{nome}'. Opções: {[b.value for b in BandeiraTarifaria]}"
        ) from None


def adicional_bandeira(bandeira: str | BandeiraTarifaria) -> float:
    """Acréscimo em R$/kWh da bandeira."""
    return BANDEIRAS[resolve_bandeira(bandeira)].adicional


class ItemCusto(BaseModel):
    """Linha do detalhamento de custo."""

    rotulo: str
    descricao: str
    valor: float
    percentual: float = 0.0


def _impostos() -> ImpostoSettings:
    return ImpostoSettings()


class ConfiguracaoTarifa(BaseModel):
    """Tarifa resolvida para cálculo: base por kWh, bandeira, taxas e alíquotas."""

    tarifa_base: float = Field(..., ge=0)  # R$/kWh, sem impostos
    bandeira: BandeiraTarifaria = BandeiraTarifaria.VERDE
    taxa_iluminacao_publica: float = Field(
        default_factory=lambda: _impostos().taxa_iluminacao_publica, ge=0
    )
    taxas_adicionais: float = Field(0.0, ge=0)
    aliquota_icms: float = Field(default_factory=lambda: _impostos().aliquota_icms, ge=0, lt=1)
    aliquota_pis_cofins: float = Field(
        default_factory=lambda: _impostos().aliquota_pis_cofins, ge=0, lt=1
    )

    @model_validator(mode="after")
    def _aliquota_total_abaixo_de_um(self) -> ConfiguracaoTarifa:
        # impostos por dentro dividem por (1 - aliquota_total)
        total = self.aliquota_icms + self.aliquota_pis_cofins
        if total >= 1:
            raise ValueError(
                f"Soma das alíquotas inválida: {total:.4f} (ICMS {self.aliquota_icms}"
                f" + PIS/COFINS {self.aliquota_pis_cofins}). Esperado < 1"
            )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def adicional_bandeira(self) -> float:
        return BANDEIRAS[self.bandeira].adicional

    @computed_field  # type: ignore[prop-decorator]
    @property
    def taxas_fixas(self) -> float:
        return self.taxa_iluminacao_publica + self.taxas_adicionais

    @computed_field  # type: ignore[prop-decorator]
    @property
    def aliquota_total(self) -> float:
        return self.aliquota_icms + self.aliquota_pis_cofins

    @classmethod
    def from_tarifa(
        cls,
        tarifa: TarifaResidencial,
        bandeira: str | BandeiraTarifaria = BandeiraTarifaria.VERDE,
        **kwargs: float,
    ) -> ConfiguracaoTarifa:
        """Cria configuração a partir de uma tarifa ANEEL (R$/MWh -> R$/kWh)."""
        return cls(
            tarifa_base=mwh_para_kwh(tarifa.vlr_total),
            bandeira=resolve_bandeira(bandeira),
            **kwargs,
        )


class CategoriaAparelho(StrEnum):
    COZINHA = "Cozinha"
    CLIMATIZACAO = "Climatização"
    ENTRETENIMENTO = "Entretenimento"
    LIMPEZA = "Limpeza"
    ILUMINACAO = "Iluminação"
    OUTROS = "Outros"


class AparelhoComum(NamedTuple):
    potencia_w: float
    categoria: CategoriaAparelho


# Potência típica em watts
APARELHOS_COMUNS: MappingProxyType[str, AparelhoComum] = MappingProxyType(
    {
        "Geladeira": AparelhoComum(150, CategoriaAparelho.COZINHA),
        "Microondas": AparelhoComum(1200, CategoriaAparelho.COZINHA),
        "Air Fryer": AparelhoComum(1500, CategoriaAparelho.COZINHA),
        "Fogão Elétrico": AparelhoComum(2000, CategoriaAparelho.COZINHA),
        "Ar Condicionado": AparelhoComum(2000, CategoriaAparelho.CLIMATIZACAO),
        "Ventilador": AparelhoComum(75, CategoriaAparelho.CLIMATIZACAO),
        "Televisão": AparelhoComum(100, CategoriaAparelho.ENTRETENIMENTO),
        "Máquina de Lavar": AparelhoComum(500, CategoriaAparelho.LIMPEZA),
        "Freezer": AparelhoComum(300, CategoriaAparelho.COZINHA),
    }
)


class Aparelho(BaseModel):
    """Eletrodoméstico com potência e padrão de uso."""

    nome: str = Field(..., min_length=1)
    potencia_w: float = Field(..., gt=0)
    horas_por_dia: float = Field(..., ge=0, le=24)
    dias_por_mes: float = Field(30, ge=0, le=31)
    categoria: CategoriaAparelho = CategoriaAparelho.OUTROS


class ConsumoAparelho(BaseModel):
    """Consumo (kWh) e custo (R$) diário e mensal."""

    consumo_diario_kwh: float = 0.0
    consumo_mensal_kwh: float = 0.0
    custo_diario: float = 0.0
    custo_mensal: float = 0.0

    def __add__(self, other: ConsumoAparelho) -> ConsumoAparelho:
        return ConsumoAparelho(
            consumo_diario_kwh=self.consumo_diario_kwh + other.consumo_diario_kwh,
            consumo_mensal_kwh=self.consumo_mensal_kwh + other.consumo_mensal_kwh,
            custo_diario=self.custo_diario + other.custo_diario,
            custo_mensal=self.custo_mensal + other.custo_mensal,
        )


class ResumoAparelhos(BaseModel):
    itens: list[tuple[Aparelho, ConsumoAparelho]] = Field(default_factory=list)
    total: ConsumoAparelho = Field(default_factory=ConsumoAparelho)
    por_categoria: dict[CategoriaAparelho, ConsumoAparelho] = Field(default_factory=dict)
