"""CLI do tarifabr usando Typer."""

from __future__ import annotations

import json

import typer

from tarifabr import __version__
from tarifabr.config import get_config
from tarifabr.custo import ConfiguracaoTarifa, resolve_bandeira
from tarifabr.exceptions import NoDataError, ParseError, UpstreamUnavailableError
from tarifabr.utils.logging import configure_logging

app = typer.Typer(
    name="tarifabr",
    help="Tarifas de energia residencial e estimativa de conta de luz",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tarifabr version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Mostra a versao e sai",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Nivel de log (DEBUG, INFO...)"),
) -> None:
    """tarifabr - Tarifas ANEEL e custo da conta de luz."""
    config = get_config()
    try:
        configure_logging(level=log_level or config.log_level, json_format=config.log_json)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(2) from None


def _validar_formato(formato: str, opcoes: tuple[str, ...]) -> str:
    formato = formato.strip().lower()
    if formato not in opcoes:
        typer.echo(f"Formato invalido: {formato}. Opcoes: {', '.join(opcoes)}", err=True)
        raise typer.Exit(2)
    return formato


aneel_app = typer.Typer(help="Tarifas homologadas ANEEL (B1 residencial)")
app.add_typer(aneel_app, name="aneel")


@aneel_app.command("tarifas")
def aneel_tarifas(
    uf: str | None = typer.Option(None, "--uf", "-u", help="Filtrar por UF (ex: SP, 'Minas Gerais')"),
    limit: int = typer.Option(10000, "--limit", "-l", help="Maximo de registros ANEEL"),
    fallback: bool = typer.Option(
        False, "--fallback", help="Usa tabela local se a ANEEL falhar"
    ),
    formato: str = typer.Option("table", "--formato", "-o", help="Formato: table, csv, json"),
) -> None:
    """Lista tarifas vigentes por distribuidora, da mais barata para a mais cara."""
    import asyncio

    from tarifabr.aneel import api

    formato = _validar_formato(formato, ("table", "csv", "json"))

    try:
        df = asyncio.run(api.tarifas(uf=uf, limit=limit, fallback=fallback, as_dataframe=True))
    except NoDataError as e:
        typer.echo(f"Nenhum dado encontrado: {e.reason}", err=True)
        raise typer.Exit(1) from None
    except (UpstreamUnavailableError, ParseError) as e:
        typer.echo(f"ANEEL indisponivel: {e}", err=True)
        raise typer.Exit(1) from None

    if df.empty:
        typer.echo("Nenhum dado encontrado")
        return

    if formato == "json":
        typer.echo(df.to_json(orient="records", indent=2, date_format="iso", force_ascii=False))
    elif formato == "csv":
        typer.echo(df.to_csv(index=False))
    else:
        typer.echo(df.to_string(index=False))


custo_app = typer.Typer(help="Calculo de custo da conta de luz")
app.add_typer(custo_app, name="custo")


def _config_tarifa(
    tarifa: float, bandeira: str, iluminacao: float | None, taxas: float
) -> ConfiguracaoTarifa:
    extras: dict[str, float] = {"taxas_adicionais": taxas}
    if iluminacao is not None:
        extras["taxa_iluminacao_publica"] = iluminacao
    try:
        return ConfiguracaoTarifa(
            tarifa_base=tarifa,
            bandeira=resolve_bandeira(bandeira),
            **extras,
        )
    except ValueError as e:
        typer.echo(f"Parametro invalido: {e}", err=True)
        raise typer.Exit(2) from None


@custo_app.command("detalhar")
def custo_detalhar(
    consumo: float = typer.Argument(..., help="Consumo em kWh"),
    tarifa: float = typer.Option(..., "--tarifa", "-t", help="Tarifa base em R$/kWh"),
    bandeira: str = typer.Option("verde", "--bandeira", "-b", help="verde, amarela, vermelha_1, vermelha_2"),
    iluminacao: float | None = typer.Option(
        None,
        "--iluminacao",
        "-i",
        help="Iluminacao publica (R$). Padrao: TARIFABR_IMPOSTOS_TAXA_ILUMINACAO_PUBLICA ou 41,12",
    ),
    taxas: float = typer.Option(0.0, "--taxas", help="Outras taxas fixas (R$)"),
    formato: str = typer.Option("table", "--formato", "-o", help="Formato: table, json"),
) -> None:
    """Detalha o custo (sem impostos) em consumo base, bandeira e taxas fixas."""
    from tarifabr.custo import detalhar, formatar_moeda, total_detalhamento

    formato = _validar_formato(formato, ("table", "json"))

    config = _config_tarifa(tarifa, bandeira, iluminacao, taxas)
    itens = detalhar(consumo, config)

    if not itens:
        typer.echo("Consumo zero: nada a detalhar")
        return

    total = total_detalhamento(itens)
    if formato == "json":
        payload = {"itens": [i.model_dump() for i in itens], "total": total}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for item in itens:
        typer.echo(
            f"{item.rotulo:<20} {formatar_moeda(item.valor):>14} {item.percentual:6.1f}%  {item.descricao}"
        )
    typer.echo(f"{'Total':<20} {formatar_moeda(total):>14}")


@custo_app.command("estimar")
def custo_estimar(
    consumo: float = typer.Argument(..., help="Consumo em kWh"),
    tarifa: float = typer.Option(..., "--tarifa", "-t", help="Tarifa base em R$/kWh"),
    bandeira: str = typer.Option("verde", "--bandeira", "-b", help="verde, amarela, vermelha_1, vermelha_2"),
    iluminacao: float | None = typer.Option(
        None,
        "--iluminacao",
        "-i",
        help="Iluminacao publica (R$). Padrao: TARIFABR_IMPOSTOS_TAXA_ILUMINACAO_PUBLICA ou 41,12",
    ),
    taxas: float = typer.Option(0.0, "--taxas", help="Outras taxas fixas (R$)"),
    sem_impostos: bool = typer.Option(False, "--sem-impostos", help="Nao aplica ICMS/PIS/COFINS"),
) -> None:
    """Estima o valor da conta com impostos por dentro."""
    from tarifabr.custo import estimar_custo, formatar_moeda

    config = _config_tarifa(tarifa, bandeira, iluminacao, taxas)
    valor = estimar_custo(consumo, config, incluir_impostos=not sem_impostos)
    typer.echo(formatar_moeda(valor))


@custo_app.command("aparelho")
def custo_aparelho(
    horas: float = typer.Argument(..., help="Horas de uso por dia"),
    tarifa: float = typer.Option(..., "--tarifa", "-t", help="Tarifa em R$/kWh"),
    nome: str | None = typer.Option(None, "--nome", "-n", help="Aparelho comum (ex: Geladeira)"),
    potencia: float | None = typer.Option(None, "--potencia", "-p", help="Potencia em watts"),
    dias: float = typer.Option(30, "--dias", "-d", help="Dias de uso no mes"),
    formato: str = typer.Option("table", "--formato", "-o", help="Formato: table, json"),
) -> None:
    """Consumo e custo diario/mensal de um eletrodomestico."""
    from tarifabr.custo import (
        APARELHOS_COMUNS,
        Aparelho,
        aparelho_comum,
        calcular_aparelho,
        formatar_moeda,
        formatar_numero,
    )

    formato = _validar_formato(formato, ("table", "json"))

    try:
        if potencia is not None:
            aparelho = Aparelho(
                nome=nome or f"{formatar_numero(potencia)} W",
                potencia_w=potencia,
                horas_por_dia=horas,
                dias_por_mes=dias,
            )
        elif nome:
            aparelho = aparelho_comum(nome, horas, dias)
        else:
            typer.echo(
                f"Informe --potencia ou --nome ({', '.join(APARELHOS_COMUNS)})", err=True
            )
            raise typer.Exit(2)
        consumo = calcular_aparelho(aparelho, tarifa)
    except ValueError as e:
        typer.echo(f"Parametro invalido: {e}", err=True)
        raise typer.Exit(2) from None

    if formato == "json":
        payload = {"aparelho": aparelho.model_dump(mode="json"), **consumo.model_dump()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(f"{aparelho.nome} ({formatar_numero(aparelho.potencia_w)} W, {aparelho.categoria.value})")
    for rotulo, kwh, custo in (
        ("Diario", consumo.consumo_diario_kwh, consumo.custo_diario),
        ("Mensal", consumo.consumo_mensal_kwh, consumo.custo_mensal),
    ):
        typer.echo(f"{rotulo:<8} {formatar_numero(kwh, 2):>10} kWh  {formatar_moeda(custo):>12}")


@app.command("ufs")
def ufs(
    regiao: str | None = typer.Option(None, "--regiao", "-r", help="Filtrar por regiao (ex: Sudeste)"),
) -> None:
    """Lista as UFs aceitas em --uf, com nome e regiao."""
    from tarifabr.normalize import listar_regioes, listar_ufs, uf_para_nome, uf_para_regiao

    if regiao and regiao not in listar_regioes():
        typer.echo(f"Regiao desconhecida: {regiao}. Opcoes: {', '.join(listar_regioes())}", err=True)
        raise typer.Exit(2)

    for uf in listar_ufs(regiao):
        typer.echo(f"{uf}  {uf_para_nome(uf):<20} {uf_para_regiao(uf)}")


@app.command("bandeiras")
def bandeiras(
    formato: str = typer.Option("table", "--formato", "-o", help="Formato: table, json"),
) -> None:
    """Lista as bandeiras tarifarias e o acrescimo por kWh."""
    from tarifabr.custo import BANDEIRAS, formatar_numero

    formato = _validar_formato(formato, ("table", "json"))

    if formato == "json":
        payload = {b.value: info._asdict() for b, info in BANDEIRAS.items()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for b, info in BANDEIRAS.items():
        typer.echo(f"{b.value:<12} R$ {formatar_numero(info.adicional, 5)}/kWh  {info.nome}")


if __name__ == "__main__":
    app()
