from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from laslite.errors import TerminalParseFailure
from laslite.io.frame import write_table_csv
from laslite.io.metadata import well_summary
from laslite.io.types import Document
from laslite.pipelines.load import load_las_file
from laslite.utils.config import config_from_yaml

app = typer.Typer(add_completion=False)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(path: Path, dialect: str, config: Optional[Path]) -> Document:
    try:
        cfg = config_from_yaml(config)
        return load_las_file(path, dialect=dialect, config=cfg, require_las_suffix=(dialect == "las"))
    except (TerminalParseFailure, ValueError, TypeError) as e:
        print(f"[red]Could not load this file:[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def inspect(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="LAS or pipe-delimited file"),
    dialect: str = typer.Option("auto", help="las | pipe | auto"),
    config: Optional[Path] = typer.Option(None, exists=True, help="YAML with a 'parse:' mapping"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    _setup_logging(verbose)
    doc = _load(path, dialect, config)

    print(f"[bold]{doc.source_name}[/bold]")
    print(f"Rows: {doc.data.n_rows} | Curves: {len(doc.curve_names)} | Index unit: {doc.index_unit}")

    curves = Table(title="Curves")
    curves.add_column("Mnemonic")
    curves.add_column("Unit")
    curves.add_column("Description")
    units = {it.mnemonic: it for it in doc.header.curve.items}
    for name in doc.curve_names:
        it = units.get(name)
        curves.add_row(name, it.unit if it else "", it.description if it else "")
    print(curves)

    summary = well_summary(doc)
    if summary:
        well = Table(title="Well Information")
        well.add_column("Mnemonic")
        well.add_column("Value")
        well.add_column("Unit")
        for mn, it in summary.items():
            well.add_row(mn, str(it.value), it.unit)
        print(well)


@app.command()
def export(
    path: Path = typer.Argument(..., exists=True, dir_okay=False),
    out: Path = typer.Option(..., help="CSV output path"),
    dialect: str = typer.Option("auto", help="las | pipe | auto"),
    config: Optional[Path] = typer.Option(None, exists=True),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    _setup_logging(verbose)
    doc = _load(path, dialect, config)
    write_table_csv(doc, out)
    print("[green]Wrote[/green]", out)


if __name__ == "__main__":
    app()
