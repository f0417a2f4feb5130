"""Komenda: dw paragraphs — podział pliku HTML na akapity albo fragmenty."""

from __future__ import annotations

import argparse
import re

from rich import box
from rich.table import Table

from aligner.hints import apply_hints
from aligner.paragraphs import find_paragraphs
from aligner.slicer import find_slices
from aligner.tags import tag_balance
from dw.commands._io import console, read_html

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def _preview(unit: str, limit: int = 70) -> str:
    text = _WS_RE.sub(" ", _TAG_RE.sub("", unit)).strip()
    return text if len(text) <= limit else text[:limit - 1] + "…"


def _show_table(units: list[str]) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR",     justify="right", no_wrap=True, style="dim")
    table.add_column("LEN",    justify="right", no_wrap=True)
    table.add_column("BILANS", justify="right", no_wrap=True)
    table.add_column("TEKST",  no_wrap=False, max_width=70)

    for i, unit in enumerate(units):
        balance = tag_balance(unit)
        table.add_row(
            str(i),
            str(len(unit)),
            str(balance) if balance == 0 else f"[red]{balance}[/red]",
            _preview(unit),
        )

    console.print()
    console.print(table)


def split_units(html: str, fragments_lang: str | None = None) -> list[str]:
    """Akapity całego pliku albo niepuste fragmenty wyznaczone wskazówkami dla języka."""
    if fragments_lang is None:
        return find_paragraphs(html)
    hinted = apply_hints(html, fragments_lang)
    return [f.html for f in find_slices(hinted.html, hinted.markers) if f.html]


def run(args: argparse.Namespace) -> None:
    units = split_units(read_html(args.html_file), args.fragments)
    kind = "fragmentów" if args.fragments else "akapitów"
    console.print(f"Znaleziono [bold]{len(units)}[/bold] {kind}.")
    if args.show:
        _show_table(units)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "paragraphs",
        help="Dzieli plik HTML na akapity najwyższego poziomu (granice </p>, </dl>).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dzieli HTML na akapity tak, jak robi to silnik dopasowania przed parowaniem
kolumn. Z --fragments KOD pokazuje zamiast tego fragmenty, na które plik
jest cięty według bloku wskazówek align-KOD. Kolumna BILANS pokazuje
różnicę otwarć i zamknięć tagów z katalogu.

Przykłady:
  dw paragraphs strona.html --show
  dw paragraphs strona.html --fragments fr --show
        """,
    )
    p.add_argument("html_file", metavar="PLIK.html", help="Plik HTML.")
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę akapitów w terminalu.",
    )
    p.add_argument(
        "--fragments",
        metavar="KOD",
        default=None,
        help="Tnij według wskazówek dla języka KOD zamiast dzielić na akapity.",
    )
    p.set_defaults(func=run)
