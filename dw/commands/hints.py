"""Komenda: dw hints — podgląd bloku wskazówek i pozycji znaczników."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table

from aligner.hints import apply_hints, find_hint_block, parse_hint_lines, strip_hint_blocks
from dw.commands._io import console, read_html

_CONTEXT = 30


def _show_table(html: str, lang: str) -> None:
    source, body = find_hint_block(html, lang)
    if body is None:
        console.print(f"[yellow]Brak bloku wskazówek align-{lang}.[/yellow]")
        return

    pairs = parse_hint_lines(body)
    hinted = apply_hints(html, lang)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR",      justify="right", no_wrap=True, style="dim")
    table.add_column("KLUCZ",   no_wrap=True, style="bold cyan")
    table.add_column("WARTOŚĆ", no_wrap=True)
    table.add_column("POZYCJA", justify="right", no_wrap=True)
    table.add_column("KONTEKST", no_wrap=False, max_width=50)

    source = strip_hint_blocks(source)
    for marker in hinted.markers:
        start = max(0, marker.position - _CONTEXT)
        context = source[start:marker.position + len(marker.hint.anchor_text) + _CONTEXT]
        table.add_row(
            str(marker.index),
            marker.hint.anchor_text,
            marker.title,
            str(marker.position),
            context.replace("\n", " "),
        )
    for key, value in hinted.dropped:
        table.add_row("-", key, value, "[yellow]brak[/yellow]", "")

    console.print()
    console.print(table)
    console.print(
        f"  [dim]{len(pairs)} wskazówek, {len(hinted.markers)} znaczników, "
        f"{len(hinted.dropped)} pominiętych[/dim]\n"
    )


def run(args: argparse.Namespace) -> None:
    _show_table(read_html(args.html_file), args.lang)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "hints",
        help="Pokazuje wskazówki dopasowania z bloku align-KOD i miejsca znaczników.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odczytuje ukryty blok <div id="align-KOD"><pre>…</pre></div> i pokazuje,
gdzie w tekście trafił znacznik każdej wskazówki. Wskazówki, których klucza
nie ma w tekście, są oznaczone jako pominięte.

Przykłady:
  dw hints strona_en.html --lang fr
        """,
    )
    p.add_argument("html_file", metavar="PLIK.html", help="HTML strony lokalnej.")
    p.add_argument("--lang", required=True, metavar="KOD", help="Kod języka obcego (id bloku align-KOD).")
    p.set_defaults(func=run)
