"""Komenda: dw align — zestawienie dwóch lokalnych plików HTML."""

from __future__ import annotations

import argparse

from aligner import compute_alignment, render_table
from bilingual.languages import make_document
from dw.commands._io import console, read_html, write_output


def run(args: argparse.Namespace) -> None:
    local = make_document(read_html(args.left_file), args.left_lang, args.left_url)
    foreign = make_document(read_html(args.right_file), args.right_lang, args.right_url)

    alignment = compute_alignment(local, foreign, args.right_lang)
    for key, _ in alignment.hinted.dropped:
        console.print(f"[yellow]Wskazówka pominięta (brak klucza w tekście):[/yellow] {key}")

    rows = [row for row in alignment.rows if not row.is_empty]
    console.print(
        f"Znaczników: [bold]{len(alignment.hinted.markers)}[/bold], "
        f"wierszy: [bold]{len(rows)}[/bold]."
    )
    write_output(render_table(alignment.rows, local, foreign), args.out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "align",
        help="Zestawia dwa pliki HTML (strona lokalna i obca) w tabelę dwujęzyczną.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zestawia wyrenderowany HTML strony lokalnej z jej wersją obcojęzyczną.

Blok wskazówek <div id="align-KOD"><pre>klucz = wartość</pre></div>
w pliku lokalnym (KOD = --right-lang) wyznacza dodatkowe punkty dopasowania.

Przykłady:
  dw align strona_en.html strona_fr.html --left-lang en --right-lang fr
  dw align en.html de.html --left-lang en --right-lang de --out tabela.html
        """,
    )
    p.add_argument("left_file", metavar="LOKALNY.html", help="HTML strony lokalnej.")
    p.add_argument("right_file", metavar="OBCY.html", help="HTML strony obcojęzycznej.")
    p.add_argument("--left-lang", required=True, metavar="KOD", help="Kod języka strony lokalnej.")
    p.add_argument("--right-lang", required=True, metavar="KOD", help="Kod języka strony obcej.")
    p.add_argument("--left-url", default="", metavar="URL", help="Adres strony lokalnej (nagłówek tabeli).")
    p.add_argument("--right-url", default="", metavar="URL", help="Adres strony obcej (nagłówek tabeli).")
    p.add_argument(
        "--out",
        metavar="PLIK",
        default=None,
        help="Plik wynikowy (domyślnie: wypisanie na stdout).",
    )
    p.set_defaults(func=run)
