"""Komenda: dw fetch — pobranie strony wiki i jej wersji obcojęzycznej."""

from __future__ import annotations

import argparse

from bilingual import BilingualView, Page, load_settings, robot_policy
from dw.commands._io import console, write_output
from html_parser.parser import (
    FetchError,
    extract_content,
    fetch_page,
    find_language_links,
    find_page_language,
)


def run(args: argparse.Namespace) -> None:
    url: str = args.url
    match: str = args.match

    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Pobieranie [bold]{url}[/bold] …")
    try:
        page_html = fetch_page(url, timeout=settings.http_timeout, user_agent=settings.user_agent)
    except FetchError as e:
        console.print(f"[red]Błąd pobierania:[/red] {e}")
        raise SystemExit(1)

    links = find_language_links(page_html, base_url=url)
    if match not in links:
        known = ", ".join(sorted(links)) or "brak"
        console.print(f"[red]Strona nie ma linku do wersji[/red] [cyan]{match}[/cyan] (dostępne: {known})")
        raise SystemExit(1)

    language = args.lang or find_page_language(page_html)
    if not language:
        console.print("[red]Nie rozpoznano języka strony — podaj --lang.[/red]")
        raise SystemExit(1)

    page = Page(
        html=extract_content(page_html),
        url=url,
        language_code=language,
        viewer_language=language,
        language_links=links,
    )
    console.print(f"Wersja [cyan]{match}[/cyan]: [bold]{links[match]}[/bold] …")

    result = BilingualView(settings).render(page, match)
    if not result.bilingual:
        console.print(f"[red]Nie udało się pobrać strony obcej:[/red] {links[match]}")
        raise SystemExit(1)

    console.print(f"[dim]robots: {robot_policy(match)}[/dim]")
    write_output(result.html, args.out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "fetch",
        help="Pobiera stronę wiki i jej wersję w języku --match, zestawia je w tabelę.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera pełną stronę wiki, odnajduje link interwiki do wersji w języku
--match, pobiera jej wyrenderowaną treść (action=render) i zestawia obie
wersje w tabelę dwujęzyczną.

Przykłady:
  dw fetch https://en.wikipedia.org/wiki/Wikipedia --match fr
  dw fetch https://pl.wikipedia.org/wiki/Kraków --match de --out krakow.html
        """,
    )
    p.add_argument("url", metavar="URL", help="Adres strony wiki.")
    p.add_argument("--match", required=True, metavar="KOD", help="Kod języka wersji obcej.")
    p.add_argument(
        "--lang",
        metavar="KOD",
        default=None,
        help="Język strony lokalnej (domyślnie: odczytany z atrybutu lang).",
    )
    p.add_argument(
        "--out",
        metavar="PLIK",
        default=None,
        help="Plik wynikowy (domyślnie: wypisanie na stdout).",
    )
    p.set_defaults(func=run)
