"""
dw — narzędzie CLI dla DoubleWiki (dwujęzyczny widok stron wiki).

Użycie:
  dw <komenda> [opcje]

Komendy:
  align       Zestawia dwa lokalne pliki HTML w tabelę dwujęzyczną.
  fetch       Pobiera stronę wiki i jej wersję obcojęzyczną, zestawia je.
  hints       Pokazuje blok wskazówek dopasowania i pozycje znaczników.
  paragraphs  Dzieli plik HTML na akapity najwyższego poziomu.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby nazwy języków
# (autonimy) w komunikatach były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from dw.commands import align as cmd_align
from dw.commands import fetch as cmd_fetch
from dw.commands import hints as cmd_hints
from dw.commands import paragraphs as cmd_paragraphs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dw",
        description="DoubleWiki — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="dw 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_align.add_parser(subparsers)
    cmd_fetch.add_parser(subparsers)
    cmd_hints.add_parser(subparsers)
    cmd_paragraphs.add_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
