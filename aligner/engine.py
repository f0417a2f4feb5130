"""
aligner/engine.py — pełny przebieg dopasowania dwóch stron.

  1. wyjęcie bloku wskazówek z lokalnej strony i wstawienie znaczników
  2. przepisanie linków i identyfikatorów po obu stronach
  3. cięcie lokalnej strony na zbalansowane fragmenty
  4. zestawienie akapitów z tekstem obcym
  5. wyrenderowanie tabeli

Funkcja jest czysta: te same wejścia dają identyczny wynik, nic nie jest
współdzielone między wywołaniami. Nadaje się więc na ciało "oblicz przy
braku w cache".
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.alignment import AlignedRow, Fragment, HintedText
from data_model.documents import Document

from .composer import match_columns
from .hints import apply_hints, strip_hint_blocks
from .links import mangle_links
from .renderer import render_table
from .slicer import find_slices


@dataclass(slots=True, frozen=True)
class Alignment:
    """Wynik pośredni — przydatny do diagnostyki (komenda `dw hints`)."""
    hinted: HintedText
    fragments: list[Fragment]
    rows: list[AlignedRow]


def compute_alignment(local: Document, foreign: Document, match_code: str | None = None) -> Alignment:
    code = match_code or foreign.language_code
    hinted = apply_hints(local.raw_html, code)
    text, translation = mangle_links(hinted.html, strip_hint_blocks(foreign.raw_html), code)
    fragments = find_slices(text, hinted.markers)
    rows = match_columns(fragments, translation)
    return Alignment(hinted=hinted, fragments=fragments, rows=rows)


def align_documents(local: Document, foreign: Document, match_code: str | None = None) -> str:
    """
    Zwraca tabelę HTML z dopasowanymi akapitami obu stron.

    `match_code` to kod języka obcego używany w bloku wskazówek i w
    parametrze ?match= (domyślnie `foreign.language_code`).
    """
    alignment = compute_alignment(local, foreign, match_code)
    return render_table(alignment.rows, local, foreign)
