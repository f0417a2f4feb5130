"""
aligner — silnik dopasowania kolumn DoubleWiki.

Publiczne API:
  align_documents(local, foreign, match_code)   → tabela HTML
  compute_alignment(local, foreign, match_code) → Alignment (wiersze, fragmenty)
  apply_hints(html, code)                       → HintedText
  strip_hint_blocks(html)                       → html bez bloków align-*
  find_slices(html, markers)                    → list[Fragment]
  find_paragraphs(html)                         → list[ParagraphUnit]
  match_columns(fragments, right_text)          → list[AlignedRow]
  mangle_links(text, translation, code)         → (tekst, tłumaczenie)
  render_table(rows, left, right)               → str
  TAG_CATALOG, PARAGRAPH_TERMINATORS            katalog tagów
"""

from .composer import match_columns
from .engine import Alignment, align_documents, compute_alignment
from .hints import apply_hints, strip_hint_blocks
from .links import mangle_links
from .paragraphs import find_paragraphs
from .renderer import render_table
from .slicer import find_slices
from .tags import PARAGRAPH_TERMINATORS, TAG_CATALOG

__all__ = [
    "align_documents",
    "compute_alignment",
    "Alignment",
    "apply_hints",
    "strip_hint_blocks",
    "find_slices",
    "find_paragraphs",
    "match_columns",
    "mangle_links",
    "render_table",
    "TAG_CATALOG",
    "PARAGRAPH_TERMINATORS",
]
