"""
aligner/renderer.py — tabela dwujęzyczna (HTML).

Nagłówek: link do każdej wersji językowej podpisany nazwą języka.
Treść: jeden wiersz na AlignedRow, komórki z atrybutami lang/dir i klasą
mw-content-<dir>. Wiersze z obiema komórkami pustymi są pomijane.
"""

from __future__ import annotations

from html import escape
from typing import Iterable

from data_model.alignment import AlignedRow
from data_model.documents import Document

TABLE_ID = "doubleWikiTable"


def _attrs(**attrs: str) -> str:
    return "".join(f' {name.rstrip("_")}="{escape(value, quote=True)}"' for name, value in attrs.items())


def _header_cell(doc: Document, *, foreign: bool) -> str:
    link_attrs = {"href": doc.canonical_url}
    if foreign:
        link_attrs["class_"] = "extiw"
    return (
        f"<td{_attrs(lang=doc.language_code)}>"
        f"<a{_attrs(**link_attrs)}>{escape(doc.display_name)}</a>"
        "</td>"
    )


def _body_cell(doc: Document, content: str) -> str:
    direction = str(doc.direction)
    return (
        f"<td{_attrs(lang=doc.language_code, dir=direction, class_=f'mw-content-{direction}')}>"
        f"<div>\n{content}</div>"
        "</td>"
    )


def render_row(row: AlignedRow, left: Document, right: Document) -> str:
    return f"<tr>{_body_cell(left, row.left)}\n{_body_cell(right, row.right)}</tr>\n"


def render_table(rows: Iterable[AlignedRow], left: Document, right: Document) -> str:
    """Składa pełną tabelę; `left` to strona lokalna, `right` — obca."""
    header = (
        "<thead><tr>"
        f"{_header_cell(left, foreign=False)}"
        f"{_header_cell(right, foreign=True)}"
        "</tr></thead>\n"
    )
    body = "".join(render_row(row, left, right) for row in rows if not row.is_empty)
    return f'<table id="{TABLE_ID}">\n{header}{body}</table>'
