"""
aligner/composer.py — zestawianie kolumn: akapity lokalne ↔ obce.

Dla każdego niepustego fragmentu lewej strony szukamy w pozostałym tekście
prawej strony odpowiednika znacznika kończącego fragment: najpierw tytułu
(wartość wskazówki), a gdy go brak, samego klucza. Prawą stronę tniemy na
najbliższym wcześniejszym końcu akapitu (</p> lub </dl>). Dopóki cięcie się nie uda, fragmenty
lewej i prawej strony się kumulują.

Przy opróżnianiu obie porcje dzielone są na akapity; gdy liczby akapitów
się różnią, porcje trafiają do jednego wiersza w całości.
"""

from __future__ import annotations

import re

from data_model.alignment import AlignedRow, Fragment

from .paragraphs import find_paragraphs

# Zachłanne (.*) → dopasowanie kończy się na ostatnim zamknięciu akapitu.
_PARAGRAPH_END_RE = re.compile(r"(.*)</(?:p|dl)>", re.IGNORECASE | re.DOTALL)


def cut_right_text(right_text: str, anchor: str) -> tuple[str, str] | None:
    """
    Tnie prawą stronę przed akapitem zawierającym `anchor`.

    Zwraca (część do zużycia łącznie z </p>, reszta) albo None, gdy kotwicy
    nie ma lub nie poprzedza jej żaden koniec akapitu.
    """
    if not anchor:
        return None
    pos = right_text.find(anchor)
    if pos < 0:
        return None
    m = _PARAGRAPH_END_RE.match(right_text, 0, pos)
    if not m:
        return None
    return right_text[:m.end()], right_text[m.end():]


def pair_chunks(left_chunk: str, right_chunk: str) -> list[AlignedRow]:
    """Paruje akapity pozycyjnie; przy różnej liczbie — jeden wiersz z całością."""
    left_bits = find_paragraphs(left_chunk)
    right_bits = find_paragraphs(right_chunk)
    if len(left_bits) != len(right_bits):
        return [AlignedRow(left_chunk, right_chunk)]
    return [AlignedRow(left, right) for left, right in zip(left_bits, right_bits)]


def match_columns(fragments: list[Fragment], right_text: str) -> list[AlignedRow]:
    """
    Zestawia fragmenty lewej strony z tekstem prawej strony.

    Złączenie kolumny lewej daje złączenie fragmentów, a kolumny prawej —
    cały `right_text`.
    """
    rows: list[AlignedRow] = []
    left_chunk = ""
    right_chunk = ""
    last = len(fragments) - 1

    for i, fragment in enumerate(fragments):
        if not fragment.html:
            continue

        left_chunk += fragment.html
        found = False

        if i == last or fragment.boundary is None:
            right_chunk += right_text
            right_text = ""
            found = True
        else:
            # najpierw tytuł (tekst w języku obcym), klucz tylko gdy tytułu brak
            cut = cut_right_text(right_text, fragment.boundary.title)
            if cut is None and fragment.boundary.anchor_text != fragment.boundary.title:
                cut = cut_right_text(right_text, fragment.boundary.anchor_text)
            if cut is not None:
                consumed, right_text = cut
                right_chunk += consumed
                found = True

        if found:
            rows.extend(pair_chunks(left_chunk, right_chunk))
            left_chunk = ""
            right_chunk = ""

    # pusty ostatni fragment: reszta obu stron w jednym wierszu
    if left_chunk or right_text:
        rows.extend(pair_chunks(left_chunk, right_chunk + right_text))

    return rows
