"""
aligner/slicer.py — cięcie lokalnego HTML w miejscach znaczników.

Proste cięcie napisu w miejscu znacznika rozrywałoby pary tagów (np. w środku
<div>…</div>). find_slices() naprawia wycinki tak, żeby każdy fragment dało
się wyrenderować osobno:

  - pierwszy wycinek: tagi otwarte na jego końcu są domykane (w odwrotnej
    kolejności), a ich otwarcia zapamiętywane,
  - ostatni wycinek: zapamiętane otwarcia są dopisywane na początku,
  - wycinki środkowe z niezerowym bilansem są doklejane do następnego
    (same stają się puste — wywołujący je pomija).

Naprawa tylko dodaje pasujące tagi, nigdy nie usuwa struktury.
"""

from __future__ import annotations

import re

from data_model.alignment import Fragment, Marker

from .hints import MARKER_RE
from .tags import closing_tag, iter_tags, opening_tag

# Otwarcie akapitu; ostatnie w wycinku wyznacza początek przeniesienia.
_PARAGRAPH_OPEN_RE = re.compile(r"<(?:p|dl)(?:\s[^>]*)?>", re.IGNORECASE)


def _split_at_markers(html: str, markers: tuple[Marker, ...] | list[Marker]) -> tuple[list[str], list[Marker | None]]:
    by_index = {m.index: m for m in markers}
    parts = MARKER_RE.split(html)
    slices = parts[0::2]
    boundaries = [by_index.get(int(idx)) for idx in parts[1::2]]
    return slices, boundaries


def _snap_to_paragraphs(slices: list[str]) -> None:
    """Przesuwa cięcia na początek akapitu: od ostatniego <p>/<dl> do następnego wycinka."""
    for i in range(len(slices) - 1):
        last = None
        for last in _PARAGRAPH_OPEN_RE.finditer(slices[i]):
            pass
        if last is None:
            continue
        slices[i + 1] = slices[i][last.start():] + slices[i + 1]
        slices[i] = slices[i][:last.start()]


def _scan(html: str) -> tuple[list[str], int]:
    """Zwraca (stos tagów otwartych na końcu, bilans otwarć i zamknięć)."""
    stack: list[str] = []
    counter = 0
    for tag in iter_tags(html):
        if tag.opening:
            stack.append(tag.name)
            counter += 1
        else:
            if stack:
                stack.pop()
            counter -= 1
    return stack, counter


def find_slices(html: str, markers: tuple[Marker, ...] | list[Marker] = ()) -> list[Fragment]:
    """
    Tnie HTML ze znacznikami na N+1 zbalansowanych fragmentów.

    Fragment i to treść między znacznikiem i-1 a i; `boundary` fragmentu
    wskazuje znacznik i (ostatni fragment nie ma granicy). Puste fragmenty
    zostają na swoich pozycjach.
    """
    slices, boundaries = _split_at_markers(html, markers)
    boundaries.append(None)
    n = len(slices)

    _snap_to_paragraphs(slices)

    opening = ""
    carried: tuple[str, ...] = ()
    fragments: list[Fragment] = []

    for i in range(n):
        stack, counter = _scan(slices[i])
        if i == 0:
            closure = "".join(closing_tag(name) for name in reversed(stack))
            opening = "".join(opening_tag(name) for name in stack)
            carried = tuple(stack)
            fragments.append(Fragment(slices[i] + closure, carried, boundaries[i]))
        elif i == n - 1:
            text = opening + slices[i]
            # dokument niedomknięty na końcu: domykamy, tak jak pierwszy wycinek
            left_open, _ = _scan(text)
            text += "".join(closing_tag(name) for name in reversed(left_open))
            fragments.append(Fragment(text, carried, boundaries[i]))
        elif counter != 0:
            slices[i + 1] = slices[i] + slices[i + 1]
            slices[i] = ""
            fragments.append(Fragment("", tuple(stack), boundaries[i]))
        else:
            fragments.append(Fragment(slices[i], (), boundaries[i]))

    return fragments
