"""
aligner/hints.py — ukryty blok wskazówek dopasowania i znaczniki w tekście.

Autor strony może umieścić w niej ukryty blok:

    <div id="align-fr" style="display:none;">
    <pre>
    Hello = Bonjour
    History = Histoire
    </pre>
    </div>

Każda linia `klucz = wartość` mówi: miejsce przed pierwszym wystąpieniem
`klucz` w tej stronie odpowiada akapitowi z tekstem `wartość` w wersji
obcojęzycznej. Blok jest usuwany ze strony, a w miejsca kluczy trafiają
znaczniki (Marker), po których BalancedSlicer tnie dokument.

Publiczne API:
  find_hint_block(html, language_code) -> (html_bez_bloku, treść | None)
  strip_hint_blocks(html)              -> html bez żadnych bloków align-*
  parse_hint_lines(body)               -> list[(klucz, wartość)]
  insert_markers(html, pairs)          -> HintedText
  apply_hints(html, language_code)     -> HintedText
  marker_markup(marker)                -> str
"""

from __future__ import annotations

import html as html_lib
import re

from data_model.alignment import AlignmentHint, HintedText, Marker

_BLOCK_TEMPLATE = (
    r"<div\s+id\s*=\s*[\"']align-{code}[\"'][^>]*>\s*"
    r"<pre[^>]*>(?P<body>.*?)</pre>\s*</div>"
)

_ANY_BLOCK_RE = re.compile(
    _BLOCK_TEMPLATE.format(code=r"[^\"']+"),
    re.IGNORECASE | re.DOTALL,
)

# Znacznik nie ma atrybutu id ani href, więc przepisywanie linków go omija.
MARKER_RE = re.compile(r"<span data-dw-marker=\"(?P<index>\d+)\"[^>]*></span>")


def _block_re(language_code: str) -> re.Pattern[str]:
    return re.compile(
        _BLOCK_TEMPLATE.format(code=re.escape(language_code)),
        re.IGNORECASE | re.DOTALL,
    )


def find_hint_block(html: str, language_code: str) -> tuple[str, str | None]:
    """
    Szuka pierwszego bloku wskazówek dla danego kodu języka.

    Zwraca (html bez tego bloku, treść <pre>) albo (html, None) gdy bloku brak.
    Brak bloku nie jest błędem.
    """
    m = _block_re(language_code).search(html)
    if not m:
        return html, None
    return html[:m.start()] + html[m.end():], m.group("body")


def strip_hint_blocks(html: str) -> str:
    """Usuwa wszystkie bloki align-* (niezależnie od języka)."""
    return _ANY_BLOCK_RE.sub("", html)


def parse_hint_lines(body: str) -> list[tuple[str, str]]:
    """
    Parsuje linie `klucz = wartość`.

    Dzieli na pierwszym '='; obie strony są przycinane. Linie bez '=' oraz
    z pustym kluczem są pomijane.
    """
    pairs: list[tuple[str, str]] = []
    for line in body.splitlines():
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        pairs.append((key, value.strip()))
    return pairs


def _find_in_text(html: str, key: str) -> int:
    """Pierwsze wystąpienie klucza poza wnętrzem tagu albo -1."""
    inside = False
    scanned = 0
    pos = html.find(key)
    while pos >= 0:
        # stan "w tagu" przesuwany tylko o odcinek od poprzedniego kandydata
        lt = html.rfind("<", scanned, pos)
        gt = html.rfind(">", scanned, pos)
        if lt != gt:
            inside = lt > gt
        scanned = pos
        if not inside:
            return pos
        pos = html.find(key, pos + 1)
    return -1


def marker_markup(marker: Marker) -> str:
    title = html_lib.escape(marker.title, quote=True)
    return f'<span data-dw-marker="{marker.index}" title="{title}"></span>'


def insert_markers(html: str, pairs: list[tuple[str, str]]) -> HintedText:
    """
    Wstawia znacznik przed pierwszym wystąpieniem każdego klucza.

    Pozycje liczone są w tekście bez znaczników, więc klucz nigdy nie trafia
    we wnętrze wcześniej wstawionego znacznika. Dwie wskazówki w tym samym
    miejscu: zostaje pierwsza. Numeracja znaczników idzie w kolejności
    dokumentu.
    """
    positions: dict[int, tuple[str, str]] = {}
    dropped: list[tuple[str, str]] = []
    for key, value in pairs:
        pos = _find_in_text(html, key)
        if pos < 0 or pos in positions:
            dropped.append((key, value))
            continue
        positions[pos] = (key, value)

    markers: list[Marker] = []
    for index, pos in enumerate(sorted(positions)):
        key, value = positions[pos]
        markers.append(Marker(hint=AlignmentHint(index, key, value), position=pos))

    pieces: list[str] = []
    last = 0
    for marker in markers:
        pieces.append(html[last:marker.position])
        pieces.append(marker_markup(marker))
        last = marker.position
    pieces.append(html[last:])

    return HintedText(html="".join(pieces), markers=tuple(markers), dropped=tuple(dropped))


def apply_hints(html: str, language_code: str) -> HintedText:
    """Pełny przebieg: wyjęcie bloku dla `language_code` i wstawienie znaczników."""
    html, body = find_hint_block(html, language_code)
    html = strip_hint_blocks(html)
    if body is None:
        return HintedText(html=html)
    return insert_markers(html, parse_hint_lines(body))
