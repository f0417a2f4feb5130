"""
aligner/tags.py — katalog tagów, których zagnieżdżenie śledzi silnik.

Tylko te elementy liczą się przy balansowaniu fragmentów i podziale na
akapity; cała reszta znaczników przechodzi bez zmian. Katalog celowo nie
zawiera elementów pustych (br, img, hr), bo nie mają tagu zamykającego.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

TAG_CATALOG: frozenset[str] = frozenset({
    "a", "abbr", "b", "big", "blockquote", "center", "cite", "code",
    "dd", "div", "dl", "dt", "em", "font", "i", "li", "ol", "p", "pre",
    "s", "small", "span", "strike", "strong", "sub", "sup",
    "table", "tbody", "td", "tfoot", "th", "thead", "tr", "tt", "u", "ul",
})

# Zamknięcie akapitu najwyższego poziomu kończy ParagraphUnit.
PARAGRAPH_TERMINATORS: frozenset[str] = frozenset({"p", "dl"})

# Dłuższe nazwy najpierw, żeby "b" nie przechwyciło "big"/"blockquote".
_NAMES = "|".join(sorted(TAG_CATALOG, key=len, reverse=True))

_TAG_RE = re.compile(
    rf"<(?P<close>/?)(?P<name>{_NAMES})(?=[\s/>])[^>]*?(?P<selfclose>/?)>",
    re.IGNORECASE,
)


@dataclass(slots=True, frozen=True)
class TagMatch:
    name: str          # nazwa małymi literami
    closing: bool
    start: int
    end: int

    @property
    def opening(self) -> bool:
        return not self.closing


def iter_tags(html: str) -> Iterator[TagMatch]:
    """Zwraca kolejne tagi z katalogu; formy samozamykające (<span/>) są pomijane."""
    for m in _TAG_RE.finditer(html):
        if m.group("selfclose") and not m.group("close"):
            continue
        yield TagMatch(
            name=m.group("name").lower(),
            closing=bool(m.group("close")),
            start=m.start(),
            end=m.end(),
        )


def closing_tag(name: str) -> str:
    return f"</{name}>"


def opening_tag(name: str) -> str:
    return f"<{name}>"


def tag_balance(html: str) -> int:
    """Różnica liczby tagów otwierających i zamykających z katalogu."""
    counter = 0
    for tag in iter_tags(html):
        counter += -1 if tag.closing else 1
    return counter
