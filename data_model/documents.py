"""
data_model/documents.py — dokument wejściowy silnika dopasowania.

Document to wyrenderowany HTML jednej strony wiki wraz z metadanymi języka.
Silnik dostaje dwa takie dokumenty (lokalny i obcojęzyczny) i nigdy ich
nie modyfikuje — wszystkie przekształcenia zwracają nowe napisy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class TextDirection(StrEnum):
    """Kierunek tekstu języka (atrybut HTML dir)."""
    LTR = "ltr"
    RTL = "rtl"


@dataclass(slots=True, frozen=True)
class Document:
    raw_html: str
    language_code: str       # kod używany w atrybucie lang, np. "en", "de"
    display_name: str        # nazwa języka w nagłówku tabeli, np. "Deutsch"
    direction: TextDirection
    canonical_url: str       # adres strony w nagłówku tabeli

    def with_html(self, raw_html: str) -> Document:
        """Zwraca kopię dokumentu z podmienioną treścią HTML."""
        return replace(self, raw_html=raw_html)
