"""
data_model/alignment.py — wartości pośrednie silnika dopasowania kolumn.

Przepływ:
  AlignmentHint  → Marker      (wskazówki z ukrytego bloku → znaczniki w tekście)
  Marker         → Fragment    (cięcie lewego dokumentu w miejscach znaczników)
  Fragment       → ParagraphUnit (podział na akapity najwyższego poziomu)
  ParagraphUnit  → AlignedRow  (para lewy/prawy = jeden wiersz tabeli)

Wszystkie obiekty są niemutowalne i żyją tylko w obrębie jednego wywołania
silnika.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Wskazówki dopasowania
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class AlignmentHint:
    """
    Jedna para `klucz = wartość` z ukrytego bloku wskazówek.

    - index:       numer porządkowy wg pierwszego wystąpienia w dokumencie
    - anchor_text: dosłowny fragment lokalnego dokumentu (klucz)
    - title:       odpowiednik w tekście obcojęzycznym (wartość)
    """
    index: int
    anchor_text: str
    title: str


@dataclass(slots=True, frozen=True)
class Marker:
    """
    Znacznik wstawiony do lokalnego HTML tuż przed `hint.anchor_text`.

    Służy wyłącznie do wyznaczania miejsc cięcia; przy cięciu znika z tekstu.
    """
    hint: AlignmentHint
    position: int            # offset w dokumencie bez znaczników

    @property
    def index(self) -> int:
        return self.hint.index

    @property
    def title(self) -> str:
        return self.hint.title

    @property
    def anchor_text(self) -> str:
        return self.hint.anchor_text


# ---------------------------------------------------------------------------
# Fragmenty i akapity
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class Fragment:
    """
    Ciągły wycinek lokalnego HTML, zbalansowany względem katalogu tagów.

    - html:     treść po naprawie (może być pusta — wtedy pomijana)
    - balance:  tagi otwarte na końcu surowego wycinka, które naprawa
                domknęła (pierwszy fragment) lub otworzyła ponownie (ostatni)
    - boundary: znacznik kończący fragment (None dla ostatniego)
    """
    html: str
    balance: tuple[str, ...] = ()
    boundary: Marker | None = None


# Akapit to zwykły napis; typ nazwany dla czytelności sygnatur.
type ParagraphUnit = str


@dataclass(slots=True, frozen=True)
class AlignedRow:
    """Jeden wiersz tabeli: akapit(y) lokalne i odpowiadające im obce."""
    left: ParagraphUnit
    right: ParagraphUnit

    @property
    def is_empty(self) -> bool:
        return not self.left and not self.right


@dataclass(slots=True, frozen=True)
class HintedText:
    """Wynik parsowania wskazówek: tekst bez bloku + znaczniki w kolejności."""
    html: str
    markers: tuple[Marker, ...] = field(default_factory=tuple)
    dropped: tuple[tuple[str, str], ...] = field(default_factory=tuple)  # (klucz, wartość) bez trafienia
