"""
data_model — struktury danych silnika DoubleWiki.

Użycie:
  from data_model import Document, TextDirection, AlignedRow, ...

Moduły:
  documents — Document, TextDirection
  alignment — AlignmentHint, Marker, Fragment, ParagraphUnit, AlignedRow,
              HintedText
"""

from .documents import (
    TextDirection,
    Document,
)
from .alignment import (
    AlignmentHint,
    Marker,
    Fragment,
    ParagraphUnit,
    AlignedRow,
    HintedText,
)

__all__ = [
    # documents
    "TextDirection",
    "Document",
    # alignment
    "AlignmentHint",
    "Marker",
    "Fragment",
    "ParagraphUnit",
    "AlignedRow",
    "HintedText",
]
