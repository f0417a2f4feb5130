"""
aligner/paragraphs.py — podział zbalansowanego HTML na akapity.

Akapit kończy się zamknięciem </p> lub </dl> na poziomie zagnieżdżenia zero
(licząc tylko tagi z katalogu). Tekst po ostatnim zamknięciu tworzy ostatni,
niepełny akapit. Złączenie wyniku odtwarza wejście co do znaku.
"""

from __future__ import annotations

from data_model.alignment import ParagraphUnit

from .tags import PARAGRAPH_TERMINATORS, iter_tags


def find_paragraphs(html: str) -> list[ParagraphUnit]:
    result: list[ParagraphUnit] = []
    counter = 0
    start = 0
    for tag in iter_tags(html):
        if tag.opening:
            counter += 1
            continue
        counter -= 1
        if counter == 0 and tag.name in PARAGRAPH_TERMINATORS:
            result.append(html[start:tag.end])
            start = tag.end
    if start < len(html):
        result.append(html[start:])
    return result


def count_paragraphs(html: str) -> int:
    return len(find_paragraphs(html))
