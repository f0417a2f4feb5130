"""
bilingual/view.py — widok dwujęzyczny strony (hook renderowania strony).

BilingualView.render(page, match):
  - brak `match`              → strona bez zmian (bez bloków wskazówek)
  - brak linku do `match`     → strona bez zmian
  - błąd pobrania strony obcej → strona bez zmian (wynik nie trafia do cache)
  - w pozostałych przypadkach  → tabela dwujęzyczna (z cache, jeśli jest)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from aligner import align_documents, strip_hint_blocks
from html_parser.parser import FetchError, fetch_rendered_page

from .cache import KEY_NAMESPACE, BilingualCache, make_key
from .languages import make_document
from .settings import Settings, load_settings

type Fetcher = Callable[[str, Settings], str]


def fetch_foreign(url: str, settings: Settings) -> str:
    return fetch_rendered_page(url, timeout=settings.http_timeout, user_agent=settings.user_agent)


@dataclass(slots=True, frozen=True)
class Page:
    """Strona lokalna przekazywana przez hosta."""
    html: str                      # wyrenderowana treść strony
    url: str                       # lokalny adres strony
    language_code: str             # język treści wiki
    viewer_language: str           # język interfejsu czytelnika (część klucza cache)
    language_links: dict[str, str] = field(default_factory=dict)  # kod → adres strony obcej


@dataclass(slots=True, frozen=True)
class ViewResult:
    html: str
    bilingual: bool


def robot_policy(match: str | None) -> str | None:
    """Widok dwujęzyczny nie powinien być indeksowany."""
    return "noindex,nofollow" if match else None


class BilingualView:
    def __init__(
        self,
        settings: Settings | None = None,
        cache: BilingualCache | None = None,
        fetcher: Fetcher = fetch_foreign,
    ) -> None:
        self.settings = settings or load_settings()
        self.cache = cache if cache is not None else BilingualCache()
        self._fetch = fetcher

    def render(self, page: Page, match: str | None) -> ViewResult:
        plain = ViewResult(strip_hint_blocks(page.html), bilingual=False)
        if not match:
            return plain

        foreign_url = page.language_links.get(match)
        if foreign_url is None:
            return plain

        def compute() -> str | None:
            try:
                translation = self._fetch(foreign_url, self.settings)
            except FetchError:
                return None
            local = make_document(page.html, page.language_code, page.url)
            foreign = make_document(translation, match, foreign_url)
            return align_documents(local, foreign, match)

        key = make_key(KEY_NAMESPACE, page.viewer_language, foreign_url)
        html = self.cache.get_with_set_callback(key, self.settings.cache_time, compute)
        if html is None:
            return plain
        return ViewResult(html, bilingual=True)
