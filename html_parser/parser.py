"""html_parser/parser.py — pobieranie stron wiki i odczyt ich struktury."""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup, Tag

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Tagi wykonywalne — nie są treścią strony
_NOISE_TAGS = {"script", "noscript"}


class FetchError(RuntimeError):
    """Nie udało się pobrać strony (błąd sieci lub status HTTP)."""

    def __init__(self, url: str, message: str, status: int | None = None) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status = status


def append_query(url: str, params: dict[str, str]) -> str:
    """Dopisuje parametry do query adresu (zachowując istniejące i fragment)."""
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


def _get(url: str, timeout: float, user_agent: str) -> str:
    headers = {"User-Agent": user_agent}
    try:
        resp = requests.get(url, timeout=timeout, headers=headers)
        resp.raise_for_status()
    except requests.RequestException as e:
        status = e.response.status_code if e.response is not None else None
        raise FetchError(url, str(e), status) from e
    resp.encoding = resp.encoding or resp.apparent_encoding or "utf-8"
    return resp.text


def fetch_page(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Pobiera pełną stronę HTML."""
    return _get(url, timeout, user_agent)


def fetch_rendered_page(
    url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Pobiera samą wyrenderowaną treść strony wiki (action=render)."""
    return _get(append_query(url, {"action": "render"}), timeout, user_agent)


# ---------------------------------------------------------------------------
# Odczyt pełnej strony
# ---------------------------------------------------------------------------

def _interwiki_code(link: Tag) -> str | None:
    """Kod interwiki z klasy `interwiki-xx` elementu <li>, a gdy jej brak — hreflang."""
    parent = link.parent
    if isinstance(parent, Tag):
        for cls in parent.get("class") or []:
            if cls.startswith("interwiki-"):
                return cls[len("interwiki-"):]
    hreflang = link.get("hreflang")
    return str(hreflang) if hreflang else None


def find_language_links(page_html: str, base_url: str | None = None) -> dict[str, str]:
    """
    Zwraca mapę kod języka → adres odpowiednika strony (linki interwiki).

    Adresy względne (//host/…, /wiki/…) są rozwijane względem `base_url`.
    Przy powtórzonym kodzie wygrywa pierwszy link.
    """
    soup = BeautifulSoup(page_html, "html.parser")
    links: dict[str, str] = {}
    for a in soup.find_all("a", hreflang=True):
        classes = a.get("class") or []
        parent = a.parent
        in_list = isinstance(parent, Tag) and "interlanguage-link" in (parent.get("class") or [])
        if "interlanguage-link-target" not in classes and not in_list:
            continue
        code = _interwiki_code(a)
        href = a.get("href")
        if not code or not href or code in links:
            continue
        links[code] = urljoin(base_url, str(href)) if base_url else str(href)
    return links


def find_page_language(page_html: str) -> str | None:
    """Język treści: atrybut lang elementu .mw-parser-output lub <html>."""
    soup = BeautifulSoup(page_html, "html.parser")
    for tag in (soup.find(class_="mw-parser-output"), soup.find("html")):
        if isinstance(tag, Tag) and tag.get("lang"):
            return str(tag["lang"])
    return None


def extract_content(page_html: str) -> str:
    """
    Wyciąga wyrenderowaną treść artykułu z pełnej strony.

    Kolejność: div.mw-parser-output, <body>, całość. Skrypty są usuwane.
    """
    soup = BeautifulSoup(page_html, "html.parser")
    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()
    content = soup.find("div", class_="mw-parser-output") or soup.find("body")
    if isinstance(content, Tag):
        return content.decode_contents()
    return str(soup)
