"""
aligner/links.py — przepisywanie linków i identyfikatorów przed scaleniem.

Po złożeniu dwóch stron w jedną tabelę te same identyfikatory pojawiłyby się
dwa razy (przypisy, nagłówki). Dlatego:

  - strona obca:    id="x" → id="l_x",  href="#x" → href="#l_x"
  - strona lokalna: id="x" → id="r_x",  href="#x" → href="#r_x"
  - strona lokalna: href="/Strona" → href="/Strona?match=<kod>"
    (link wewnętrzny bez query zostaje w widoku dwujęzycznym)

Zmieniane są wyłącznie wartości atrybutów href/id w tagach otwierających;
treść elementów i pozostałe atrybuty przechodzą bez zmian. Wartość, która
ma już właściwy prefiks, nie jest prefiksowana ponownie.
"""

from __future__ import annotations

import re
from typing import Callable
from urllib.parse import urlencode

TRANSLATION_PREFIX = "l_"
LOCAL_PREFIX = "r_"

_START_TAG_RE = re.compile(r"<(?P<name>[a-zA-Z][a-zA-Z0-9]*)(?P<attrs>\s[^>]*)?>")

# Kolejne atrybuty tagu; wartości w cudzysłowach mogą zawierać spacje i '='.
_ATTRIBUTE_RE = re.compile(
    r"(?P<attr>[^\s\"'>/=]+)"
    r"(?:\s*=\s*(?:\"(?P<dq>[^\"]*)\"|'(?P<sq>[^']*)'|(?P<uq>[^\s\"'>]+)))?"
)


def modify_attribute(
    html: str,
    attr: str,
    transform: Callable[[str], str | None],
    tag_name: str | None = None,
) -> str:
    """
    Przepisuje wartość atrybutu `attr` w tagach otwierających.

    transform(value) zwraca nową wartość albo None (bez zmian). Gdy
    `tag_name` jest podany, rozważane są tylko tagi o tej nazwie.
    """

    def replace_attr(m: re.Match[str]) -> str:
        if m.group("attr").lower() != attr:
            return m.group(0)
        value = next((v for v in (m.group("dq"), m.group("sq"), m.group("uq")) if v is not None), None)
        if value is None:
            return m.group(0)
        new_value = transform(value)
        if new_value is None or new_value == value:
            return m.group(0)
        quote = "'" if m.group("sq") is not None else '"'
        return f"{m.group('attr')}={quote}{new_value}{quote}"

    def replace_tag(m: re.Match[str]) -> str:
        attrs = m.group("attrs")
        if not attrs:
            return m.group(0)
        if tag_name is not None and m.group("name").lower() != tag_name:
            return m.group(0)
        new_attrs = _ATTRIBUTE_RE.sub(replace_attr, attrs)
        if new_attrs == attrs:
            return m.group(0)
        return f"<{m.group('name')}{new_attrs}>"

    return _START_TAG_RE.sub(replace_tag, html)


# ---------------------------------------------------------------------------
# Przebiegi przepisywania
# ---------------------------------------------------------------------------

def prefix_anchor_hrefs(html: str, prefix: str) -> str:
    """href="#x" w linkach <a> → href="#<prefix>x"."""

    def transform(href: str) -> str | None:
        if not href.startswith("#"):
            return None
        return f"#{prefix}{href[1:]}"

    return modify_attribute(html, "href", transform, tag_name="a")


def prefix_fragment_ids(html: str, prefix: str) -> str:
    """id="x" na dowolnym elemencie → id="<prefix>x"."""

    def transform(value: str) -> str | None:
        if not value:
            return None
        return prefix + value

    return modify_attribute(html, "id", transform)


def append_match_query(html: str, match_code: str) -> str:
    """
    Dopisuje ?match=<kod> do lokalnych linków względnych względem korzenia.

    Dotyczy tylko href zaczynających się od pojedynczego '/' i bez '?';
    fragment (#...) zostaje na końcu adresu.
    """
    query = urlencode({"match": match_code})

    def transform(href: str) -> str | None:
        if not href.startswith("/") or href.startswith("//") or "?" in href:
            return None
        path, sep, fragment = href.partition("#")
        return f"{path}?{query}{sep}{fragment}"

    return modify_attribute(html, "href", transform, tag_name="a")


def mangle_links(text: str, translation: str, match_code: str) -> tuple[str, str]:
    """
    Przepisuje linki obu stron przed cięciem.

    Zwraca (tekst lokalny, tłumaczenie).
    """
    translation = prefix_anchor_hrefs(translation, TRANSLATION_PREFIX)
    translation = prefix_fragment_ids(translation, TRANSLATION_PREFIX)

    text = prefix_anchor_hrefs(text, LOCAL_PREFIX)
    text = prefix_fragment_ids(text, LOCAL_PREFIX)
    text = append_match_query(text, match_code)

    return text, translation
