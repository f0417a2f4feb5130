"""
bilingual/languages.py — metadane języków: nazwa, kierunek tekstu, kod HTML.

Tabela obejmuje najczęstsze wersje językowe wiki; nieznany kod daje sam
kod jako nazwę i kierunek ltr.
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.documents import Document, TextDirection

# Autonimy (nazwa języka w tym języku).
LANGUAGE_NAMES: dict[str, str] = {
    "ar":  "العربية",
    "bg":  "български",
    "ca":  "català",
    "cs":  "čeština",
    "da":  "dansk",
    "de":  "Deutsch",
    "el":  "Ελληνικά",
    "en":  "English",
    "eo":  "Esperanto",
    "es":  "español",
    "et":  "eesti",
    "fa":  "فارسی",
    "fi":  "suomi",
    "fr":  "français",
    "he":  "עברית",
    "hu":  "magyar",
    "id":  "Bahasa Indonesia",
    "it":  "italiano",
    "ja":  "日本語",
    "ko":  "한국어",
    "la":  "Latina",
    "lt":  "lietuvių",
    "nl":  "Nederlands",
    "no":  "norsk",
    "pl":  "polski",
    "pt":  "português",
    "ro":  "română",
    "ru":  "русский",
    "sk":  "slovenčina",
    "sv":  "svenska",
    "tr":  "Türkçe",
    "uk":  "українська",
    "ur":  "اردو",
    "vi":  "Tiếng Việt",
    "yi":  "ייִדיש",
    "zh":  "中文",
}

RTL_LANGUAGES: frozenset[str] = frozenset({
    "ar", "arc", "arz", "ckb", "dv", "fa", "he", "ks", "mzn", "pnb",
    "ps", "sd", "ug", "ur", "yi",
})

# Kody wiki, których kod HTML (BCP 47) jest inny.
_HTML_CODES: dict[str, str] = {
    "simple":       "en-simple",
    "be-x-old":     "be-tarask",
    "zh-classical": "lzh",
    "zh-min-nan":   "nan",
    "zh-yue":       "yue",
    "no":           "nb",
}


@dataclass(slots=True, frozen=True)
class Language:
    code: str
    html_code: str
    name: str
    direction: TextDirection


def get_language(code: str) -> Language:
    """Zwraca metadane dla kodu języka (wielkość liter bez znaczenia)."""
    code = code.strip().lower()
    return Language(
        code=code,
        html_code=_HTML_CODES.get(code, code),
        name=LANGUAGE_NAMES.get(code, code),
        direction=TextDirection.RTL if code in RTL_LANGUAGES else TextDirection.LTR,
    )


def make_document(html: str, language_code: str, url: str) -> Document:
    """Buduje Document z metadanymi języka z tej tabeli."""
    lang = get_language(language_code)
    return Document(
        raw_html=html,
        language_code=lang.html_code,
        display_name=lang.name,
        direction=lang.direction,
        canonical_url=url,
    )
