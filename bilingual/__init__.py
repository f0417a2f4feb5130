"""
bilingual — integracja silnika z hostem: język, cache, pobieranie, widok.

Publiczne API:
  BilingualView(settings, cache, fetcher)   widok strony (hook renderowania)
  Page, ViewResult                          wejście / wynik widoku
  robot_policy(match)                       polityka robotów dla widoku
  BilingualCache, make_key                  cache "oblicz raz, serwuj wielu"
  get_language(code), make_document(...)    metadane języka
  Settings, load_settings()                 konfiguracja ze zmiennych środowiskowych
"""

from .cache import BilingualCache, make_key
from .languages import Language, get_language, make_document
from .settings import Settings, load_settings
from .view import BilingualView, Page, ViewResult, robot_policy

__all__ = [
    "BilingualView",
    "Page",
    "ViewResult",
    "robot_policy",
    "BilingualCache",
    "make_key",
    "Language",
    "get_language",
    "make_document",
    "Settings",
    "load_settings",
]
