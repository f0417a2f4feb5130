"""
bilingual/settings.py — konfiguracja widoku dwujęzycznego.

Zmienne środowiskowe:
  DOUBLEWIKI_CACHE_TIME    czas życia wyniku w cache (s), domyślnie 43200 (12 h)
  DOUBLEWIKI_HTTP_TIMEOUT  timeout pobierania strony obcej (s), domyślnie 30
  DOUBLEWIKI_USER_AGENT    nagłówek User-Agent przy pobieraniu

Opcjonalnie plik .env w katalogu głównym projektu:
  DOUBLEWIKI_CACHE_TIME=3600
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from html_parser.parser import DEFAULT_TIMEOUT as DEFAULT_HTTP_TIMEOUT
from html_parser.parser import DEFAULT_USER_AGENT

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

DEFAULT_CACHE_TIME = 60 * 60 * 12


@dataclass(slots=True, frozen=True)
class Settings:
    cache_time: int = DEFAULT_CACHE_TIME
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


def _env_number(name: str, default: float, cast: type) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ValueError(f"Nieprawidłowa wartość {name}={raw!r} (oczekiwano liczby).") from None
    if value < 0:
        raise ValueError(f"Wartość {name} nie może być ujemna: {raw!r}")
    return value


def load_settings() -> Settings:
    """Czyta ustawienia ze zmiennych środowiskowych (z wartościami domyślnymi)."""
    return Settings(
        cache_time   = int(_env_number("DOUBLEWIKI_CACHE_TIME", DEFAULT_CACHE_TIME, int)),
        http_timeout = float(_env_number("DOUBLEWIKI_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, float)),
        user_agent   = os.getenv("DOUBLEWIKI_USER_AGENT") or DEFAULT_USER_AGENT,
    )
