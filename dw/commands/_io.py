"""Wspólne wejście/wyjście komend: odczyt plików HTML i zapis tabeli."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

# Komunikaty na stderr — stdout zostaje dla samego HTML.
console = Console(stderr=True)


def read_html(path_str: str) -> str:
    path = Path(path_str)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu {path}:[/red] {e}")
        raise SystemExit(1)


def write_output(html: str, out: str | None) -> None:
    """Zapisuje tabelę do pliku albo wypisuje ją na stdout (bez markupu rich)."""
    if out is None:
        print(html)
        return
    out_path = Path(out)
    out_path.write_text(html, encoding="utf-8")
    console.print(f"[green]HTML:[/green] {out_path}  ({len(html)} znaków)")
