"""
bilingual/cache.py — cache wyników widoku dwujęzycznego.

Kontrakt "oblicz raz, serwuj wielu": przy braku wpisu dokładnie jeden wątek
liczy wartość dla danego klucza, pozostali czekają na jego wynik. Wartość
None (np. nieudane pobranie strony obcej) nie jest zapisywana.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

KEY_NAMESPACE = "doublewiki-bilingual-pagetext"


def make_key(*parts: object) -> str:
    """Klucz z części rozdzielonych ':' (dwukropek w części jest kodowany)."""
    return ":".join(str(p).replace("%", "%25").replace(":", "%3A") for p in parts)


class _KeyLock:
    """Blokada jednego klucza z licznikiem wątków, które jej używają."""
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class BilingualCache:
    """Cache w pamięci procesu z czasem życia wpisów (TTL w sekundach)."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, str]] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[str, _KeyLock] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: str, ttl: float) -> None:
        with self._lock:
            now = self._clock()
            self._sweep(now)
            if ttl > 0:
                self._entries[key] = (now + ttl, value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def _sweep(self, now: float) -> None:
        # wywoływane pod self._lock
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    def get_with_set_callback(
        self,
        key: str,
        ttl: float,
        callback: Callable[[], str | None],
    ) -> str | None:
        """
        Zwraca wartość z cache albo liczy ją przez callback() i zapisuje.

        Współbieżne wywołania dla tego samego klucza wykonują callback
        jeden raz; wyjątek z callbacku propaguje do wywołującego. Blokada
        klucza znika, gdy nikt już na nią nie czeka.
        """
        value = self.get(key)
        if value is not None:
            return value

        with self._lock:
            key_lock = self._key_locks.get(key)
            if key_lock is None:
                key_lock = self._key_locks[key] = _KeyLock()
            key_lock.users += 1

        try:
            with key_lock.lock:
                # inny wątek mógł właśnie policzyć wartość
                value = self.get(key)
                if value is not None:
                    return value
                value = callback()
                if value is not None:
                    self.set(key, value, ttl)
                return value
        finally:
            with self._lock:
                key_lock.users -= 1
                if key_lock.users == 0:
                    del self._key_locks[key]
