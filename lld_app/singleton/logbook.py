"""A shared log book: the classic first singleton."""

import threading
from datetime import datetime, timezone

from .registry import SingletonMeta


class LogBook(metaclass=SingletonMeta):
    """Application-wide message book shared by every caller."""

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._lock = threading.Lock()

    def write(self, message: str) -> str:
        entry = f"[{datetime.now(timezone.utc).isoformat()}] {message}"
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
