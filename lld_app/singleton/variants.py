"""
Four ways to guarantee a single instance.

Each class keeps its instance on the class object and hands it out through
``get_instance()``. They differ only in when the instance is created and
how much locking guards that creation.
"""

import threading
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


class _SingletonBase:
    """Shared plumbing: instance slot, construction guard, test reset."""

    _instance: Optional["_SingletonBase"] = None
    creation_count: int = 0

    def __init__(self) -> None:
        cls = type(self)
        if cls._instance is not None:
            raise RuntimeError(
                f"{cls.__name__} is a singleton; use {cls.__name__}.get_instance()"
            )
        cls.creation_count += 1
        logger.debug("Singleton instance created", singleton=cls.__name__,
                     creation_count=cls.creation_count)

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the current instance. Intended for tests only."""
        cls._instance = None
        cls.creation_count = 0


class EagerSingleton(_SingletonBase):
    """Instance built when the module is imported."""

    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        return cls._instance  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        super().reset_instance()
        cls._instance = cls()


EagerSingleton._instance = EagerSingleton()


class LazySingleton(_SingletonBase):
    """Instance built on first request. Not safe under concurrent first access."""

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance  # type: ignore[return-value]


class SynchronizedSingleton(_SingletonBase):
    """Every access takes the lock. Correct but pays for it on each call."""

    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "SynchronizedSingleton":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance  # type: ignore[return-value]


class DoubleCheckedSingleton(_SingletonBase):
    """Lock only while the instance is still missing."""

    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "DoubleCheckedSingleton":
        if cls._instance is None:
            with cls._lock:
                # Another thread may have won the race while we waited
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance  # type: ignore[return-value]
