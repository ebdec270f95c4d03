"""Singleton lessons: eager, lazy, locked and metaclass-based variants."""

from .logbook import LogBook
from .registry import SingletonMeta, SingletonRegistry, get_singleton
from .variants import (
    DoubleCheckedSingleton,
    EagerSingleton,
    LazySingleton,
    SynchronizedSingleton,
)

__all__ = [
    "EagerSingleton",
    "LazySingleton",
    "SynchronizedSingleton",
    "DoubleCheckedSingleton",
    "SingletonMeta",
    "SingletonRegistry",
    "get_singleton",
    "LogBook",
]
