"""Metaclass and registry based singletons."""

import threading
from typing import Any, Type, TypeVar, cast

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class SingletonMeta(type):
    """Metaclass giving every class that uses it exactly one instance."""

    _instances: dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls not in SingletonMeta._instances:
            with SingletonMeta._lock:
                if cls not in SingletonMeta._instances:
                    SingletonMeta._instances[cls] = super().__call__(*args, **kwargs)
        return SingletonMeta._instances[cls]

    def reset(cls) -> None:
        """Forget the instance of this class. Intended for tests only."""
        with SingletonMeta._lock:
            SingletonMeta._instances.pop(cls, None)


class SingletonRegistry(metaclass=SingletonMeta):
    """
    Hands out one instance per class for classes that are not singletons
    themselves.

    Arguments are only used the first time a class is requested; later
    calls return the cached instance and ignore them.
    """

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        return cls()

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        with self._lock:
            if singleton_class not in self._instances:
                logger.debug("Registering singleton", singleton=singleton_class.__name__)
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return cast(T, self._instances[singleton_class])

    def has(self, singleton_class: type) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def clear(self) -> None:
        with self._lock:
            self._instances.clear()


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get a registry-managed instance.

    Args:
        singleton_class: The class to get an instance of
        *args: Constructor arguments, used only on first creation
        **kwargs: Constructor keyword arguments, used only on first creation

    Returns:
        The shared instance
    """
    return SingletonRegistry.get_instance().get(singleton_class, *args, **kwargs)
