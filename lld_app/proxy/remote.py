"""Remote proxy: hide a slow remote call behind a local object."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import structlog

logger = structlog.get_logger(__name__)


class DataService(ABC):
    @abstractmethod
    def get_data(self) -> str:
        pass


class RealDataService(DataService):
    """
    Simulated remote server.

    ``fetcher`` lets callers plug in the actual transport; by default a
    canned payload is returned. ``calls`` counts round trips.
    """

    def __init__(self, fetcher: Optional[Callable[[], str]] = None) -> None:
        self._fetcher = fetcher or (lambda: "Data from server")
        self.calls = 0

    def get_data(self) -> str:
        self.calls += 1
        logger.debug("Remote data requested", calls=self.calls)
        return self._fetcher()


class DataServiceProxy(DataService):
    """
    Local stand-in for the remote service.

    The first successful response is cached and served for later calls.
    When a refresh is forced and the remote side fails, the stale cached
    copy is returned instead; with nothing cached the error propagates.
    """

    def __init__(self, real_service: Optional[RealDataService] = None) -> None:
        self.real_service = real_service or RealDataService()
        self._cache: Optional[str] = None

    def get_data(self, refresh: bool = False) -> str:
        if self._cache is not None and not refresh:
            return self._cache

        try:
            self._cache = self.real_service.get_data()
        except ConnectionError as e:
            if self._cache is None:
                raise
            logger.warning("Remote fetch failed, serving cached data", error=str(e))
        return self._cache

    def invalidate(self) -> None:
        self._cache = None
