"""Virtual proxy: postpone an expensive load until it is needed."""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


class Image(ABC):
    @abstractmethod
    def display(self) -> str:
        pass


class RealImage(Image):
    """Loads its file as soon as it is constructed."""

    load_count = 0

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.load_log = f"[RealImage] Loading image from disk: {filename}"
        RealImage.load_count += 1
        logger.debug("Image loaded", filename=filename)

    def display(self) -> str:
        return f"[RealImage] Displaying {self.filename}"


class ImageProxy(Image):
    """Stands in for a RealImage and creates it on first display."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> str:
        if self._real_image is None:
            self._real_image = RealImage(self.filename)
        return self._real_image.display()
