"""Proxy lessons: virtual, protection and remote proxies."""

from .document import DocumentProxy, RealDocumentReader, User
from .image import ImageProxy, RealImage
from .remote import DataServiceProxy, RealDataService

__all__ = [
    "RealImage",
    "ImageProxy",
    "User",
    "RealDocumentReader",
    "DocumentProxy",
    "RealDataService",
    "DataServiceProxy",
]
