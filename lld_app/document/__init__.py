"""Document editor lesson: renderable elements and pluggable storage."""

from .editor import Document, DocumentEditor
from .elements import (
    DocumentElement,
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from .persistence import DbStorage, FileStorage, Persistence, create_storage

__all__ = [
    "DocumentElement",
    "TextElement",
    "ImageElement",
    "NewLineElement",
    "TabSpaceElement",
    "Document",
    "DocumentEditor",
    "Persistence",
    "FileStorage",
    "DbStorage",
    "create_storage",
]
