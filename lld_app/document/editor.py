"""
Document editor split along responsibilities.

Elements render themselves, the document only holds them, storage only
persists text, and the editor wires the three together.
"""

from typing import Optional

import structlog

from .elements import (
    DocumentElement,
    ImageElement,
    NewLineElement,
    TabSpaceElement,
    TextElement,
)
from .persistence import Persistence, create_storage

logger = structlog.get_logger(__name__)


class Document:
    def __init__(self, name: str = "document") -> None:
        self.name = name
        self.elements: list[DocumentElement] = []

    def add_element(self, element: DocumentElement) -> None:
        self.elements.append(element)

    def render(self) -> str:
        return "".join(element.render() for element in self.elements)


class DocumentEditor:
    """Edits a document and saves its rendered form through a storage backend."""

    def __init__(self, document: Optional[Document] = None,
                 storage: Optional[Persistence] = None) -> None:
        self.document = document or Document()
        self.storage = storage or create_storage("file")
        self._rendered: Optional[str] = None

    def _add(self, element: DocumentElement) -> "DocumentEditor":
        self.document.add_element(element)
        self._rendered = None
        return self

    def add_text(self, text: str) -> "DocumentEditor":
        return self._add(TextElement(text))

    def add_image(self, image_path: str) -> "DocumentEditor":
        return self._add(ImageElement(image_path))

    def add_new_line(self) -> "DocumentEditor":
        return self._add(NewLineElement())

    def add_tab_space(self) -> "DocumentEditor":
        return self._add(TabSpaceElement())

    def render_document(self) -> str:
        # Cached until the next edit
        if self._rendered is None:
            self._rendered = self.document.render()
        return self._rendered

    def save_document(self) -> str:
        location = self.storage.save(self.render_document(), name=self.document.name)
        logger.debug("Document saved", name=self.document.name, location=location)
        return location
