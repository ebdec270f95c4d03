"""Building blocks of a document. Each element knows how to render itself."""

from abc import ABC, abstractmethod


class DocumentElement(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class TextElement(DocumentElement):
    def __init__(self, text: str) -> None:
        self.text = text

    def render(self) -> str:
        return self.text


class ImageElement(DocumentElement):
    def __init__(self, image_path: str) -> None:
        self.image_path = image_path

    def render(self) -> str:
        return f"[Image: {self.image_path}]"


class NewLineElement(DocumentElement):
    def render(self) -> str:
        return "\n"


class TabSpaceElement(DocumentElement):
    def render(self) -> str:
        return "\t"
