"""
File system as a composite.

Files and folders share one interface, so listing, opening and sizing work
the same way whether the caller holds a single file or a whole tree.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import InvalidRequestError, PathNotFoundError

INDENT_STEP = 4


class FileSystemItem(ABC):
    def __init__(self, name: str) -> None:
        if not name or "/" in name:
            raise InvalidRequestError(f"Invalid name: {name!r}")
        self.name = name

    @abstractmethod
    def ls(self, indent: int = 0) -> list[str]:
        """List this item; folders list their direct children."""

    @abstractmethod
    def open_all(self, indent: int = 0) -> list[str]:
        """Render the whole subtree, one line per item."""

    @abstractmethod
    def get_size(self) -> int:
        pass

    @abstractmethod
    def cd(self, name: str) -> Optional["Folder"]:
        pass

    @abstractmethod
    def is_folder(self) -> bool:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class File(FileSystemItem):
    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        if size < 0:
            raise InvalidRequestError(f"File size cannot be negative: {size}",
                                      context={"name": name})
        self.size = size

    def ls(self, indent: int = 0) -> list[str]:
        return [" " * indent + self.name]

    def open_all(self, indent: int = 0) -> list[str]:
        return [" " * indent + self.name]

    def get_size(self) -> int:
        return self.size

    def cd(self, name: str) -> Optional["Folder"]:
        return None

    def is_folder(self) -> bool:
        return False


class Folder(FileSystemItem):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[FileSystemItem] = []

    def add(self, item: FileSystemItem) -> FileSystemItem:
        if item is self or (isinstance(item, Folder) and item.contains(self)):
            raise InvalidRequestError(
                f"Cannot add {item.name!r} inside itself",
                context={"folder": self.name}
            )
        if any(child.name == item.name for child in self.children):
            raise InvalidRequestError(
                f"{item.name!r} already exists in {self.name!r}",
                context={"folder": self.name}
            )
        self.children.append(item)
        return item

    def contains(self, item: FileSystemItem) -> bool:
        """True if item is anywhere below this folder."""
        for child in self.children:
            if child is item or (isinstance(child, Folder) and child.contains(item)):
                return True
        return False

    def remove(self, name: str) -> bool:
        for index, child in enumerate(self.children):
            if child.name == name:
                del self.children[index]
                return True
        return False

    def ls(self, indent: int = 0) -> list[str]:
        prefix = " " * indent
        return [prefix + ("+ " + child.name if child.is_folder() else child.name)
                for child in self.children]

    def open_all(self, indent: int = 0) -> list[str]:
        lines = [" " * indent + "+ " + self.name]
        for child in self.children:
            lines.extend(child.open_all(indent + INDENT_STEP))
        return lines

    def get_size(self) -> int:
        return sum(child.get_size() for child in self.children)

    def cd(self, name: str) -> Optional["Folder"]:
        for child in self.children:
            if child.name == name and isinstance(child, Folder):
                return child
        return None

    def is_folder(self) -> bool:
        return True


def resolve(root: Folder, path: str) -> Folder:
    """
    Follow a slash-separated path of folder names starting at ``root``.

    Empty segments and "." are ignored, so "a//b/" and "./a/b" resolve like
    "a/b". Raises PathNotFoundError at the first segment that is not a
    folder.
    """
    current = root
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        next_folder = current.cd(segment)
        if next_folder is None:
            raise PathNotFoundError(
                f"No folder named {segment!r} in {current.name!r}",
                path=path,
                missing_segment=segment
            )
        current = next_folder
    return current
