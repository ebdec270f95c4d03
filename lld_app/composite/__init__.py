"""Composite lesson: a file system tree of files and folders."""

from .filesystem import File, FileSystemItem, Folder, resolve

__all__ = ["FileSystemItem", "File", "Folder", "resolve"]
