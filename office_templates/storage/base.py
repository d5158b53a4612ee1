from __future__ import annotations
from typing import List, Protocol, Union, runtime_checkable

FileId = Union[int, str]


class NotFoundError(FileNotFoundError):
    """A folder or file requested from storage does not exist."""


@runtime_checkable
class StorageItem(Protocol):
    def get_content(self) -> bytes: ...
    def get_id(self) -> FileId: ...
    def get_name(self) -> str: ...
    def get_mime_type(self) -> str: ...


@runtime_checkable
class Folder(Protocol):
    """
    Storage capability handed to the template functions by the host.
    Implementations may raise on any call; callers decide whether that is fatal.
    """

    def folder_exists(self, name: str) -> bool: ...
    def get_folder(self, name: str) -> "Folder": ...
    def create_folder(self, name: str) -> "Folder": ...
    def list_directory(self) -> List[StorageItem]: ...
    def search_by_mime(self, mime: str) -> List[StorageItem]: ...
    def get_by_id(self, file_id: FileId) -> List[StorageItem]: ...


__all__ = ["FileId", "Folder", "NotFoundError", "StorageItem"]
