"""In-memory Folder/StorageItem doubles for the global template functions."""

from typing import Dict, List, Optional

from office_templates.storage.base import NotFoundError


class FakeItem:
    def __init__(self, file_id, name: str, mime: str, content: bytes = b""):
        self._id = file_id
        self._name = name
        self._mime = mime
        self._content = content

    def get_content(self) -> bytes:
        return self._content

    def get_id(self):
        return self._id

    def get_name(self) -> str:
        return self._name

    def get_mime_type(self) -> str:
        return self._mime


class FakeFolder:
    """In-memory Folder recording the calls made on it."""

    def __init__(self, items: Optional[List[FakeItem]] = None, lookup_error: Optional[Exception] = None):
        self.items = items or []
        self.lookup_error = lookup_error
        self.children: Dict[str, "FakeFolder"] = {}
        self.calls: List[tuple] = []

    def folder_exists(self, name: str) -> bool:
        self.calls.append(("folder_exists", name))
        return name in self.children

    def get_folder(self, name: str) -> "FakeFolder":
        self.calls.append(("get_folder", name))
        if name not in self.children:
            raise NotFoundError(name)
        return self.children[name]

    def create_folder(self, name: str) -> "FakeFolder":
        self.calls.append(("create_folder", name))
        self.children[name] = FakeFolder(lookup_error=self.lookup_error)
        return self.children[name]

    def list_directory(self) -> List[FakeItem]:
        self.calls.append(("list_directory",))
        return list(self.items)

    def search_by_mime(self, mime: str) -> List[FakeItem]:
        self.calls.append(("search_by_mime", mime))
        return [i for i in self.items if i.get_mime_type() == mime]

    def get_by_id(self, file_id) -> List[FakeItem]:
        self.calls.append(("get_by_id", file_id))
        if self.lookup_error is not None:
            raise self.lookup_error
        return [i for i in self.items if str(i.get_id()) == str(file_id)]


def make_storage(items: List[FakeItem], app_name: str = "onlyoffice", lookup_error: Optional[Exception] = None):
    """Root folder with <app_name>/template already holding `items`; returns (root, template_dir)."""
    root = FakeFolder()
    app_dir = root.create_folder(app_name)
    template_dir = app_dir.create_folder("template")
    template_dir.items = items
    template_dir.lookup_error = lookup_error
    root.calls.clear()
    return root, template_dir


