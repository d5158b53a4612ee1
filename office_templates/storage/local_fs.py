from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import mimetypes

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from ..db.database import session_scope
from ..db.models import FileEntry
from ..templates.types import EXT_MIME
from .base import FileId, NotFoundError

for _ext, _mime in EXT_MIME.items():
    mimetypes.add_type(_mime, _ext)


def guess_mime(path: Path) -> str:
    guessed, _ = mimetypes.guess_type(path.as_posix())
    return guessed or "application/octet-stream"


class FileIndex:
    """Assigns stable integer ids to file paths, persisted in SQLite."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self._factory = session_factory

    def _lookup(self, key: str) -> int | None:
        with session_scope(self._factory) as db:
            return db.execute(select(FileEntry.id).where(FileEntry.path == key)).scalars().first()

    def id_for(self, path: Path) -> int:
        key = path.resolve().as_posix()
        file_id = self._lookup(key)
        if file_id is not None:
            return file_id
        try:
            with session_scope(self._factory) as db:
                entry = FileEntry(path=key)
                db.add(entry)
                db.flush()
                return entry.id
        except IntegrityError:
            # another process indexed the same path first
            file_id = self._lookup(key)
            if file_id is None:
                raise
            return file_id

    def path_for(self, file_id: int) -> Path | None:
        with session_scope(self._factory) as db:
            entry = db.get(FileEntry, file_id)
            return Path(entry.path) if entry else None

    def forget(self, file_id: int) -> None:
        with session_scope(self._factory) as db:
            db.execute(delete(FileEntry).where(FileEntry.id == file_id))

    def prune(self) -> int:
        """Drop rows whose file no longer exists. Returns the number removed."""
        with session_scope(self._factory) as db:
            stale = [e.id for e in db.execute(select(FileEntry)).scalars() if not Path(e.path).is_file()]
            if stale:
                db.execute(delete(FileEntry).where(FileEntry.id.in_(stale)))
            return len(stale)


class LocalFile:
    def __init__(self, path: Path, index: FileIndex):
        self.path = path
        self._index = index

    def get_content(self) -> bytes:
        return self.path.read_bytes()

    def get_id(self) -> int:
        return self._index.id_for(self.path)

    def get_name(self) -> str:
        return self.path.name

    def get_mime_type(self) -> str:
        return guess_mime(self.path)

    def __repr__(self) -> str:
        return f"LocalFile({self.path.as_posix()!r})"


class LocalFolder:
    """
    Folder capability over a directory on the local filesystem.

    - list_directory: regular files directly inside, sorted by name
    - search_by_mime: recursive
    - get_by_id: [file] if the id is indexed and the file is still under this folder, else []
    """

    def __init__(self, path: str | Path, index: Optional[FileIndex] = None):
        self.path = Path(path)
        self._index = index or FileIndex()

    @property
    def index(self) -> FileIndex:
        return self._index

    def _child(self, name: str) -> Path:
        child = (self.path / name).resolve()
        if child.parent != self.path.resolve():
            raise ValueError(f"Invalid folder name: {name!r}")
        return child

    def folder_exists(self, name: str) -> bool:
        return self._child(name).is_dir()

    def get_folder(self, name: str) -> "LocalFolder":
        child = self._child(name)
        if not child.is_dir():
            raise NotFoundError(f"Folder not found: {child}")
        return LocalFolder(child, self._index)

    def create_folder(self, name: str) -> "LocalFolder":
        child = self._child(name)
        child.mkdir(parents=True, exist_ok=True)
        return LocalFolder(child, self._index)

    def list_directory(self) -> List[LocalFile]:
        if not self.path.is_dir():
            raise NotFoundError(f"Folder not found: {self.path}")
        files = sorted((p for p in self.path.iterdir() if p.is_file()), key=lambda p: p.name)
        return [LocalFile(p, self._index) for p in files]

    def search_by_mime(self, mime: str) -> List[LocalFile]:
        if not self.path.is_dir():
            raise NotFoundError(f"Folder not found: {self.path}")
        matches = sorted(p for p in self.path.rglob("*") if p.is_file() and guess_mime(p) == mime)
        return [LocalFile(p, self._index) for p in matches]

    def get_by_id(self, file_id: FileId) -> List[LocalFile]:
        file_id = int(file_id)
        path = self._index.path_for(file_id)
        if path is None:
            return []
        if not path.is_file():
            self._index.forget(file_id)
            return []
        root = self.path.resolve()
        if root not in path.parents:
            return []
        return [LocalFile(path, self._index)]

    def __repr__(self) -> str:
        return f"LocalFolder({self.path.as_posix()!r})"
