"""Pytest configuration and fixtures."""

import os
import tempfile
import pytest
from pathlib import Path
from typing import List

# Settings are read at import time; keep the data root out of the working tree
os.environ.setdefault("DATA_ROOT", tempfile.mkdtemp(prefix="office-templates-"))
os.environ.setdefault("LOG_COLOR", "0")

from office_templates.db.database import make_session_factory  # noqa: E402
from office_templates.storage.local_fs import FileIndex, LocalFolder  # noqa: E402
from office_templates.templates.types import DOCX_MIME, PPTX_MIME, XLSX_MIME  # noqa: E402
from fakes import FakeItem  # noqa: E402

LOCALE_DIRS = ["en-US", "en-GB", "de-DE", "pt-BR"]
EXTENSIONS = [".docx", ".xlsx", ".pptx"]


@pytest.fixture
def assets_root(tmp_path: Path) -> Path:
    """Assets tree with <dir>/new<ext> files whose bytes name their own path."""
    root = tmp_path / "assets"
    for d in LOCALE_DIRS:
        (root / d).mkdir(parents=True)
        for ext in EXTENSIONS:
            (root / d / f"new{ext}").write_bytes(f"{d}/new{ext}".encode())
    return root


@pytest.fixture
def file_index(tmp_path: Path) -> FileIndex:
    return FileIndex(make_session_factory(tmp_path / "filecache.sqlite"))


@pytest.fixture
def local_root(tmp_path: Path, file_index: FileIndex) -> LocalFolder:
    root = tmp_path / "appdata_test"
    root.mkdir()
    return LocalFolder(root, file_index)


@pytest.fixture
def sample_items() -> List[FakeItem]:
    return [
        FakeItem(11, "letter.docx", DOCX_MIME, b"docx-bytes"),
        FakeItem(12, "budget.xlsx", XLSX_MIME, b"xlsx-bytes"),
        FakeItem(13, "deck.pptx", PPTX_MIME, b"pptx-bytes"),
        FakeItem(14, "notes.txt", "text/plain", b"plain"),
    ]
