from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from ..config import settings
from ..models.schemas import TemplateDescriptor
from ..storage.base import FileId, Folder
from ..utils.logging import exception, info
from .locales import resolve_locale_dir
from .types import classify_mime_to_type, classify_type_to_mime, file_extension

TEMPLATE_FOLDER = "template"


def resolve_template_path(locale: str | None, extension: str, assets_root: str | Path | None = None) -> str:
    """
    Path of the blank template for `locale`: <assets_root>/<locale dir>/new<extension>.
    `extension` carries its leading dot (".docx").
    """
    root = Path(assets_root) if assets_root is not None else settings.ASSETS_ROOT
    return str(root / resolve_locale_dir(locale) / f"new{extension}")


def get_template_content(name: str, current_locale: str | None, assets_root: str | Path | None = None) -> bytes:
    """
    Blank template bytes for the extension of `name` in `current_locale`.
    Raises FileNotFoundError when no asset exists at the resolved path.
    """
    ext = "." + file_extension(name)
    path = resolve_template_path(current_locale, ext, assets_root)
    with open(path, "rb") as f:
        return f.read()


def get_global_template_dir(storage: Folder, app_name: Optional[str] = None) -> Folder:
    """<app_name>/template under the storage root, created on first use."""
    app_name = app_name or settings.APP_NAME
    app_dir = storage.get_folder(app_name) if storage.folder_exists(app_name) else storage.create_folder(app_name)
    if app_dir.folder_exists(TEMPLATE_FOLDER):
        return app_dir.get_folder(TEMPLATE_FOLDER)
    return app_dir.create_folder(TEMPLATE_FOLDER)


def list_global_templates(storage: Folder, type_filter: Optional[str] = None) -> List[TemplateDescriptor]:
    template_dir = get_global_template_dir(storage)

    if type_filter:
        items = template_dir.search_by_mime(classify_type_to_mime(type_filter))
    else:
        items = template_dir.list_directory()

    return [
        TemplateDescriptor(
            id=item.get_id(),
            name=item.get_name(),
            type=classify_mime_to_type(item.get_mime_type()),
        )
        for item in items
    ]


def get_global_template_by_id(storage: Folder, template_id: FileId) -> bytes | None:
    """
    Content of the global template `template_id`, or None when the lookup fails
    or finds nothing. Errors reading the found item's content propagate.
    """
    template_dir = get_global_template_dir(storage)
    try:
        templates = template_dir.get_by_id(template_id)
    except Exception:
        exception(f"get_global_template_by_id: {template_id}", category=settings.APP_NAME)
        return None

    if not templates:
        info(f"Template not found: {template_id}", category=settings.APP_NAME)
        return None

    return templates[0].get_content()
