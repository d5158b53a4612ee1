import os
from types import MappingProxyType
from typing import Any

from ..models.template_type import TemplateType

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PPTX_MIME = "application/vnd.openxmlformats-officedocument.presentationml.presentation"

TYPE_TO_MIME = MappingProxyType({
    TemplateType.document.value: DOCX_MIME,
    TemplateType.spreadsheet.value: XLSX_MIME,
    TemplateType.presentation.value: PPTX_MIME,
})

MIME_TO_TYPE = MappingProxyType({mime: t for t, mime in TYPE_TO_MIME.items()})

EXT_MIME = MappingProxyType({
    ".docx": DOCX_MIME,
    ".xlsx": XLSX_MIME,
    ".pptx": PPTX_MIME,
})

SUPPORTED_EXTENSIONS = frozenset(ext.lstrip(".") for ext in EXT_MIME)


def classify_mime_to_type(mime: Any) -> str:
    """Template type for a mimetype, or "" when it is not one of the three."""
    if not isinstance(mime, str):
        return ""
    return MIME_TO_TYPE.get(mime, "")


def classify_type_to_mime(template_type: Any) -> str:
    """Mimetype for a template type (plain string or TemplateType), or ""."""
    value = getattr(template_type, "value", template_type)
    if not isinstance(value, str):
        return ""
    return TYPE_TO_MIME.get(value, "")


def file_extension(name: str) -> str:
    # text after the last dot of the basename, lower-cased; "" when the basename has no dot
    base = os.path.basename(name or "")
    if "." not in base:
        return ""
    return base.rpartition(".")[2].lower()


def is_supported_extension(name: str) -> bool:
    return file_extension(name) in SUPPORTED_EXTENSIONS
