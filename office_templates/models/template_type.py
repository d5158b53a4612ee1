from __future__ import annotations
from enum import Enum

class TemplateType(str, Enum):
    document = "document"
    spreadsheet = "spreadsheet"
    presentation = "presentation"

TEMPLATE_TYPES = frozenset(t.value for t in TemplateType)

__all__ = ["TemplateType", "TEMPLATE_TYPES"]
