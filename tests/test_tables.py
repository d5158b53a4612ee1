"""
Locale table resolution and type/mimetype classification.
"""

import pytest

from office_templates.models.template_type import TemplateType
from office_templates.templates.locales import LOCALE_PATHS, resolve_locale_dir
from office_templates.templates.types import (
    DOCX_MIME,
    PPTX_MIME,
    XLSX_MIME,
    TYPE_TO_MIME,
    classify_mime_to_type,
    classify_type_to_mime,
    is_supported_extension,
)


# ---------------------------------------------------------------------------
# Locale table
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("code,directory", sorted(LOCALE_PATHS.items()))
def test_known_locales_map_to_their_directory(code, directory):
    assert resolve_locale_dir(code) == directory


@pytest.mark.parametrize("code", ["xx", "de_AT", "pt", "EN", "", None])
def test_unknown_locales_fall_back_to_en(code):
    assert resolve_locale_dir(code) == "en-US"


def test_locale_table_is_read_only():
    with pytest.raises(TypeError):
        LOCALE_PATHS["xx"] = "xx-XX"  # type: ignore[index]


# ---------------------------------------------------------------------------
# Type <-> mimetype
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "template_type,mime",
    [
        ("document", DOCX_MIME),
        ("spreadsheet", XLSX_MIME),
        ("presentation", PPTX_MIME),
    ],
)
def test_type_and_mime_are_inverse(template_type, mime):
    assert classify_type_to_mime(template_type) == mime
    assert classify_mime_to_type(mime) == template_type
    assert classify_mime_to_type(classify_type_to_mime(template_type)) == template_type


def test_spreadsheet_mime_scenario():
    mime = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert classify_mime_to_type(mime) == "spreadsheet"
    assert classify_type_to_mime("spreadsheet") == mime


def test_enum_members_are_accepted():
    for t in TemplateType:
        assert classify_type_to_mime(t) == TYPE_TO_MIME[t.value]


@pytest.mark.parametrize("value", ["", "pdf", "Document", "text/plain", "application/msword", None, 3])
def test_unknown_values_return_empty_sentinel(value):
    assert classify_mime_to_type(value) == ""
    assert classify_type_to_mime(value) == ""


# ---------------------------------------------------------------------------
# Supported extensions
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("name", ["a.docx", "b.xlsx", "c.pptx", "REPORT.DOCX", "x.tar.PpTx", "dir/new.xlsx", ".docx"])
def test_supported_extensions(name):
    assert is_supported_extension(name) is True


@pytest.mark.parametrize("name", ["a.doc", "b.xls", "c.ppt", "d.odt", "notes.txt", "docx.pdf", "noext", "", "docx", "xlsx", "dir.docx/pptx", "a.docx."])
def test_unsupported_extensions(name):
    assert is_supported_extension(name) is False
