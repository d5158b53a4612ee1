from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from ..deps import get_current_locale, get_storage
from ..models.schemas import TemplateListResponse
from ..models.template_type import TEMPLATE_TYPES
from ..storage.base import Folder
from ..templates.resolver import get_global_template_by_id, get_template_content, list_global_templates
from ..templates.types import EXT_MIME, file_extension, is_supported_extension

router = APIRouter(prefix="/templates", tags=["templates"])

@router.get("", response_model=TemplateListResponse)
def list_templates(
    type: Optional[str] = Query(default=None, description="document | spreadsheet | presentation"),
    storage: Folder = Depends(get_storage),
):
    if type and type not in TEMPLATE_TYPES:
        raise HTTPException(status_code=400, detail={"code": "INVALID_TYPE"})
    return TemplateListResponse(templates=list_global_templates(storage, type))

@router.get("/new/{name}")
def new_template(name: str, locale: str = Depends(get_current_locale)):
    """Blank built-in template for the extension of `name` in the caller's locale."""
    if not is_supported_extension(name):
        raise HTTPException(status_code=400, detail={"code": "UNSUPPORTED_EXTENSION"})
    content = get_template_content(name, locale)
    return Response(content=content, media_type=EXT_MIME[f".{file_extension(name)}"])

@router.get("/{template_id}")
def get_template(template_id: str, storage: Folder = Depends(get_storage)):
    content = get_global_template_by_id(storage, template_id)
    if content is None:
        raise HTTPException(status_code=404, detail={"code": "TEMPLATE_NOT_FOUND"})
    return Response(content=content, media_type="application/octet-stream")
