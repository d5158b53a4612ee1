from pydantic import BaseModel, ConfigDict
from typing import List, Union

class TemplateDescriptor(BaseModel):
    """
    One global template as returned by a listing call.
    `type` is a TemplateType value, or "" when the mimetype is not a template type.
    """
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    name: str
    type: str = ""

class TemplateListResponse(BaseModel):
    templates: List[TemplateDescriptor]
