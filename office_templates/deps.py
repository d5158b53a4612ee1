# office_templates/deps.py
from typing import Optional
from fastapi import Query, Request
from .config import settings
from .storage.base import Folder

def get_storage(request: Request) -> Folder:
    return request.app.state.storage  # Injected by main.py during startup

def get_current_locale(locale: Optional[str] = Query(default=None, description="Host locale code, e.g. en_GB")) -> str:
    return locale or settings.DEFAULT_LOCALE
