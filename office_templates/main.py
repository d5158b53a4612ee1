# office_templates/main.py
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from .api import templates as templates_api
from .config import settings
from .middleware.error_handlers import register_error_handlers
from .storage.base import Folder
from .storage.local_fs import LocalFolder
from .utils.logging import info, setup_logging

setup_logging(settings.LOG_LEVEL)


def create_app(storage: Optional[Folder] = None) -> FastAPI:
    """Build the app; without `storage` the lifespan mounts DATA_ROOT/appdata_<INSTANCE_ID>."""

    @asynccontextmanager
    async def custom_lifespan(app: FastAPI):
        info("custom_lifespan: Startup")
        if storage is not None:
            app.state.storage = storage
        else:
            root = LocalFolder(settings.DATA_ROOT).create_folder(f"appdata_{settings.INSTANCE_ID}")
            info(f"Template storage at {root.path}")
            pruned = root.index.prune()
            if pruned:
                info(f"Dropped {pruned} stale file index entries")
            app.state.storage = root

        yield

        info("custom_lifespan: Shutdown")

    app = FastAPI(title="Office Template Server", lifespan=custom_lifespan)
    register_error_handlers(app)
    app.include_router(templates_api.router)
    return app


app = create_app()
