import logging
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, detail) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(app: FastAPI):
    """
    Map template-route failures onto JSON error bodies:
    - HTTPException: the route's own {"code": ...} detail, unchanged
    - RequestValidationError: 422 with the offending query/path parameters
    - FileNotFoundError: 404 NOT_FOUND, a blank template absent from ASSETS_ROOT
      or a storage folder that vanished
    - anything else: 500 INTERNAL_ERROR, typically the storage backend failing
    """
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.info(f"Template request rejected: {request.method} {request.url.path} -> {exc.status_code} {exc.detail}")
        return _error(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid template request: {request.method} {request.url.path} - {exc.errors()}")
        return _error(422, exc.errors())

    @app.exception_handler(FileNotFoundError)
    async def missing_file_handler(request: Request, exc: FileNotFoundError):
        logger.warning(f"Template file missing: {request.method} {request.url.path} - {exc}")
        return _error(404, {"code": "NOT_FOUND"})

    @app.exception_handler(Exception)
    async def storage_failure_handler(request: Request, exc: Exception):
        logger.error(f"Template request failed: {request.method} {request.url.path} - {exc}", exc_info=True)
        return _error(500, {"code": "INTERNAL_ERROR", "message": str(exc)})
