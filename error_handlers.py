"""Global exception handlers: keep framework-raised HTTP errors in the API's JSON shapes."""
import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def method_not_allowed(method: str, allow: str) -> JSONResponse:
    """405 response naming the rejected method."""
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"message": f"Method {method} Not Allowed"},
        headers={"Allow": allow},
    )


def register_error_handlers(app: FastAPI, allowed_methods: Optional[Dict[str, str]] = None) -> None:
    """
    Register all global error handlers on the FastAPI app.

    `allowed_methods` maps a path to the Allow header its 405 responses carry;
    other paths keep the header Starlette computed.
    """
    allowed_methods = dict(allowed_methods or {})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            logger.warning(f"{request.method} {request.url.path} rejected: method not allowed")
            allow = allowed_methods.get(request.url.path)
            if allow is None:
                allow = (exc.headers or {}).get("Allow", "")
            return method_not_allowed(request.method, allow)
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )
