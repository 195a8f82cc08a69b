"""Liveness probe, kept on its own router apart from the expense routes."""
import logging
from fastapi import APIRouter, Request, status

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, summary="Liveness Probe")
async def health_check(request: Request):
    """Returns 200 while the process is up."""
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }
