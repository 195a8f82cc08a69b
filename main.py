"""Main FastAPI application"""
import os
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from dotenv import load_dotenv
from starlette.middleware.base import BaseHTTPMiddleware

from error_handlers import register_error_handlers
from health import router as health_router
from routes import ALLOWED_METHODS, EXPENSES_PATH, router as api_router
from services.expense_store import ExpenseStore
from utils.logging_config import configure_logging

# Load environment variables from a .env file in the current dir or its parents
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_PREFIX = os.getenv("API_PREFIX", "").rstrip("/")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

# Sent on every response, preflight or not
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# --- Middleware for permissive CORS headers ---
class CORSHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.expense_store
    logger.info(f"Expense API starting with {len(store)} expenses (next id {store.next_id}).")
    yield # Application runs here
    logger.info("Expense API shutting down. In-memory expenses are discarded.")

def create_app(store: Optional[ExpenseStore] = None, api_prefix: str = API_PREFIX) -> FastAPI:
    """Builds the application around `store`; a freshly seeded store is used when none is given."""
    app = FastAPI(
        title="Expense API",
        description="Lists and records expenses held in memory.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.expense_store = store if store is not None else ExpenseStore()

    register_error_handlers(app, allowed_methods={api_prefix + EXPENSES_PATH: ALLOWED_METHODS})
    app.add_middleware(CORSHeadersMiddleware)
    app.include_router(api_router, prefix=api_prefix, tags=["expenses"])
    app.include_router(health_router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
    )
