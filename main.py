"""
main.py
-------
Entry point for the Employment API.

Responsibilities:
    - Open the database connection pool and verify it on startup.
    - Build the FastAPI application with all routers.
    - Map data access failures to server-error responses.
    - Serve the application with uvicorn.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import API_HOST, API_KEEP_ALIVE_SECONDS, API_PORT
from db.connection import Database
from handlers import user_handler
from repositories.errors import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)


async def data_access_error_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    """Fail the whole request; never hand back a partial listing."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Database request failed"})


def create_app(db: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        db: Pool to serve from. A new one is built from config when omitted.
    """
    database = db if db is not None else Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── 1. Database setup ─────────────────────────────────
        logger.info("Opening database pool...")
        database.open()
        try:
            database.ping()
            app.state.db = database
            yield
        finally:
            # ── 2. Cleanup on shutdown or failed startup ──────────
            database.close()
            logger.info("Employment API stopped.")

    app = FastAPI(
        title="Employment API",
        version="1.0.0",
        description="Lists users together with their employment records",
        lifespan=lifespan,
    )
    app.include_router(user_handler.router)
    app.add_exception_handler(DataAccessError, data_access_error_handler)
    return app


app = create_app()


def main() -> None:
    """Serve the application."""
    logger.info(f"Employment API listening on {API_HOST}:{API_PORT}")
    uvicorn.run(
        app,
        host=API_HOST,
        port=API_PORT,
        timeout_keep_alive=API_KEEP_ALIVE_SECONDS,
    )


if __name__ == "__main__":
    main()
