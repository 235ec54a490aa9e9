"""Main entrypoint and application factory for the Ledger AI API.

This module initializes the FastAPI application, configures logging, optionally runs a
classification pass on startup, and exposes the Scalar API reference endpoint for interactive
OpenAPI documentation. It also includes the main entrypoint for running the app with Uvicorn.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from scalar_fastapi import get_scalar_api_reference

from ledger_ai.api.dependencies import build_actual_ai
from ledger_ai.api.routes import router
from ledger_ai.core.settings import get_settings
from ledger_ai.core.utils import LOGGER_NAME, get_logger
from ledger_ai.workers.job_runner import new_job_id, run_job


# --- Logging Setup ---
def setup_logging(log_file: str) -> None:
    """Configure logging to file and console, and ensure the log directory exists."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logger = get_logger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    # Add file handler for persistent logs (not colorized)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)
    logger.propagate = False


setup_logging(get_settings().log_file)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan event handler that runs one classification when ``classify_on_startup`` is set."""
    _ = app  # Silence unused argument warning
    settings = get_settings()
    if settings.classify_on_startup:
        await asyncio.to_thread(run_job, new_job_id(), "classify", build_actual_ai(settings))
    yield


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Ledger AI API",
    description="""
    The Ledger AI API categorizes Actual Budget transactions with an LLM and records the outcome as tags in the transaction notes.

    **Endpoints:**
    - `POST /classify`: Start a categorization run. Returns a `job_id`.
    - `POST /migrate`: Convert legacy notes markers to tags. Returns a `job_id`.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.include_router(router)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> JSONResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port, reload=True)
