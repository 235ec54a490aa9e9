"""FastAPI endpoints for the Ledger AI service.

This module defines the routes that trigger classification and legacy-notes migration runs as
background jobs, plus a health check. Runs are not tracked in a database: each job logs its
outcome, and the ledger notes themselves record what was classified.
"""

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

from ledger_ai.api.dependencies import get_actual_ai
from ledger_ai.core.utils import get_logger
from ledger_ai.services.actual_ai import ActualAiService
from ledger_ai.workers.job_runner import new_job_id, run_job

router = APIRouter()
logger = get_logger("ledger-ai.api")

JOB_ACCEPTED_RESPONSES = {
    202: {
        "description": "Job accepted. Returns job_id.",
        "content": {"application/json": {"example": {"job_id": "123e4567-e89b-12d3-a456-426614174000"}}},
    },
    500: {"description": "Internal server error."},
}


@router.post(
    "/classify",
    status_code=202,
    summary="Start a categorization run",
    description=(
        "Start a background job that downloads the budget, migrates legacy notes, optionally runs a bank sync "
        "and asks the LLM to categorize uncategorized transactions. "
        "At most `MAX_CLASSIFICATIONS_PER_RUN` transactions are categorized per job; call again to continue.\n\n"
        "**Response:**\n"
        "- 202 Accepted: `{ 'job_id': '<uuid>' }`."
    ),
    response_description="Job accepted. Returns job_id.",
    responses=JOB_ACCEPTED_RESPONSES,
)
async def classify(
    background_tasks: BackgroundTasks,
    service: ActualAiService = Depends(get_actual_ai),
) -> JSONResponse:
    """Start a classification job."""
    job_id = new_job_id()
    background_tasks.add_task(run_job, job_id, "classify", service)
    logger.info(f"Background job started: job_id={job_id}, action=classify")
    return JSONResponse({"job_id": job_id}, status_code=202)


@router.post(
    "/migrate",
    status_code=202,
    summary="Migrate legacy notes to tags",
    description=(
        "Start a background job that rewrites notes still carrying the legacy "
        "'actual-ai guessed this category' style phrases into the configured tags.\n\n"
        "**Response:**\n"
        "- 202 Accepted: `{ 'job_id': '<uuid>' }`."
    ),
    response_description="Job accepted. Returns job_id.",
    responses=JOB_ACCEPTED_RESPONSES,
)
async def migrate(
    background_tasks: BackgroundTasks,
    service: ActualAiService = Depends(get_actual_ai),
) -> JSONResponse:
    """Start a migration job."""
    job_id = new_job_id()
    background_tasks.add_task(run_job, job_id, "migrate", service)
    logger.info(f"Background job started: job_id={job_id}, action=migrate")
    return JSONResponse({"job_id": job_id}, status_code=202)


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
