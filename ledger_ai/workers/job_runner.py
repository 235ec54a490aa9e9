"""Background job orchestration for classification and migration runs."""

import threading
import uuid

from ledger_ai.core.utils import get_logger, utcnow_iso
from ledger_ai.services.actual_ai import ActualAiService

logger = get_logger("ledger-ai.worker")

ACTIONS = ("classify", "migrate")

# Runs share the budget data directory and the process-wide log suppression, so only one runs at a time.
_run_lock = threading.Lock()


def new_job_id() -> str:
    """Return a fresh job identifier."""
    return str(uuid.uuid4())


def run_job(job_id: str, action: str, service: ActualAiService) -> None:
    """Run one classification or migration job and log its outcome.

    Jobs run as FastAPI background tasks, after the response is sent, so failures are logged with
    their traceback rather than raised to a caller. Jobs are serialized: a job submitted while
    another one runs waits for it to finish.
    """
    if action not in ACTIONS:
        msg = f"Unknown job action '{action}', expected one of {ACTIONS}"
        raise ValueError(msg)
    if _run_lock.locked():
        logger.info(f"Job {job_id} is waiting for the active run to finish")
    with _run_lock:
        logger.info(f"Starting job: {job_id}, action: {action}, started_at: {utcnow_iso()}")
        try:
            result = service.classify().model_dump() if action == "classify" else {"migrated": service.migrate()}
        except Exception:
            logger.exception(f"Error processing job {job_id}")
            return
    logger.info(f"Job {job_id} completed at {utcnow_iso()}: {result}")
