"""OllamaOracle: asks a self-hosted Ollama model for a category id."""

import httpx

from ledger_ai.core.exceptions import OracleError
from ledger_ai.core.settings import Settings
from ledger_ai.core.utils import get_logger
from ledger_ai.oracles.base import Oracle
from ledger_ai.oracles.prompts import CANDIDATES_TEMPLATE, SYSTEM_PROMPT

logger = get_logger("ledger-ai.oracle.ollama")


class OllamaOracle(Oracle):
    """Oracle backed by the Ollama ``/api/generate`` endpoint."""

    def __init__(self, model: str, base_url: str = "http://localhost:11434", timeout: float = 60.0) -> None:
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "OllamaOracle":
        """Create the oracle from the ``ollama_*`` settings."""
        return cls(settings.ollama_model, settings.ollama_base_url, settings.ollama_timeout)

    def ask(self, prompt: str, candidate_ids: list[str]) -> str:
        """Send a non-streaming generate request and return the response text."""
        payload = {
            "model": self.model,
            "system": SYSTEM_PROMPT,
            "prompt": f"{prompt}\n\n{CANDIDATES_TEMPLATE.format(candidates=', '.join(candidate_ids))}",
            "stream": False,
            "options": {"temperature": 0.1},
        }
        try:
            response = httpx.post(f"{self.base_url}/api/generate", json=payload, timeout=self.timeout)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            msg = f"Ollama request timed out after {self.timeout:.1f}s"
            logger.exception(msg)
            raise OracleError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Ollama API call failed: {exc}"
            logger.exception(msg)
            raise OracleError(msg) from exc
        try:
            answer = response.json().get("response") or ""
        except (ValueError, AttributeError) as exc:
            msg = f"Ollama returned an unexpected body: {response.text[:200]}"
            logger.exception(msg)
            raise OracleError(msg) from exc
        logger.debug(f"OUTPUT: {answer}")
        return answer.strip()
