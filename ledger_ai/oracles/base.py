"""Base oracle abstraction for category guessing.

An oracle receives a rendered prompt plus the list of acceptable category ids and answers with
free-form text. Interpreting that text is the caller's job, so implementations never validate
the answer against the candidates.
"""

from abc import ABC, abstractmethod

from ledger_ai.core.settings import Settings


class Oracle(ABC):
    """Abstract base class for all LLM oracles."""

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: Settings) -> "Oracle":
        """Build the oracle from application settings."""

    @abstractmethod
    def ask(self, prompt: str, candidate_ids: list[str]) -> str:
        """Ask the model to pick one of ``candidate_ids`` for the prompt."""
