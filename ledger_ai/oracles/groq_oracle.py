"""GroqOracle: asks a Groq-hosted chat model for a category id."""

import re

from groq import Groq

from ledger_ai.core.exceptions import OracleError
from ledger_ai.core.settings import Settings
from ledger_ai.core.utils import get_logger
from ledger_ai.oracles.base import Oracle
from ledger_ai.oracles.prompts import CANDIDATES_TEMPLATE, SYSTEM_PROMPT

MAX_PROMPT_LOG_LEN = 300

logger = get_logger("ledger-ai.oracle.groq")

THINK_BLOCK = re.compile(r"<think>.*?</think>", re.DOTALL)


class GroqOracle(Oracle):
    """Oracle backed by the Groq chat completions API."""

    def __init__(self, llm_client: object, settings: Settings) -> None:
        """Initialize the oracle with a Groq client and settings."""
        self.llm_client = llm_client
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "GroqOracle":
        """Create a Groq client from the configured API key."""
        return cls(Groq(api_key=settings.groq_api_key), settings)

    def ask(self, prompt: str, candidate_ids: list[str]) -> str:
        """Send the prompt and return the model's answer with reasoning blocks removed."""
        system_msg = {"role": "system", "content": SYSTEM_PROMPT}
        user_msg = {
            "role": "user",
            "content": f"{prompt}\n\n{CANDIDATES_TEMPLATE.format(candidates=', '.join(candidate_ids))}",
        }
        logger.debug(f"PROMPT: {prompt[:MAX_PROMPT_LOG_LEN]}")
        try:
            completion = self.llm_client.chat.completions.create(
                model=self.settings.groq_model,
                messages=[system_msg, user_msg],
                temperature=self.settings.groq_temperature,
                max_completion_tokens=self.settings.groq_max_completion_tokens,
                top_p=self.settings.groq_top_p,
                stream=self.settings.groq_stream,
                stop=self.settings.groq_stop,
            )
        except Exception as exc:
            msg = f"Groq API call failed: {exc}"
            logger.exception(msg)
            raise OracleError(msg) from exc
        if self.settings.groq_stream:
            raw_output = self._collect_llm_output(completion)
        else:
            raw_output = completion.choices[0].message.content or ""
        answer = THINK_BLOCK.sub("", raw_output).strip()
        logger.debug(f"OUTPUT: {answer}")
        return answer

    def _collect_llm_output(self, completion: object) -> str:
        """Collect the full output from the LLM completion stream."""
        raw_output = ""
        try:
            for chunk in completion:
                text = chunk.choices[0].delta.content or ""
                raw_output += text
        except Exception as exc:
            msg = f"Groq streaming error: {exc}"
            logger.exception(msg)
            raise OracleError(msg) from exc
        return raw_output
