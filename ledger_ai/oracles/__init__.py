"""Oracles package: LLM providers that guess a category id for a prompt."""

from .base import Oracle  # noqa: F401
from .groq_oracle import GroqOracle
from .ollama_oracle import OllamaOracle
from .registry import OracleRegistry

OracleRegistry.register("groq", GroqOracle)
OracleRegistry.register("ollama", OllamaOracle)
