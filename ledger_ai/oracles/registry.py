"""Oracle registry mapping provider names to oracle classes."""

from typing import ClassVar

from ledger_ai.oracles.base import Oracle


class OracleRegistry:
    """Registry for oracle classes."""

    _registry: ClassVar[dict[str, type[Oracle]]] = {}

    @classmethod
    def register(cls, name: str, oracle_cls: type[Oracle]) -> None:
        """Register an oracle class with a given provider name."""
        cls._registry[name] = oracle_cls

    @classmethod
    def get(cls, name: str) -> type[Oracle]:
        """Retrieve an oracle class by provider name."""
        try:
            return cls._registry[name]
        except KeyError:
            msg = f"Unknown LLM provider '{name}'. Available: {cls.available()}"
            raise ValueError(msg) from None

    @classmethod
    def available(cls) -> list[str]:
        """List all registered provider names."""
        return list(cls._registry.keys())
