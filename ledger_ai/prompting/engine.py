"""Template engines used to turn a prompt context into prompt text."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from jinja2 import Environment

Renderer = Callable[[dict[str, Any]], str]


class TemplateEngine(ABC):
    """Compiles template sources into renderers."""

    @abstractmethod
    def compile(self, source: str) -> Renderer:
        """Compile ``source``. May raise on malformed syntax."""


class Jinja2TemplateEngine(TemplateEngine):
    """Jinja2-backed template engine. Output is plain text, so autoescaping stays off."""

    def __init__(self) -> None:
        """Create the Jinja2 environment."""
        self.env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)

    def compile(self, source: str) -> Renderer:
        """Compile ``source`` into a callable taking the context dict."""
        template = self.env.from_string(source)
        return template.render
