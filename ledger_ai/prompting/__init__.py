"""Prompting package: template engines, default templates and the prompt generator."""

from .engine import Jinja2TemplateEngine, TemplateEngine  # noqa: F401
from .prompt_generator import PromptGenerator  # noqa: F401
