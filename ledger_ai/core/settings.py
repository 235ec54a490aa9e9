"""Configuration and environment settings for Ledger AI."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledger_ai.core.tags import TagSet
from ledger_ai.prompting.templates import DEFAULT_MANUAL_PROMPT_TEMPLATE, DEFAULT_PROMPT_TEMPLATE


class Settings(BaseSettings):
    """Application settings for Ledger AI."""

    # Actual Budget server
    actual_server_url: str = "http://localhost:5006"
    actual_password: str = ""
    actual_budget_id: str = ""
    actual_e2e_password: str | None = None
    actual_data_dir: str = "data"

    # LLM provider
    llm_provider: str = "groq"
    groq_api_key: str = ""
    groq_model: str = "llama-3.3-70b-versatile"
    groq_temperature: float = 0.1
    groq_max_completion_tokens: int = 1024
    groq_top_p: float = 0.95
    groq_stream: bool = True
    groq_stop: list[str] | None = None
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "qwen2.5:3b"
    ollama_timeout: float = 60.0

    # Classification
    guessed_tag: str = "#actual-ai"
    not_guessed_tag: str = "#actual-ai-miss"
    override_tag: str = "#actual-ai-override"
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE
    manual_prompt_template: str = DEFAULT_MANUAL_PROMPT_TEMPLATE
    max_classifications_per_run: int = Field(default=1, ge=1)
    dry_run: bool = False
    sync_accounts_before_classify: bool = False
    classify_on_startup: bool = False

    log_file: str = "logs/ledger_ai.log"
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @model_validator(mode="after")
    def check_tags(self) -> "Settings":
        """Tags must be non-empty single tokens and distinct from each other."""
        tags = [self.guessed_tag, self.not_guessed_tag, self.override_tag]
        for tag in tags:
            if not tag or any(ch.isspace() for ch in tag):
                msg = f"Tag {tag!r} must be a non-empty string without whitespace"
                raise ValueError(msg)
        if len(set(tags)) != len(tags):
            msg = f"Tags must be distinct, got {tags}"
            raise ValueError(msg)
        return self

    @property
    def tags(self) -> TagSet:
        """Return the configured markers as a TagSet."""
        return TagSet(guessed=self.guessed_tag, not_guessed=self.not_guessed_tag, override=self.override_tag)


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
