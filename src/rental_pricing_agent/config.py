"""
Runtime settings, read once from the environment.

The CLI loads a .env file first (python-dotenv), so values there are
visible here. Library callers get whatever the process environment holds
on the first get_settings() call; reset_settings() forces a re-read.

Environment Variables:
    OPENAI_API_KEY: Key for the pricing agent's OpenAI client (required for analyze)
    AGENT_MODEL: Chat model for the pricing agent (default: gpt-4o-mini)
    PHOENIX_ENABLED: Enable Phoenix tracing (default: false)
    PHOENIX_PROJECT_NAME: Project name in Phoenix UI (default: rental-pricing-agent)
    PHOENIX_COLLECTOR_ENDPOINT: Remote OTLP endpoint (local Phoenix if empty)
    PHOENIX_CAPTURE_LLM_CONTENT: Put prompts/responses on spans (default: false)

PRIVACY WARNING:
    PHOENIX_CAPTURE_LLM_CONTENT=true exports raw prompts and responses,
    including owner-supplied property values, to Phoenix/OTLP endpoints.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_MODEL = "gpt-4o-mini"
PROJECT_NAME = "rental-pricing-agent"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class AgentSettings:
    """OpenAI client settings for the pricing agent."""

    openai_api_key: str | None = field(default=None, repr=False)
    model: str = DEFAULT_MODEL

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "AgentSettings":
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            model=os.environ.get("AGENT_MODEL") or DEFAULT_MODEL,
        )


@dataclass(frozen=True)
class PhoenixConfig:
    """Tracing settings; tracing is off unless explicitly enabled."""

    enabled: bool = False
    project_name: str = PROJECT_NAME
    collector_endpoint: str | None = None
    capture_llm_content: bool = False

    @classmethod
    def from_env(cls) -> "PhoenixConfig":
        return cls(
            enabled=_env_flag("PHOENIX_ENABLED"),
            project_name=os.environ.get("PHOENIX_PROJECT_NAME") or PROJECT_NAME,
            collector_endpoint=os.environ.get("PHOENIX_COLLECTOR_ENDPOINT") or None,
            capture_llm_content=_env_flag("PHOENIX_CAPTURE_LLM_CONTENT"),
        )


@dataclass(frozen=True)
class Settings:
    agent: AgentSettings
    phoenix: PhoenixConfig

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(agent=AgentSettings.from_env(), phoenix=PhoenixConfig.from_env())


_settings: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings (lazy-loaded from env)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
