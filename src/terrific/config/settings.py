"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (TERRIFIC_ prefix, plus the bare provider keys)
  2. YAML config file (if specified)
  3. Default values

Provider credentials keep their conventional unprefixed names
(``GUARDIAN_API_KEY``, ``YOUTUBE_API_KEY``, ``NEWSAPI_KEY``/``NEWS_API_KEY``)
so existing ``.env`` files keep working.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_FILE = "terrific-config.yaml"


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(
        default_factory=lambda: int(os.environ.get("PORT", "4000")),
        description="Server port (falls back to the PORT env var, then 4000)",
    )
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class UpstreamSettings(BaseModel):
    """Settings shared by every outbound provider call."""

    timeout: float | None = Field(
        default=None,
        description="Upstream request timeout in seconds (None = wait indefinitely)",
    )


class GuardianSettings(BaseModel):
    """Guardian Content API (wars, explainers, article detail)."""

    base_url: str = Field(default="https://content.guardianapis.com", description="Content API base URL")


class RedditSettings(BaseModel):
    """Reddit JSON listing API (memes)."""

    base_url: str = Field(default="https://old.reddit.com", description="Listing API origin")
    web_origin: str = Field(default="https://reddit.com", description="Origin prefixed to relative permalinks")
    subreddits: list[str] = Field(
        default=["PoliticalHumor", "NonCredibleDefense"],
        description="Subreddits combined into one listing",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) TheTerrific/1.0",
        description="Client identity sent on every request; Reddit blocks library defaults",
    )


class NewsWireSettings(BaseModel):
    """NewsAPI ``/everything`` endpoint (sports)."""

    base_url: str = Field(default="https://newsapi.org/v2", description="NewsAPI base URL")
    key_chain: list[str] = Field(
        default=["NEWSAPI_KEY", "NEWS_API_KEY"],
        description="Credential names tried in order; the first configured one wins",
    )
    language: str = Field(default="en", description="Article language filter")
    degrade_on_error: bool = Field(
        default=True,
        description="Answer failures with 200 and an empty list instead of an error envelope",
    )


class YouTubeSettings(BaseModel):
    """YouTube Data API v3 search."""

    base_url: str = Field(default="https://www.googleapis.com/youtube/v3", description="Data API base URL")
    default_query: str = Field(
        default="information warfare geopolitics propaganda media manipulation",
        description="Query used when the caller sends none",
    )


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class CredentialSettings(BaseSettings):
    """Provider credentials, read from the bare environment variable names."""

    model_config = {
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    guardian_api_key: str = Field(default="", description="Guardian Content API key")
    youtube_api_key: str = Field(default="", description="YouTube Data API key")
    newsapi_key: str = Field(default="", description="NewsAPI key (primary name)")
    news_api_key: str = Field(default="", description="NewsAPI key (alias name)")

    def resolve(self, *names: str) -> str | None:
        """Return the first non-empty credential among *names*, in order.

        Names are matched case-insensitively against the field names, so
        ``"NEWSAPI_KEY"`` and ``"newsapi_key"`` are equivalent. Unknown
        names are skipped.
        """
        for name in names:
            value = getattr(self, name.lower(), None)
            if value:
                return value
        return None


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the TERRIFIC_ prefix.
    Nested settings use double underscores: TERRIFIC_SERVER__PORT=9090

    Example:
        TERRIFIC_SERVER__PORT=9090
        TERRIFIC_UPSTREAM__TIMEOUT=10
        TERRIFIC_NEWSWIRE__DEGRADE_ON_ERROR=false
    """

    model_config = {
        "env_prefix": "TERRIFIC_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    app_name: str = Field(default="Terrific", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    server: ServerSettings = Field(default_factory=ServerSettings)
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)
    guardian: GuardianSettings = Field(default_factory=GuardianSettings)
    reddit: RedditSettings = Field(default_factory=RedditSettings)
    newswire: NewsWireSettings = Field(default_factory=NewsWireSettings)
    youtube: YouTubeSettings = Field(default_factory=YouTubeSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    credentials: CredentialSettings = Field(default_factory=CredentialSettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values present in the YAML file override the environment; anything the
        file leaves out is still read from the environment.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)


def load_settings(path: str | Path | None = None) -> Settings:
    """Build the process-wide settings once at startup.

    Uses *path* when given, else ``TERRIFIC_CONFIG`` if set, else
    ``terrific-config.yaml`` in the working directory if present, else the
    environment alone.
    """
    candidate = path or os.environ.get("TERRIFIC_CONFIG")
    if candidate:
        return Settings.from_yaml(candidate)
    default_path = Path(DEFAULT_CONFIG_FILE)
    if default_path.exists():
        return Settings.from_yaml(default_path)
    return Settings()
