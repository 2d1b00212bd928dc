"""
Configuration settings for Newscast - News to Podcast pipeline.
Uses pydantic-settings for environment variable management.
"""
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError

# ElevenLabs "Rachel"
DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"

# Every group reads .env itself; nested groups are built by default_factory
DOTENV = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class NewsSettings(BaseSettings):
    """NewsAPI headline query configuration."""

    model_config = SettingsConfigDict(env_prefix="NEWSAPI_", **DOTENV)

    key: SecretStr | None = Field(default=None, description="NewsAPI key (NEWSAPI_KEY)")

    # Query parameters for /top-headlines
    country: str = Field(default="us")
    category: str = Field(default="technology")
    page_size: int = Field(default=5, ge=1, le=100)

    base_url: str = Field(default="https://newsapi.org/v2")
    timeout_seconds: float = Field(default=30.0, gt=0)


class LLMSettings(BaseSettings):
    """LLM API configuration for script generation."""

    model_config = SettingsConfigDict(env_prefix="OPENAI_", **DOTENV)

    api_key: SecretStr | None = Field(default=None)
    base_url: str | None = Field(default=None)

    model: str = Field(default="gpt-3.5-turbo")

    # Generation parameters
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=500, ge=1)


class TTSSettings(BaseSettings):
    """Text-to-Speech configuration."""

    model_config = SettingsConfigDict(env_prefix="ELEVENLABS_", populate_by_name=True, **DOTENV)

    api_key: SecretStr | None = Field(default=None)

    # Voice configuration
    voice_id: str = Field(
        default=DEFAULT_VOICE_ID,
        validation_alias=AliasChoices("PODCAST_VOICE_ID", "ELEVENLABS_VOICE_ID", "voice_id"),
        description="ElevenLabs voice ID override",
    )
    model: str = Field(default="eleven_monolingual_v1")

    # Voice settings
    stability: float = Field(default=0.5, ge=0.0, le=1.0)
    similarity_boost: float = Field(default=0.75, ge=0.0, le=1.0)


class StorageSettings(BaseSettings):
    """Output file configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_", **DOTENV)

    output_dir: Path = Field(default=Path("output"))
    script_filename: str = Field(default="podcast-script.txt")
    audio_prefix: str = Field(default="podcast")


class Settings(BaseSettings):
    """Main configuration aggregating all settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sub-configurations
    news: NewsSettings = Field(default_factory=NewsSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    tts: TTSSettings = Field(default_factory=TTSSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    # Application settings
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    def credentials(self) -> dict[str, SecretStr | None]:
        """Required credentials keyed by environment variable name."""
        return {
            "NEWSAPI_KEY": self.news.key,
            "OPENAI_API_KEY": self.llm.api_key,
            "ELEVENLABS_API_KEY": self.tts.api_key,
        }

    def missing_credentials(self) -> list[str]:
        """Names of required credentials that are unset or blank."""
        return [
            name
            for name, secret in self.credentials().items()
            if secret is None or not secret.get_secret_value().strip()
        ]

    def require_credentials(self) -> None:
        missing = self.missing_credentials()
        if missing:
            raise ConfigurationError(missing)
