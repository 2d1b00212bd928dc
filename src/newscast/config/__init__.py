"""Configuration for the news-to-podcast pipeline."""

from .settings import (
    DEFAULT_VOICE_ID,
    LLMSettings,
    NewsSettings,
    Settings,
    StorageSettings,
    TTSSettings,
)

__all__ = [
    "DEFAULT_VOICE_ID",
    "LLMSettings",
    "NewsSettings",
    "Settings",
    "StorageSettings",
    "TTSSettings",
]
