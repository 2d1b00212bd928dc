"""Shared pytest fixtures for the Newscast test suite."""

from pathlib import Path
from typing import Optional

import pytest

from newscast.config import LLMSettings, NewsSettings, Settings, StorageSettings, TTSSettings
from newscast.news import Article

ENV_VARS = (
    "NEWSAPI_KEY",
    "OPENAI_API_KEY",
    "ELEVENLABS_API_KEY",
    "PODCAST_VOICE_ID",
    "ELEVENLABS_VOICE_ID",
    "STORAGE_OUTPUT_DIR",
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    """Keep real credentials and .env files out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def make_settings(output_dir: Path):
    def _make(
        news_key: Optional[str] = "news-key",
        openai_key: Optional[str] = "openai-key",
        elevenlabs_key: Optional[str] = "elevenlabs-key",
    ) -> Settings:
        return Settings(
            _env_file=None,
            news=NewsSettings(key=news_key),
            llm=LLMSettings(api_key=openai_key),
            tts=TTSSettings(api_key=elevenlabs_key),
            storage=StorageSettings(output_dir=output_dir),
        )

    return _make


@pytest.fixture
def articles() -> list[Article]:
    return [Article(title="A"), Article(title="B")]
