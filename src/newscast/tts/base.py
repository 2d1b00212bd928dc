"""Base TTS provider interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
from pydantic import BaseModel

from ..storage import OutputStore


class TTSConfig(BaseModel):
    """Base configuration for TTS providers."""

    output_format: str = "mp3"
    file_prefix: str = "podcast"


class TTSProvider(ABC):
    """Abstract base class for TTS providers."""

    def __init__(self, config: TTSConfig, store: OutputStore):
        self.config = config
        self.store = store

    @abstractmethod
    async def generate_audio(
        self,
        script: str,
        output_name: Optional[str] = None,
    ) -> Path:
        """
        Generate audio from a single-narrator script.

        Args:
            script: Text to speak
            output_name: Optional file name inside the output directory;
                defaults to a timestamped name

        Returns:
            Path to the generated audio file
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    def _default_output_name(self) -> str:
        return self.store.timestamped_name(self.config.file_prefix, self.config.output_format)
