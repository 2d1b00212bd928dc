"""Text-to-Speech providers for podcast audio generation."""

from .base import TTSProvider, TTSConfig
from .elevenlabs_tts import ElevenLabsConfig, ElevenLabsTTS

__all__ = [
    "TTSProvider",
    "TTSConfig",
    "ElevenLabsConfig",
    "ElevenLabsTTS",
]
