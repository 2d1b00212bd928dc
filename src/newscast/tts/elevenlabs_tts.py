"""
ElevenLabs TTS Provider.

Sends the whole script to one voice and stores the returned MP3 stream.

API reference: https://elevenlabs.io/docs/api-reference/text-to-speech
"""

from pathlib import Path
from typing import Optional
import structlog

from elevenlabs import AsyncElevenLabs, VoiceSettings

from ..config.settings import DEFAULT_VOICE_ID
from ..errors import log_api_error
from ..storage import OutputStore
from .base import TTSProvider, TTSConfig

logger = structlog.get_logger()


class ElevenLabsConfig(TTSConfig):
    """Configuration for ElevenLabs TTS."""

    api_key: str
    voice_id: str = DEFAULT_VOICE_ID
    model: str = "eleven_monolingual_v1"

    # Voice settings
    stability: float = 0.5
    similarity_boost: float = 0.75


class ElevenLabsTTS(TTSProvider):
    """ElevenLabs TTS provider."""

    def __init__(
        self,
        config: ElevenLabsConfig,
        store: OutputStore,
        client: Optional[AsyncElevenLabs] = None,
    ):
        super().__init__(config, store)
        self.config: ElevenLabsConfig = config
        self.client = client or AsyncElevenLabs(api_key=config.api_key)

        self.voice_settings = VoiceSettings(
            stability=config.stability,
            similarity_boost=config.similarity_boost,
        )

    @property
    def name(self) -> str:
        return "ElevenLabs"

    async def generate_audio(
        self,
        script: str,
        output_name: Optional[str] = None,
    ) -> Path:
        """Convert the script to speech and save it to a timestamped file."""
        logger.info(
            "Converting text to speech",
            voice_id=self.config.voice_id,
            characters=len(script),
        )

        try:
            audio_data = await self._synthesize(script)
        except Exception as e:
            log_api_error(e, self.name)
            raise

        if not audio_data:
            raise ValueError("ElevenLabs returned no audio data")

        path = self.store.save_audio(output_name or self._default_output_name(), audio_data)
        logger.info(f"Audio generated: {path.name}")
        return path

    async def _synthesize(self, text: str) -> bytes:
        audio_stream = self.client.text_to_speech.convert(
            voice_id=self.config.voice_id,
            text=text,
            model_id=self.config.model,
            voice_settings=self.voice_settings,
            output_format="mp3_44100_128",
        )

        # Collect all chunks
        audio_bytes = b""
        async for chunk in audio_stream:
            audio_bytes += chunk

        return audio_bytes

    async def list_voices(self) -> list[dict]:
        """List available voices."""
        response = await self.client.voices.get_all()
        return [
            {
                "voice_id": v.voice_id,
                "name": v.name,
                "category": v.category,
                "description": v.description,
            }
            for v in response.voices
        ]
