"""
Main pipeline orchestrator for the news-to-podcast workflow.

Architecture:
    NewsAPI top headlines → LLM script generation → ElevenLabs TTS → Audio File

Each step is a single blocking API call; the first failure ends the run.
"""

from typing import Optional
import structlog

from ..config import Settings
from ..errors import ConfigurationError, StageError
from ..news import Article, NewsFetcher, NewsFetcherConfig
from ..processors import ScriptConfig, ScriptGenerator
from ..storage import OutputStore
from ..tts import ElevenLabsConfig, ElevenLabsTTS, TTSProvider
from .results import PipelineOutcome, RunFailure, RunResult
from .stages import Stage, run_stages

logger = structlog.get_logger()


class PodcastPipeline:
    """
    Orchestrator for the news-to-podcast pipeline.

    Usage:
        pipeline = PodcastPipeline(Settings())
        outcome = await pipeline.run()
        if outcome.success:
            print(outcome.audio_file)

    Collaborators can be passed in directly; any left out are built from
    the settings once the credentials have been validated.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        news_fetcher: Optional[NewsFetcher] = None,
        script_generator: Optional[ScriptGenerator] = None,
        tts: Optional[TTSProvider] = None,
        store: Optional[OutputStore] = None,
    ):
        self.settings = settings
        self.store = store or OutputStore(settings.storage.output_dir)

        self._news_fetcher = news_fetcher
        self._script_generator = script_generator
        self._tts = tts

    async def run(self) -> PipelineOutcome:
        """
        Generate one podcast episode.

        1. Validates credentials
        2. Fetches top headlines
        3. Generates a podcast script
        4. Converts the script to audio

        Returns a ``RunResult`` on success, otherwise a ``RunFailure``
        describing the missing configuration or the stage that failed.
        """
        logger.info("Starting podcast generation...")

        try:
            self.settings.require_credentials()
        except ConfigurationError as e:
            logger.error("Missing required environment variables", missing=e.missing)
            return RunFailure.from_configuration_error(e)

        logger.info("Environment variables validated")

        try:
            outputs = await run_stages(self._build_stages())
        except StageError as e:
            logger.debug("Podcast generation stopped", stage=e.stage, reason=e.detail)
            return RunFailure.from_stage_error(e)

        articles: list[Article] = outputs["fetch"]
        script: str = outputs["script"]
        audio_file = outputs["audio"]

        result = RunResult(
            articles_count=len(articles),
            script=script,
            script_length=len(script),
            audio_file=audio_file,
        )
        logger.info(
            "Podcast generation complete",
            articles=result.articles_count,
            script_length=result.script_length,
            audio_file=str(result.audio_file),
        )
        return result

    def _build_stages(self) -> list[Stage]:
        news_fetcher = self._get_news_fetcher()
        script_generator = self._get_script_generator()
        tts = self._get_tts_provider()

        return [
            Stage(
                name="fetch",
                run=lambda _: news_fetcher.fetch_top_headlines(),
                failure_message="Failed to fetch news articles",
                empty_message="No articles fetched",
                description="Fetching trending news from NewsAPI",
            ),
            Stage(
                name="script",
                run=script_generator.generate_script,
                failure_message="Failed to generate podcast script",
                empty_message="No script generated",
                description="Generating podcast script with OpenAI",
            ),
            Stage(
                name="audio",
                run=tts.generate_audio,
                failure_message="Failed to generate audio",
                empty_message="No audio file generated",
                description="Converting text to speech with ElevenLabs",
            ),
        ]

    def _get_news_fetcher(self) -> NewsFetcher:
        if self._news_fetcher is None:
            news = self.settings.news
            self._news_fetcher = NewsFetcher(
                NewsFetcherConfig(
                    api_key=news.key.get_secret_value(),
                    base_url=news.base_url,
                    country=news.country,
                    category=news.category,
                    page_size=news.page_size,
                    timeout_seconds=news.timeout_seconds,
                )
            )
        return self._news_fetcher

    def _get_script_generator(self) -> ScriptGenerator:
        if self._script_generator is None:
            llm = self.settings.llm
            self._script_generator = ScriptGenerator(
                ScriptConfig(
                    api_key=llm.api_key.get_secret_value(),
                    base_url=llm.base_url,
                    model=llm.model,
                    temperature=llm.temperature,
                    max_tokens=llm.max_tokens,
                    script_filename=self.settings.storage.script_filename,
                ),
                self.store,
            )
        return self._script_generator

    def _get_tts_provider(self) -> TTSProvider:
        if self._tts is None:
            tts = self.settings.tts
            self._tts = ElevenLabsTTS(
                ElevenLabsConfig(
                    api_key=tts.api_key.get_secret_value(),
                    voice_id=tts.voice_id,
                    model=tts.model,
                    stability=tts.stability,
                    similarity_boost=tts.similarity_boost,
                    file_prefix=self.settings.storage.audio_prefix,
                ),
                self.store,
            )
        return self._tts
