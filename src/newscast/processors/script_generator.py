"""
Podcast script generator using LLMs.

Turns a list of headlines into a single spoken-word script through the
OpenAI chat completions API, and keeps a copy of the script on disk.
"""

from typing import Optional
import structlog
from pydantic import BaseModel

from openai import AsyncOpenAI

from ..errors import log_api_error
from ..news.models import Article
from ..storage import OutputStore
from .prompts import create_podcast_prompt, format_articles_for_summary

logger = structlog.get_logger()


class ScriptConfig(BaseModel):
    """Configuration for script generation."""

    api_key: str
    base_url: Optional[str] = None  # Custom OpenAI-compatible endpoint
    model: str = "gpt-3.5-turbo"

    temperature: float = 0.7
    max_tokens: int = 500

    script_filename: str = "podcast-script.txt"


class ScriptGenerator:
    """Generates podcast scripts from news articles."""

    def __init__(
        self,
        config: ScriptConfig,
        store: OutputStore,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.config = config
        self.store = store
        self.client = client or AsyncOpenAI(api_key=config.api_key, base_url=config.base_url)

    @property
    def name(self) -> str:
        return "OpenAI"

    async def generate_script(self, articles: list[Article]) -> str:
        """
        Generate a podcast script from articles.

        The script is also written to ``script_filename`` in the output
        directory. Returns the stripped script text, which may be empty if
        the model produced nothing.
        """
        prompt = create_podcast_prompt(format_articles_for_summary(articles))

        try:
            script = await self._call_llm(prompt)
        except Exception as e:
            log_api_error(e, self.name)
            raise

        logger.info("Podcast script generated", script_length=len(script))

        if script:
            self.store.save_text(self.config.script_filename, script)

        return script

    async def _call_llm(self, prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.config.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()
