"""LLM processors for script generation."""

from .prompts import create_podcast_prompt, format_articles_for_summary
from .script_generator import ScriptConfig, ScriptGenerator

__all__ = [
    "ScriptConfig",
    "ScriptGenerator",
    "create_podcast_prompt",
    "format_articles_for_summary",
]
