"""Prompt construction for podcast script generation."""

from ..news.models import Article


PODCAST_PROMPT = """You are the host of a short daily tech news podcast.

Write a spoken-word script covering today's top headlines below.

TODAY'S HEADLINES:
{news}

SCRIPT REQUIREMENTS:
1. Open with a friendly one-line welcome
2. Cover each story in two or three short, conversational sentences
3. Use smooth transitions between stories
4. Close with a brief sign-off
5. Write plain text for text-to-speech: no headings, bullet points, stage directions or emojis
6. Keep it under 300 words

Write the script:"""


def format_articles_for_summary(articles: list[Article]) -> str:
    """Render articles as a numbered list of titles with their summaries."""
    lines = []
    for i, article in enumerate(articles, 1):
        line = f"{i}. {article.title}"
        if article.source_name:
            line += f" ({article.source_name})"
        lines.append(line)
        if article.description:
            lines.append(f"   {article.description.strip()}")
    return "\n".join(lines)


def create_podcast_prompt(formatted_news: str) -> str:
    return PODCAST_PROMPT.format(news=formatted_news)
