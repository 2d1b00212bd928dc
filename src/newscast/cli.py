"""
Command-line interface for Newscast.

Usage:
    newscast generate    # Fetch news, write a script and synthesize audio
    newscast check       # Verify required API keys are configured
    newscast voices      # List available ElevenLabs voices
    newscast init        # Create output folder and .env.example
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config import Settings
from .pipeline import PodcastPipeline, RunFailure, RunResult

app = typer.Typer(
    name="newscast",
    help="Automated News to Podcast Pipeline",
    add_completion=False,
)
console = Console()

ENV_EXAMPLE = """# Newscast Configuration
# Copy to .env and fill in your values

# Required API keys
NEWSAPI_KEY=
OPENAI_API_KEY=
ELEVENLABS_API_KEY=

# Optional voice override (defaults to Rachel)
# PODCAST_VOICE_ID=21m00Tcm4TlvDq8ikWAM

# Headline query
# NEWSAPI_COUNTRY=us
# NEWSAPI_CATEGORY=technology
# NEWSAPI_PAGE_SIZE=5

# Script generation
# OPENAI_MODEL=gpt-3.5-turbo
# OPENAI_TEMPERATURE=0.7
# OPENAI_MAX_TOKENS=500

# Output
# STORAGE_OUTPUT_DIR=output
"""


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output to the console at the given level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        cache_logger_on_first_use=False,
    )


def load_settings() -> Settings:
    """Load configuration from environment and .env file."""
    from dotenv import load_dotenv

    load_dotenv()
    return Settings()


def print_summary(result: RunResult) -> None:
    console.print("\n[bold green]PODCAST GENERATION COMPLETE![/bold green]")
    console.print(f"[green]✓[/green] News articles fetched: {result.articles_count}")
    console.print(f"[green]✓[/green] Script generated: {result.script_length} characters")
    console.print(f"[green]✓[/green] Audio file created: {result.audio_file}")


def print_failure(failure: RunFailure) -> None:
    console.print("\n[bold red]PODCAST GENERATION FAILED[/bold red]")
    if failure.kind == "configuration":
        console.print("[red]✗[/red] Missing required environment variables:")
        for name in failure.missing:
            console.print(f"   - {name}")
        console.print("\nCopy .env.example to .env and add your API keys")
        return

    console.print(f"[red]✗[/red] {failure.message}")
    if failure.error:
        console.print(f"   Error: {failure.error}")


@app.command()
def generate(
    country: Optional[str] = typer.Option(None, "--country", "-c", help="Headline country code"),
    category: Optional[str] = typer.Option(None, "--category", help="Headline category"),
    page_size: Optional[int] = typer.Option(
        None, "--page-size", "-n", min=1, max=100, help="Number of headlines"
    ),
    voice: Optional[str] = typer.Option(None, "--voice", "-v", help="ElevenLabs voice ID"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output folder"),
):
    """Generate a podcast episode from today's headlines."""
    settings = load_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    if country is not None:
        settings.news.country = country
    if category is not None:
        settings.news.category = category
    if page_size is not None:
        settings.news.page_size = page_size
    if voice is not None:
        settings.tts.voice_id = voice
    if output_dir is not None:
        settings.storage.output_dir = output_dir

    console.print("[bold]AI PODCAST GENERATOR[/bold]\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Generating podcast...", total=None)
        outcome = asyncio.run(PodcastPipeline(settings).run())

    if isinstance(outcome, RunFailure):
        print_failure(outcome)
        raise typer.Exit(code=1)

    print_summary(outcome)


@app.command()
def check():
    """Check that the required API keys are configured."""
    settings = load_settings()
    missing = set(settings.missing_credentials())

    table = Table(title="Newscast Credentials")
    table.add_column("Variable", style="cyan")
    table.add_column("Status")

    for name in settings.credentials():
        status = "[red]missing[/red]" if name in missing else "[green]set[/green]"
        table.add_row(name, status)
    table.add_row("PODCAST_VOICE_ID", settings.tts.voice_id)

    console.print(table)

    if missing:
        raise typer.Exit(code=1)


@app.command()
def voices():
    """List the ElevenLabs voices available to your account."""
    from .storage import OutputStore
    from .tts import ElevenLabsConfig, ElevenLabsTTS

    settings = load_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    if "ELEVENLABS_API_KEY" in settings.missing_credentials():
        console.print("[red]✗[/red] ELEVENLABS_API_KEY is not set")
        raise typer.Exit(code=1)

    tts = ElevenLabsTTS(
        ElevenLabsConfig(api_key=settings.tts.api_key.get_secret_value()),
        OutputStore(settings.storage.output_dir),
    )
    voice_list = asyncio.run(tts.list_voices())

    table = Table(title="ElevenLabs Voices")
    table.add_column("Voice ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Category")

    for v in voice_list:
        marker = " *" if v["voice_id"] == settings.tts.voice_id else ""
        table.add_row(v["voice_id"], f"{v['name']}{marker}", v["category"] or "")

    console.print(table)


@app.command()
def init():
    """Initialize the project with example configuration."""
    settings = Settings(_env_file=None)

    settings.storage.output_dir.mkdir(parents=True, exist_ok=True)
    console.print(f"[green]✓[/green] Created {settings.storage.output_dir}/")

    env_path = Path(".env.example")
    if not env_path.exists():
        env_path.write_text(ENV_EXAMPLE)
        console.print("[green]✓[/green] Created .env.example")
    else:
        console.print("[yellow]![/yellow] .env.example already exists")

    console.print("\n[bold]Setup complete![/bold]")
    console.print("1. Copy .env.example to .env")
    console.print("2. Fill in your API keys")
    console.print("3. Run: newscast generate")


if __name__ == "__main__":
    app()
