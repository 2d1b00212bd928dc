from pathlib import Path

import httpx
import pytest
from structlog.testing import capture_logs

from fakes import (
    FakeChatCompletions,
    FakeNewsFetcher,
    FakeScriptGenerator,
    FakeTextToSpeech,
    FakeTTS,
    fake_elevenlabs_client,
    fake_openai_client,
)
from newscast.news import NewsFetcher, NewsFetcherConfig
from newscast.pipeline import PodcastPipeline, RunFailure, RunResult
from newscast.processors import ScriptConfig, ScriptGenerator
from newscast.storage import OutputStore
from newscast.tts import ElevenLabsConfig, ElevenLabsTTS

pytestmark = pytest.mark.anyio


async def test_successful_run_reports_collaborator_outputs(make_settings, articles, tmp_path: Path) -> None:
    audio = tmp_path / "podcast_20240101_000000.mp3"
    news = FakeNewsFetcher(articles=articles)
    scripts = FakeScriptGenerator(script="Welcome to the show.")
    tts = FakeTTS(path=audio)

    outcome = await PodcastPipeline(
        make_settings(), news_fetcher=news, script_generator=scripts, tts=tts
    ).run()

    assert isinstance(outcome, RunResult)
    assert outcome.success is True
    assert outcome.articles_count == 2
    assert outcome.script == "Welcome to the show."
    assert outcome.script_length == len("Welcome to the show.")
    assert outcome.audio_file == audio
    assert scripts.received == [articles]
    assert tts.received == ["Welcome to the show."]


async def test_missing_credentials_stop_before_any_collaborator(make_settings, articles) -> None:
    news = FakeNewsFetcher(articles=articles)
    scripts = FakeScriptGenerator(script="script")
    tts = FakeTTS(path="out.mp3")

    outcome = await PodcastPipeline(
        make_settings(openai_key=None, elevenlabs_key=""),
        news_fetcher=news,
        script_generator=scripts,
        tts=tts,
    ).run()

    assert isinstance(outcome, RunFailure)
    assert outcome.kind == "configuration"
    assert outcome.missing == ["OPENAI_API_KEY", "ELEVENLABS_API_KEY"]
    assert news.calls == 0
    assert scripts.received == []
    assert tts.received == []


async def test_no_articles_aborts_before_script_generation(make_settings) -> None:
    scripts = FakeScriptGenerator(script="script")

    outcome = await PodcastPipeline(
        make_settings(),
        news_fetcher=FakeNewsFetcher(articles=[]),
        script_generator=scripts,
        tts=FakeTTS(path="out.mp3"),
    ).run()

    assert isinstance(outcome, RunFailure)
    assert outcome.kind == "stage"
    assert outcome.stage == "fetch"
    assert outcome.message == "No articles fetched"
    assert scripts.received == []


async def test_fetch_error_is_reported_as_stage_failure(make_settings) -> None:
    outcome = await PodcastPipeline(
        make_settings(),
        news_fetcher=FakeNewsFetcher(error=httpx.ConnectError("no route to host")),
        script_generator=FakeScriptGenerator(script="script"),
        tts=FakeTTS(path="out.mp3"),
    ).run()

    assert outcome.stage == "fetch"
    assert outcome.message == "Failed to fetch news articles"
    assert outcome.error == "no route to host"


async def test_empty_script_aborts_before_audio(make_settings, articles) -> None:
    tts = FakeTTS(path="out.mp3")

    outcome = await PodcastPipeline(
        make_settings(),
        news_fetcher=FakeNewsFetcher(articles=articles),
        script_generator=FakeScriptGenerator(script=""),
        tts=tts,
    ).run()

    assert outcome.stage == "script"
    assert outcome.message == "No script generated"
    assert tts.received == []


async def test_audio_error_reports_failed_to_generate_audio(make_settings, articles) -> None:
    outcome = await PodcastPipeline(
        make_settings(),
        news_fetcher=FakeNewsFetcher(articles=articles),
        script_generator=FakeScriptGenerator(script="script"),
        tts=FakeTTS(error=RuntimeError("voice not found")),
    ).run()

    assert isinstance(outcome, RunFailure)
    assert outcome.stage == "audio"
    assert outcome.message == "Failed to generate audio"
    assert outcome.error == "voice not found"


async def test_missing_audio_path_is_a_failure(make_settings, articles) -> None:
    outcome = await PodcastPipeline(
        make_settings(),
        news_fetcher=FakeNewsFetcher(articles=articles),
        script_generator=FakeScriptGenerator(script="script"),
        tts=FakeTTS(path=None),
    ).run()

    assert outcome.stage == "audio"
    assert outcome.message == "No audio file generated"


async def test_end_to_end_with_real_collaborators(make_settings, output_dir: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "ok", "articles": [{"title": "A"}, {"title": "B"}]})

    store = OutputStore(output_dir)
    completions = FakeChatCompletions(content="Stories A and B, explained.")
    text_to_speech = FakeTextToSpeech(chunks=[b"mp3-bytes"])

    news = NewsFetcher(
        NewsFetcherConfig(api_key="news-key"),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    scripts = ScriptGenerator(ScriptConfig(api_key="openai-key"), store, client=fake_openai_client(completions))
    tts = ElevenLabsTTS(
        ElevenLabsConfig(api_key="elevenlabs-key"),
        store,
        client=fake_elevenlabs_client(text_to_speech),
    )

    outcome = await PodcastPipeline(
        make_settings(), news_fetcher=news, script_generator=scripts, tts=tts, store=store
    ).run()

    assert isinstance(outcome, RunResult)
    assert outcome.articles_count == 2
    assert outcome.script_length == len("Stories A and B, explained.")
    assert outcome.audio_file.read_bytes() == b"mp3-bytes"

    prompt = completions.requests[0]["messages"][0]["content"]
    assert "1. A" in prompt
    assert "2. B" in prompt
    assert text_to_speech.requests[0]["text"] == "Stories A and B, explained."
    assert (output_dir / "podcast-script.txt").read_text(encoding="utf-8") == "Stories A and B, explained."


async def test_collaborators_are_built_from_settings(make_settings) -> None:
    pipeline = PodcastPipeline(make_settings())

    stages = pipeline._build_stages()

    assert [s.name for s in stages] == ["fetch", "script", "audio"]
    assert pipeline._news_fetcher.config.api_key == "news-key"
    assert pipeline._script_generator.config.model == "gpt-3.5-turbo"
    assert pipeline._tts.config.voice_id == "21m00Tcm4TlvDq8ikWAM"


async def test_script_error_reports_failed_to_generate_script(make_settings, articles) -> None:
    tts = FakeTTS(path="out.mp3")

    outcome = await PodcastPipeline(
        make_settings(),
        news_fetcher=FakeNewsFetcher(articles=articles),
        script_generator=FakeScriptGenerator(error=RuntimeError("model overloaded")),
        tts=tts,
    ).run()

    assert isinstance(outcome, RunFailure)
    assert outcome.kind == "stage"
    assert outcome.stage == "script"
    assert outcome.message == "Failed to generate podcast script"
    assert outcome.error == "model overloaded"
    assert tts.received == []


async def test_stage_failure_is_logged_once_at_error_level(make_settings) -> None:
    with capture_logs() as logs:
        await PodcastPipeline(
            make_settings(),
            news_fetcher=FakeNewsFetcher(articles=[]),
            script_generator=FakeScriptGenerator(script="script"),
            tts=FakeTTS(path="out.mp3"),
        ).run()

    errors = [entry for entry in logs if entry["log_level"] == "error"]
    assert [entry["event"] for entry in errors] == ["No articles fetched"]
