"""Tests for the AI coach analysis."""

import asyncio
import json
from types import SimpleNamespace

import pytest

from gym_tracker.services.analysis import (
    BUSY_MESSAGE,
    EMPTY_MESSAGE,
    FAILED_MESSAGE,
    NO_CREDENTIALS_MESSAGE,
    AnalysisStatus,
    ProgressAnalyzer,
)
from gym_tracker.services.prompts import build_analysis_prompt


class FakeModels:
    """Stands in for ``client.aio.models``."""

    def __init__(self, text: str | None = "## Buen progreso", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []
        self.release: asyncio.Event | None = None

    async def generate_content(self, model: str, contents: str):
        self.calls.append({"model": model, "contents": contents})
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def fake_client(models: FakeModels):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


class TestBuildPrompt:
    """Tests for the analysis prompt."""

    def test_embeds_sessions_as_json(self, sample_sessions):
        prompt = build_analysis_prompt(sample_sessions[:1])

        start = prompt.index("[")
        end = prompt.index("]\n") + 1
        records = json.loads(prompt[start:end])
        assert records[0]["id"] == sample_sessions[0].id

    def test_instructions(self, sample_sessions):
        prompt = build_analysis_prompt(sample_sessions)
        assert "máximo 2 párrafos" in prompt
        assert "sobrecarga progresiva" in prompt
        assert "estancamiento" in prompt
        assert "Markdown" in prompt
        assert "Español" in prompt


@pytest.mark.asyncio
class TestProgressAnalyzer:
    """Tests for ProgressAnalyzer."""

    async def test_no_credentials(self, sample_sessions):
        analyzer = ProgressAnalyzer(api_key=None)

        result = await analyzer.analyze(sample_sessions)

        assert result.status == AnalysisStatus.NO_CREDENTIALS
        assert result.text == NO_CREDENTIALS_MESSAGE
        assert not result.ok

    async def test_success(self, sample_sessions):
        models = FakeModels(text="## Buen progreso\nSigue así.")
        analyzer = ProgressAnalyzer(model="gemini-test", client=fake_client(models))

        result = await analyzer.analyze(sample_sessions)

        assert result.ok
        assert str(result) == "## Buen progreso\nSigue así."
        assert models.calls[0]["model"] == "gemini-test"
        assert sample_sessions[0].id in models.calls[0]["contents"]

    async def test_only_recent_sessions_sent(self, session_factory):
        sessions = [
            session_factory(f"2024-01-{day:02d}T10:00:00", {"Bench": [(5, 80 + day)]})
            for day in range(1, 16)
        ]
        models = FakeModels()
        analyzer = ProgressAnalyzer(client=fake_client(models), history_limit=10)

        await analyzer.analyze(sessions)

        contents = models.calls[0]["contents"]
        included = [s for s in sessions if s.id in contents]
        assert len(included) == 10
        assert {s.date.day for s in included} == set(range(6, 16))

    async def test_remote_failure(self, sample_sessions, caplog):
        models = FakeModels(error=ConnectionError("connection reset"))
        analyzer = ProgressAnalyzer(client=fake_client(models))

        result = await analyzer.analyze(sample_sessions)

        assert result.status == AnalysisStatus.FAILED
        assert result.text == FAILED_MESSAGE
        assert "failed" in caplog.text
        assert not analyzer.busy

    @pytest.mark.parametrize("text", [None, "", "   "])
    async def test_empty_response(self, sample_sessions, text):
        analyzer = ProgressAnalyzer(client=fake_client(FakeModels(text=text)))

        result = await analyzer.analyze(sample_sessions)

        assert result.status == AnalysisStatus.EMPTY
        assert result.text == EMPTY_MESSAGE

    async def test_one_request_in_flight(self, sample_sessions):
        models = FakeModels()
        models.release = asyncio.Event()
        analyzer = ProgressAnalyzer(client=fake_client(models))

        first = asyncio.create_task(analyzer.analyze(sample_sessions))
        await asyncio.sleep(0)
        assert analyzer.busy

        second = await analyzer.analyze(sample_sessions)
        models.release.set()
        first_result = await first

        assert second.status == AnalysisStatus.BUSY
        assert second.text == BUSY_MESSAGE
        assert first_result.ok
        assert len(models.calls) == 1
        assert not analyzer.busy

    async def test_snapshot_taken_at_call_time(self, sample_sessions, session_factory):
        models = FakeModels()
        models.release = asyncio.Event()
        analyzer = ProgressAnalyzer(client=fake_client(models))
        history = list(sample_sessions)

        task = asyncio.create_task(analyzer.analyze(history))
        await asyncio.sleep(0)
        late = session_factory("2024-02-01T10:00:00", {"Bench": [(5, 95)]})
        history.insert(0, late)
        models.release.set()
        await task

        assert late.id not in models.calls[0]["contents"]

    async def test_result_to_dict(self, sample_sessions):
        result = await ProgressAnalyzer().analyze(sample_sessions)
        assert result.to_dict() == {"text": NO_CREDENTIALS_MESSAGE, "status": "no_credentials"}
