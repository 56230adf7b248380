import json
from types import SimpleNamespace

import pytest

from generate_quiz import llm, services
from generate_quiz.fallback import build_fallback_quiz


def _provider_payload(n, answer="B"):
    return json.dumps({
        "title": "Ocean Depths",
        "questions": [
            {"question": f"Question {i}?", "options": ["A", "B", "C", "D"], "answer": answer}
            for i in range(n)
        ],
    })


def test_no_key_uses_fallback(monkeypatch):
    def boom(prompt):
        raise AssertionError("provider must not be called")

    monkeypatch.setattr(llm, "complete", boom)
    result = services.generate_quiz("Oceans", 4, "hard")
    assert result.source == "fallback"
    assert result.quiz == build_fallback_quiz("Oceans", 4, "hard")


def test_provider_success(provider_key, monkeypatch):
    prompts = []

    def fake_complete(prompt):
        prompts.append(prompt)
        return "Sure! ```json\n" + _provider_payload(4) + "\n```"

    monkeypatch.setattr(llm, "complete", fake_complete)
    result = services.generate_quiz("Oceans", 4, "hard")
    assert result.source == "provider"
    assert result.quiz.title == "Ocean Depths"
    assert result.quiz.num_questions == 4
    assert result.quiz.difficulty == "hard"
    assert "Exactly 4 questions" in prompts[0]
    assert "hard" in prompts[0]


@pytest.mark.parametrize("output", [
    "I cannot help with that.",
    _provider_payload(2),
    json.dumps([{"question": "Q", "options": ["A", "B", "C"], "answer": "A"}]),
])
def test_unusable_output_falls_back(provider_key, monkeypatch, output):
    monkeypatch.setattr(llm, "complete", lambda prompt: output)
    result = services.generate_quiz("Oceans", 4, "easy")
    assert result.source == "fallback"
    assert result.quiz.num_questions == 4


@pytest.mark.parametrize("error", [llm.ProviderError("HTTP 500"), TimeoutError("slow"), RuntimeError("boom")])
def test_provider_errors_fall_back(provider_key, monkeypatch, error):
    def failing(prompt):
        raise error

    monkeypatch.setattr(llm, "complete", failing)
    result = services.generate_quiz("Oceans", 2, "medium")
    assert result.source == "fallback"
    assert result.quiz == build_fallback_quiz("Oceans", 2, "medium")


# -----------------------------
# Gemini adapter
# -----------------------------
class FakeModel:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, prompt, request_options=None):
        self.calls.append((prompt, request_options))
        if self.error:
            raise self.error
        return self.response


class BlockedResponse:
    @property
    def text(self):
        raise ValueError("response was blocked")


@pytest.fixture
def fake_genai(monkeypatch):
    configured = []
    holder = {}
    monkeypatch.setattr(llm.genai, "configure", lambda api_key: configured.append(api_key))
    monkeypatch.setattr(llm.genai, "GenerativeModel", lambda name: holder["model"])
    return holder, configured


def test_complete_returns_text_with_timeout(provider_key, settings, fake_genai):
    holder, configured = fake_genai
    settings.GEMINI_TIMEOUT = 7
    holder["model"] = FakeModel(SimpleNamespace(text='{"a": 1}'))
    assert llm.complete("prompt") == '{"a": 1}'
    assert configured == ["test-key"]
    assert holder["model"].calls == [("prompt", {"timeout": 7})]


@pytest.mark.parametrize("model", [
    FakeModel(BlockedResponse()),
    FakeModel(SimpleNamespace(text="   ")),
    FakeModel(SimpleNamespace()),
    FakeModel(error=ConnectionError("unreachable")),
])
def test_complete_raises_provider_error(provider_key, fake_genai, model):
    holder, _ = fake_genai
    holder["model"] = model
    with pytest.raises(llm.ProviderError):
        llm.complete("prompt")


def test_complete_without_key():
    with pytest.raises(llm.ProviderNotConfigured):
        llm.complete("prompt")
