from __future__ import annotations

import io
import json
from urllib import error

import pytest

from talentfit import llm
from talentfit.core.scorers import SkillMatchError
from talentfit.llm import HTTPChatClient, LLMSkillMatcher, SYSTEM_PROMPT, parse_score


class RecordingClient:
    def __init__(self, reply: str):
        self.reply = reply
        self.messages: list[list[dict[str, str]]] = []

    def complete(self, messages: list[dict[str, str]]) -> str:
        self.messages.append(messages)
        return self.reply


class FakeResponse(io.BytesIO):
    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.85", 0.85),
        (" 0.4\n", 0.4),
        ("1.7", 1.0),
        ("-0.2", 0.0),
        ("0.6 strong match", 0.6),
        (".5", 0.5),
        ("1e-1", 0.1),
        ("8E-1 overall", 0.8),
        ("2e", 1.0),
    ],
)
def test_parse_score_clamps(text: str, expected: float):
    assert parse_score(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", [None, "", "NaN", "inf", "1e999", "about 0.7", "high"])
def test_parse_score_rejects_malformed(text):
    with pytest.raises(SkillMatchError):
        parse_score(text)


def test_llm_matcher_builds_prompt_and_truncates_resume():
    client = RecordingClient("0.75")
    matcher = LLMSkillMatcher(client, resume_excerpt_chars=10)

    score = matcher.score(["Python"], "Senior Python engineer", ["python"], ["go"])

    assert score == pytest.approx(0.75)
    system, user = client.messages[0]
    assert system == {"role": "system", "content": SYSTEM_PROMPT}
    assert 'Job Requirements: ["python"]' in user["content"]
    assert 'Job Preferred Skills: ["go"]' in user["content"]
    assert "Candidate Resume Text: Senior Pyt\n" in user["content"]
    assert "required skills weighted more heavily" in user["content"]


def test_llm_matcher_raises_on_garbage_reply():
    matcher = LLMSkillMatcher(RecordingClient("I cannot answer that"))

    with pytest.raises(SkillMatchError):
        matcher.score(["Python"], "", ["python"], [])


def test_http_client_posts_chat_completion(monkeypatch):
    captured = {}

    def fake_urlopen(req, timeout):
        captured["url"] = req.full_url
        captured["timeout"] = timeout
        captured["headers"] = dict(req.header_items())
        captured["body"] = json.loads(req.data.decode("utf-8"))
        body = {"choices": [{"message": {"role": "assistant", "content": "0.8"}}]}
        return FakeResponse(json.dumps(body).encode("utf-8"))

    monkeypatch.setattr(llm.request, "urlopen", fake_urlopen)
    client = HTTPChatClient("http://llm.local/v1/chat/completions", "secret", timeout=3.0)

    content = client.complete([{"role": "user", "content": "hi"}])

    assert content == "0.8"
    assert captured["url"] == "http://llm.local/v1/chat/completions"
    assert captured["timeout"] == 3.0
    assert captured["headers"]["Authorization"] == "Bearer secret"
    assert captured["body"]["model"] == "gpt-4o-mini"
    assert captured["body"]["max_tokens"] == 10
    assert captured["body"]["temperature"] == pytest.approx(0.1)


@pytest.mark.parametrize(
    "failure",
    [
        error.URLError("connection refused"),
        TimeoutError("timed out"),
        error.HTTPError("http://llm.local", 429, "Too Many Requests", {}, None),
    ],
)
def test_http_client_wraps_transport_errors(monkeypatch, failure):
    def fake_urlopen(req, timeout):
        raise failure

    monkeypatch.setattr(llm.request, "urlopen", fake_urlopen)
    client = HTTPChatClient("http://llm.local", "secret")

    with pytest.raises(SkillMatchError):
        client.complete([{"role": "user", "content": "hi"}])


def test_http_client_rejects_malformed_payload(monkeypatch):
    monkeypatch.setattr(
        llm.request,
        "urlopen",
        lambda req, timeout: FakeResponse(b'{"error": "quota"}'),
    )
    client = HTTPChatClient("http://llm.local", "secret")

    with pytest.raises(SkillMatchError):
        client.complete([{"role": "user", "content": "hi"}])


def test_http_client_reads_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "from-env")

    assert HTTPChatClient()._api_key == "from-env"
