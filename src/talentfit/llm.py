"""LLM-backed skill matching over an OpenAI-compatible chat completions API."""

from __future__ import annotations

import json
import math
import os
import re
import socket
from typing import Any, Protocol, Sequence
from urllib import error, request

import structlog

from .core.scorers.skills import SkillMatchError

DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM_PROMPT = (
    "You are an expert technical recruiter. Analyze skill matches and return "
    "only a decimal number between 0.0 and 1.0."
)

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class ChatClient(Protocol):
    def complete(self, messages: list[dict[str, str]]) -> str:
        """Return the assistant message text for the given conversation."""


class HTTPChatClient:
    """Minimal HTTP client for a chat completions endpoint."""

    def __init__(
        self,
        endpoint: str | None = None,
        api_key: str | None = None,
        *,
        model: str = DEFAULT_MODEL,
        timeout: float = 10.0,
        max_tokens: int = 10,
        temperature: float = 0.1,
    ):
        self._endpoint = endpoint or DEFAULT_ENDPOINT
        self._api_key = api_key if api_key is not None else os.getenv("OPENAI_API_KEY")
        self._model = model
        self._timeout = timeout
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def model(self) -> str:
        return self._model

    def complete(self, messages: list[dict[str, str]]) -> str:
        payload = {
            "model": self._model,
            "messages": messages,
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }
        data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        req = request.Request(self._endpoint, data=data, headers=headers, method="POST")
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read().decode("utf-8")
        except error.HTTPError as exc:
            raise SkillMatchError(f"LLM request failed with HTTP {exc.code}") from exc
        except (error.URLError, socket.timeout, TimeoutError) as exc:
            raise SkillMatchError(f"LLM request failed: {exc}") from exc

        try:
            parsed = json.loads(body)
            content = parsed["choices"][0]["message"]["content"]
        except (json.JSONDecodeError, KeyError, IndexError, TypeError) as exc:
            raise SkillMatchError("Malformed LLM response payload") from exc
        if not isinstance(content, str):
            raise SkillMatchError("LLM response content is not text")
        return content


def parse_score(text: str | None) -> float:
    """Parse an untrusted score string and clamp it to [0, 1].

    Accepts a leading decimal number (``"0.85"``, ``"0.85 - strong"``).
    Empty, non-numeric and non-finite values raise :class:`SkillMatchError`.
    """
    if text is None:
        raise SkillMatchError("Empty score response")
    match = _LEADING_NUMBER.match(text.strip())
    if not match:
        raise SkillMatchError(f"Unparseable score response: {text!r}")
    value = float(match.group(0))
    if not math.isfinite(value):
        raise SkillMatchError(f"Non-finite score response: {text!r}")
    return min(1.0, max(0.0, value))


def build_skill_prompt(
    candidate_skills: Sequence[str],
    resume_excerpt: str,
    required_skills: Sequence[str],
    preferred_skills: Sequence[str],
) -> str:
    return "\n".join(
        [
            f"Job Requirements: {json.dumps(list(required_skills), ensure_ascii=False)}",
            f"Job Preferred Skills: {json.dumps(list(preferred_skills), ensure_ascii=False)}",
            f"Candidate Skills: {json.dumps(list(candidate_skills), ensure_ascii=False)}",
            f"Candidate Resume Text: {resume_excerpt}",
            "",
            "Analyze how well this candidate's skills match the job requirements.",
            "Return a score from 0.0 to 1.0 where 1.0 is a perfect match.",
            "Consider both required and preferred skills, with required skills weighted more heavily.",
        ]
    )


class LLMSkillMatcher:
    """SkillMatcher asking an LLM to rate skill coverage."""

    name = "llm"

    def __init__(self, client: ChatClient, *, resume_excerpt_chars: int = 2000) -> None:
        self._client = client
        self._resume_excerpt_chars = resume_excerpt_chars
        self._logger = structlog.get_logger(__name__)

    def score(
        self,
        candidate_skills: Sequence[str],
        resume_excerpt: str,
        required_skills: Sequence[str],
        preferred_skills: Sequence[str],
    ) -> float:
        prompt = build_skill_prompt(
            candidate_skills,
            (resume_excerpt or "")[: self._resume_excerpt_chars],
            required_skills,
            preferred_skills,
        )
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]
        content = self._client.complete(messages)
        score = parse_score(content)
        self._logger.debug("skill_match.llm_score", score=score)
        return score


def create_llm_matcher(settings: dict[str, Any]) -> LLMSkillMatcher:
    """Build an LLMSkillMatcher from the ``llm`` settings section."""
    client = HTTPChatClient(
        settings.get("endpoint"),
        settings.get("api_key"),
        model=settings.get("model") or DEFAULT_MODEL,
        timeout=float(settings.get("timeout") or 10.0),
        max_tokens=int(settings.get("max_tokens") or 10),
        temperature=float(settings.get("temperature", 0.1)),
    )
    return LLMSkillMatcher(
        client,
        resume_excerpt_chars=int(settings.get("resume_excerpt_chars", 2000)),
    )
