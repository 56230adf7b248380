"""Turn raw model output into a validated quiz.

The provider is asked for strict JSON but routinely wraps it in prose or code
fences, numbers its questions, prefixes difficulty tags, repeats options or
answers with text that matches none of them. Everything here is tolerant of
that: nothing raises, failures come back as :class:`Failure`.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from .schemas import ExtractResult, Failure, GeneratedQuestion, GeneratedQuiz, NormalizeResult

logger = logging.getLogger(__name__)

MIN_OPTIONS = 3
MAX_OPTIONS = 4

# -----------------------------
# Sanitizer
# -----------------------------
_NUMBERING_RE = re.compile(r"^\d+[.)]\s*")
_DIFFICULTY_TAG_RE = re.compile(
    r"^(?:[(\[]\s*(?:easy|medium|hard)\b(?:\s*[)\]:\-])*|(?:easy|medium|hard)(?:\s*[)\]:\-])+)\s*",
    re.IGNORECASE,
)


def sanitize(value: Any) -> str:
    """Trim a text fragment and drop a leading "1." / "2)" and "(Hard)" / "Easy:" prefix."""
    if value is None:
        return ""
    text = str(value).strip()
    text = _NUMBERING_RE.sub("", text, count=1)
    text = _DIFFICULTY_TAG_RE.sub("", text, count=1)
    # a tag may come before the numbering: "(Hard) 1. What is X?"
    text = _NUMBERING_RE.sub("", text, count=1)
    return text.strip()


# -----------------------------
# JSON extraction
# -----------------------------
_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def _strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def extract_json(text: Optional[str]) -> ExtractResult:
    """Recover a JSON object from model output that may carry fences or prose around it."""
    if not text or not text.strip():
        return Failure("extract", "empty response")

    cleaned = _strip_code_fences(text)
    try:
        parsed = json.loads(cleaned)
        if isinstance(parsed, (dict, list)):
            return parsed
    except ValueError:
        pass

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end <= start:
        return Failure("extract", "no JSON object found")
    try:
        return json.loads(cleaned[start:end + 1])
    except ValueError as e:
        return Failure("extract", f"invalid JSON: {e}")


# -----------------------------
# Normalization
# -----------------------------
def _clean_options(raw_options: Any) -> list[str]:
    if not isinstance(raw_options, list):
        return []
    seen = set()
    options = []
    for raw in raw_options:
        opt = sanitize(raw)
        if opt and opt not in seen:
            seen.add(opt)
            options.append(opt)
    return options


def _resolve_answer(raw_answer: Any, options: list[str]) -> str:
    # Some models answer with the option index instead of its text.
    if isinstance(raw_answer, int) and not isinstance(raw_answer, bool):
        if 0 <= raw_answer < len(options):
            return options[raw_answer]
    return sanitize(raw_answer)


def _pad_options(options: list[str]) -> list[str]:
    padded = list(options)
    k = len(padded) + 1
    while len(padded) < MIN_OPTIONS:
        placeholder = f"Option {k}"
        if placeholder not in padded:
            padded.append(placeholder)
        k += 1
    return padded


def normalize_question(raw: dict, topic: str, position: int) -> GeneratedQuestion:
    """Repair a single candidate question. ``position`` is 1-based."""
    text = sanitize(raw.get("question")) or f"Question {position} about {topic}"

    options = _clean_options(raw.get("options"))
    answer = _resolve_answer(raw.get("answer"), options)
    options = _pad_options(options)

    if answer and answer not in options:
        options.insert(0, answer)
    options = options[:MAX_OPTIONS]

    if answer not in options:
        answer = options[0]
    return GeneratedQuestion(question=text, options=tuple(options), answer=answer)


def normalize_quiz(candidate: Any, topic: str, num_questions: int, difficulty: str) -> NormalizeResult:
    """Validate and repair a parsed candidate into a quiz of exactly ``num_questions`` questions."""
    if not isinstance(candidate, dict):
        return Failure("normalize", f"expected an object, got {type(candidate).__name__}")
    raw_questions = candidate.get("questions")
    if not isinstance(raw_questions, list):
        return Failure("normalize", "missing 'questions' list")

    questions = []
    for raw in raw_questions[:num_questions]:
        if not isinstance(raw, dict):
            logger.debug("Skipping non-object question candidate: %r", raw)
            continue
        questions.append(normalize_question(raw, topic, len(questions) + 1))

    if len(questions) != num_questions:
        return Failure(
            "normalize",
            f"expected {num_questions} questions, got {len(questions)} usable",
        )

    title = sanitize(candidate.get("title")) or f"Quiz: {topic}"
    return GeneratedQuiz(title=title, difficulty=difficulty, questions=tuple(questions))
