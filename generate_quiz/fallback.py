"""Deterministic offline quiz used when the provider is unavailable or untrustworthy."""

from __future__ import annotations

from .schemas import GeneratedQuestion, GeneratedQuiz

DEFAULT_TOPIC = "General Knowledge"

_QUESTION_TEMPLATES = (
    "Which of the following is most closely associated with {topic}?",
    "Which statement best describes a core idea of {topic}?",
    "Which term would you expect in a {difficulty} introduction to {topic}?",
    "Which of these is a practical application of {topic}?",
    "Which fact about {topic} is accurate?",
)


def build_fallback_question(topic: str, difficulty: str, index: int, count: int) -> GeneratedQuestion:
    """Build question ``index`` (0-based) of ``count``; the correct option sits at ``index % 4``."""
    number = index + 1
    template = _QUESTION_TEMPLATES[index % len(_QUESTION_TEMPLATES)]
    text = template.format(topic=topic, difficulty=difficulty)
    if count > len(_QUESTION_TEMPLATES):
        text = f"{text} (part {number})"

    correct = f"Key fact {number} about {topic}"
    options = [f"Unrelated claim {number}.{k}" for k in range(1, 4)]
    options.insert(index % 4, correct)
    return GeneratedQuestion(question=text, options=tuple(options), answer=correct)


def build_fallback_quiz(topic: str, num_questions: int, difficulty: str) -> GeneratedQuiz:
    topic = (topic or "").strip() or DEFAULT_TOPIC
    questions = tuple(
        build_fallback_question(topic, difficulty, i, num_questions) for i in range(num_questions)
    )
    return GeneratedQuiz(title=f"Quick Quiz: {topic}", difficulty=difficulty, questions=questions)
