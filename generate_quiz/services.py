import logging

from django.db import transaction

from . import llm
from .fallback import build_fallback_quiz
from .models import Question, Quiz
from .parsing import extract_json, normalize_quiz
from .schemas import Failure, GenerationResult, GeneratedQuiz

logger = logging.getLogger(__name__)

DEFAULT_NUM_QUESTIONS = 3
DEFAULT_DIFFICULTY = "medium"


# -----------------------------
# Prompt
# -----------------------------
def build_quiz_prompt(topic, num_questions, difficulty):
    return f"""
You are an expert exam-setter. Create a multiple-choice quiz about the topic "{topic}".

CONSTRAINTS:
- Respond with VALID JSON ONLY. No prose, no markdown, no code fences.
- Exactly {num_questions} questions.
- Every question has 3 or 4 distinct options.
- "answer" must match one of the options exactly, character for character.
- Do not number questions or options and do not prefix them with difficulty tags.
- Difficulty level: {difficulty}. Every question must match this difficulty.

FORMAT (STRICT JSON):
{{"title": "...", "questions": [{{"question": "...", "options": ["...", "...", "...", "..."], "answer": "..."}}]}}
""".strip()


# -----------------------------
# Orchestration
# -----------------------------
def _generate_with_provider(topic, num_questions, difficulty):
    """Return a quiz from the provider or a Failure; provider errors propagate."""
    prompt = build_quiz_prompt(topic, num_questions, difficulty)
    raw_output = llm.complete(prompt)

    parsed = extract_json(raw_output)
    if isinstance(parsed, Failure):
        return parsed
    return normalize_quiz(parsed, topic, num_questions, difficulty)


def generate_quiz(topic, num_questions=DEFAULT_NUM_QUESTIONS, difficulty=DEFAULT_DIFFICULTY) -> GenerationResult:
    """Always return a valid quiz; every provider or parsing problem ends in the fallback."""
    if not llm.is_configured():
        logger.info("No provider configured, using fallback quiz for %r", topic)
        return GenerationResult(build_fallback_quiz(topic, num_questions, difficulty), "fallback")

    try:
        result = _generate_with_provider(topic, num_questions, difficulty)
    except Exception as e:
        logger.warning("Quiz generation failed for %r, using fallback: %s", topic, e)
        return GenerationResult(build_fallback_quiz(topic, num_questions, difficulty), "fallback")

    if isinstance(result, Failure):
        logger.warning("Provider output rejected for %r (%s), using fallback", topic, result)
        return GenerationResult(build_fallback_quiz(topic, num_questions, difficulty), "fallback")

    logger.info("Generated %d questions for %r from provider", result.num_questions, topic)
    return GenerationResult(result, "provider")


# -----------------------------
# Storage
# -----------------------------
@transaction.atomic
def store_quiz(topic: str, generated: GeneratedQuiz, source: str):
    """Insert a quiz and its questions in one transaction."""
    quiz = Quiz.objects.create(
        title=generated.title[:255],
        topic=topic,
        difficulty=generated.difficulty,
        num_questions=generated.num_questions,
        source=source,
    )
    Question.objects.bulk_create([
        Question(
            quiz=quiz,
            position=i,
            text=q.question,
            options=list(q.options),
            answer=q.answer,
        )
        for i, q in enumerate(generated.questions)
    ])
    return quiz
