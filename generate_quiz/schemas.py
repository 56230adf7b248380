"""In-memory quiz shapes produced by the generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

DIFFICULTIES = ("easy", "medium", "hard")


@dataclass(frozen=True)
class GeneratedQuestion:
    """One multiple-choice question whose answer is always one of its options."""

    question: str
    options: tuple[str, ...]
    answer: str

    def to_dict(self) -> dict:
        return {"question": self.question, "options": list(self.options), "answer": self.answer}


@dataclass(frozen=True)
class GeneratedQuiz:
    title: str
    difficulty: str
    questions: tuple[GeneratedQuestion, ...] = field(default_factory=tuple)

    @property
    def num_questions(self) -> int:
        return len(self.questions)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "numQuestions": self.num_questions,
            "difficulty": self.difficulty,
            "questions": [q.to_dict() for q in self.questions],
        }


@dataclass(frozen=True)
class Failure:
    """Tagged failure returned by the extractor and normalizer instead of None."""

    stage: Literal["extract", "normalize"]
    reason: str

    def __str__(self) -> str:
        return f"{self.stage}: {self.reason}"


@dataclass(frozen=True)
class GenerationResult:
    quiz: GeneratedQuiz
    source: Literal["provider", "fallback"]


ExtractResult = Union[dict, list, Failure]
NormalizeResult = Union[GeneratedQuiz, Failure]
