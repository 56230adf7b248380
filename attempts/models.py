import uuid
from django.db import models

from generate_quiz.models import Quiz


class Attempt(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Plain reference: attempts outlive the quiz they point at.
    quiz_id = models.UUIDField(db_index=True)
    user_answers = models.JSONField(default=list)
    score = models.PositiveIntegerField(default=0)
    total = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"Attempt {self.id} on quiz {self.quiz_id} - Score: {self.score}/{self.total}"

    def get_quiz(self):
        """Look up the referenced quiz; None once it has been deleted."""
        return Quiz.objects.prefetch_related("questions").filter(pk=self.quiz_id).first()

    def to_dict(self, quiz=None):
        return {
            "id": str(self.id),
            "quizId": str(self.quiz_id),
            "quiz": quiz.to_dict() if quiz is not None else None,
            "userAnswers": list(self.user_answers),
            "score": self.score,
            "total": self.total,
            "createdAt": self.created_at.isoformat(),
        }


def attach_quizzes(attempts):
    """Pair each attempt with its quiz (or None) using a single bulk lookup."""
    attempts = list(attempts)
    quizzes = Quiz.objects.prefetch_related("questions").in_bulk({a.quiz_id for a in attempts})
    return [(a, quizzes.get(a.quiz_id)) for a in attempts]
