import uuid
from django.db import models


class Quiz(models.Model):
    DIFFICULTY_CHOICES = [
        ('easy', 'Easy'),
        ('medium', 'Medium'),
        ('hard', 'Hard'),
    ]
    SOURCE_CHOICES = [
        ('provider', 'Generated by provider'),
        ('fallback', 'Offline fallback'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    topic = models.CharField(max_length=200)
    difficulty = models.CharField(max_length=10, choices=DIFFICULTY_CHOICES, default='medium')
    num_questions = models.PositiveIntegerField()
    source = models.CharField(
        max_length=10,
        choices=SOURCE_CHOICES,
        default='fallback',
        help_text="Whether the questions came from the provider or the offline fallback"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name_plural = "quizzes"

    def __str__(self):
        return f"{self.title} ({self.difficulty})"

    def answer_key(self):
        return [q.answer for q in self.questions.all()]

    def to_dict(self):
        return {
            "id": str(self.id),
            "title": self.title,
            "topic": self.topic,
            "numQuestions": self.num_questions,
            "difficulty": self.difficulty,
            "source": self.source,
            "questions": [q.to_dict() for q in self.questions.all()],
            "createdAt": self.created_at.isoformat(),
        }


class Question(models.Model):
    quiz = models.ForeignKey(Quiz, on_delete=models.CASCADE, related_name="questions")
    position = models.PositiveIntegerField()
    text = models.TextField()
    options = models.JSONField(default=list)
    answer = models.TextField()

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["quiz", "position"], name="unique_question_position"),
        ]

    def __str__(self):
        return self.text

    def to_dict(self):
        return {"question": self.text, "options": list(self.options), "answer": self.answer}
