from django import forms
from django.conf import settings

from .models import Quiz


class QuizRequestForm(forms.Form):
    """Validates a quiz request before any generation is attempted."""

    topic = forms.CharField(
        max_length=200,
        widget=forms.TextInput(attrs={'placeholder': 'e.g. JavaScript basics'})
    )
    num_questions = forms.IntegerField(
        required=False,
        min_value=1, max_value=settings.QUIZ_MAX_QUESTIONS,
        initial=settings.QUIZ_DEFAULT_QUESTIONS,
        help_text="How many questions should the AI generate?"
    )
    difficulty = forms.CharField(
        required=False,
        initial='medium',
        widget=forms.Select(choices=Quiz.DIFFICULTY_CHOICES)
    )

    @classmethod
    def from_json(cls, payload):
        """Bind the camelCase API body to the form's field names."""
        return cls(data={
            'topic': payload.get('topic'),
            'num_questions': payload.get('numQuestions'),
            'difficulty': payload.get('difficulty'),
        })

    def clean_topic(self):
        if not isinstance(self.data.get('topic'), str):
            raise forms.ValidationError("Topic must be a string.")
        return self.cleaned_data['topic']

    def clean_num_questions(self):
        value = self.cleaned_data.get('num_questions')
        return settings.QUIZ_DEFAULT_QUESTIONS if value is None else value

    def clean_difficulty(self):
        value = (self.cleaned_data.get('difficulty') or 'medium').strip().lower()
        if value not in dict(Quiz.DIFFICULTY_CHOICES):
            raise forms.ValidationError("Difficulty must be one of: easy, medium, hard.")
        return value
