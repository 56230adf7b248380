from django import forms


class AnswerListField(forms.Field):
    """A JSON array whose entries are strings or nulls; an empty array is valid."""

    default_error_messages = {
        "invalid": "userAnswers must be an array.",
        "invalid_item": "Every answer must be a string or null.",
    }

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_python(self, value):
        if not isinstance(value, list):
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")
        if not all(a is None or isinstance(a, str) for a in value):
            raise forms.ValidationError(self.error_messages["invalid_item"], code="invalid_item")
        return list(value)


class AttemptForm(forms.Form):
    quiz_id = forms.UUIDField()
    user_answers = AnswerListField()

    @classmethod
    def from_json(cls, payload):
        return cls(data={
            "quiz_id": payload.get("quizId"),
            "user_answers": payload.get("userAnswers"),
        })
