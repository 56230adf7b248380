import pytest

from attempts.models import Attempt
from generate_quiz.models import Quiz

pytestmark = pytest.mark.django_db


def test_home_lists_quizzes(client):
    assert "No quizzes yet" in client.get("/").content.decode()


def test_create_take_and_submit(client):
    resp = client.post("/quizzes/new/", {"topic": "Planets", "num_questions": "2", "difficulty": "easy"})
    quiz = Quiz.objects.get()
    assert resp.status_code == 302
    assert resp.url == f"/quizzes/{quiz.pk}/"

    page = client.get(resp.url).content.decode()
    assert quiz.title in page
    assert 'name="q_1"' in page

    answers = quiz.answer_key()
    resp = client.post(f"/quizzes/{quiz.pk}/submit/", {"q_0": answers[0]}, follow=True)
    attempt = Attempt.objects.get()
    assert attempt.user_answers == [answers[0], None]
    assert attempt.score == 1
    assert "You scored 1/2" in resp.content.decode()


def test_create_form_errors(client):
    resp = client.post("/quizzes/new/", {"topic": "", "num_questions": "99"})
    assert resp.status_code == 200
    assert "Please fix the errors." in resp.content.decode()
    assert Quiz.objects.count() == 0


def test_unknown_quiz_page(client):
    assert client.get("/quizzes/not-a-uuid/").status_code == 404
