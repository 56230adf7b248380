import logging

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

from generate_quiz.views import find_quiz
from quizbuilder.http import MalformedBody, form_error, json_error, parse_json_body

from .forms import AttemptForm
from .models import Attempt, attach_quizzes
from .scoring import score_quiz

logger = logging.getLogger(__name__)


def record_attempt(quiz, user_answers):
    """Score ``user_answers`` against ``quiz`` and store the attempt."""
    score = score_quiz(quiz, user_answers)
    return Attempt.objects.create(
        quiz_id=quiz.pk,
        user_answers=user_answers,
        score=score,
        total=len(quiz.questions.all()),
    )


# -----------------------------
# JSON API
# -----------------------------
@csrf_exempt
@require_http_methods(["GET", "POST"])
def attempts_api(request):
    if request.method == "GET":
        try:
            rows = attach_quizzes(Attempt.objects.all())
        except DatabaseError:
            logger.exception("Listing attempts failed")
            return json_error("Failed to fetch attempts", status=500)
        return JsonResponse([a.to_dict(quiz) for a, quiz in rows], safe=False)

    try:
        payload = parse_json_body(request)
    except MalformedBody as e:
        return json_error(str(e))

    form = AttemptForm.from_json(payload)
    if not form.is_valid():
        return form_error(form)

    try:
        quiz = find_quiz(form.cleaned_data["quiz_id"])
        if quiz is None:
            return json_error("Quiz not found", status=404)
        attempt = record_attempt(quiz, form.cleaned_data["user_answers"])
    except DatabaseError:
        logger.exception("Submitting attempt failed")
        return json_error("Failed to submit attempt", status=500)

    logger.info("Attempt %s on quiz %s scored %d/%d", attempt.pk, quiz.pk, attempt.score, attempt.total)
    return JsonResponse(attempt.to_dict(quiz), status=201)


# -----------------------------
# Pages
# -----------------------------
@require_POST
def submit_quiz(request, quiz_id):
    """Evaluate answers posted from the quiz page and show the attempt history."""
    quiz = find_quiz(quiz_id)
    if quiz is None:
        raise Http404("Quiz not found")

    user_answers = [
        request.POST.get(f"q_{idx}") or None
        for idx in range(len(quiz.questions.all()))
    ]
    try:
        attempt = record_attempt(quiz, user_answers)
    except DatabaseError:
        logger.exception("Submitting attempt failed")
        messages.error(request, "Failed to submit attempt.")
        return redirect("quiz_page", quiz_id=quiz.pk)

    messages.success(request, f"You scored {attempt.score}/{attempt.total} on {quiz.title}.")
    return redirect("attempts_page")


def attempts_page(request):
    rows = attach_quizzes(Attempt.objects.all())
    return render(request, "attempts/attempts.html", {"rows": rows})
