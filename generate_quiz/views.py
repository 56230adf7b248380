import logging
import uuid

from django.contrib import messages
from django.db import DatabaseError
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from quizbuilder.http import MalformedBody, form_error, json_error, parse_json_body

from .forms import QuizRequestForm
from .models import Quiz
from .services import generate_quiz, store_quiz

logger = logging.getLogger(__name__)


# -----------------------------
# Helpers
# -----------------------------
def find_quiz(quiz_id):
    """Return the quiz with this id, or None when the id is unknown or malformed."""
    try:
        pk = uuid.UUID(str(quiz_id))
    except ValueError:
        return None
    return Quiz.objects.prefetch_related("questions").filter(pk=pk).first()


def _create_from_form(form):
    data = form.cleaned_data
    result = generate_quiz(data["topic"], data["num_questions"], data["difficulty"])
    return store_quiz(data["topic"], result.quiz, result.source)


# -----------------------------
# JSON API
# -----------------------------
@csrf_exempt
@require_http_methods(["GET", "POST"])
def quizzes_api(request):
    if request.method == "GET":
        try:
            quizzes = list(Quiz.objects.prefetch_related("questions"))
            return JsonResponse([q.to_dict() for q in quizzes], safe=False)
        except DatabaseError:
            logger.exception("Listing quizzes failed")
            return json_error("Failed to fetch quizzes", status=500)

    try:
        payload = parse_json_body(request)
    except MalformedBody as e:
        return json_error(str(e))

    form = QuizRequestForm.from_json(payload)
    if not form.is_valid():
        return form_error(form)

    try:
        quiz = _create_from_form(form)
    except DatabaseError:
        logger.exception("Saving quiz failed")
        return json_error("Failed to create quiz", status=500)
    return JsonResponse(quiz.to_dict(), status=201)


@require_GET
def quiz_detail_api(request, quiz_id):
    try:
        quiz = find_quiz(quiz_id)
    except DatabaseError:
        logger.exception("Fetching quiz %s failed", quiz_id)
        return json_error("Failed to fetch quiz", status=500)
    if quiz is None:
        return json_error("Quiz not found", status=404)
    return JsonResponse(quiz.to_dict())


# -----------------------------
# Pages
# -----------------------------
def home(request):
    quizzes = Quiz.objects.all()
    return render(request, "generate_quiz/home.html", {"quizzes": quizzes})


def create_quiz(request):
    if request.method == "POST":
        form = QuizRequestForm(request.POST)
        if form.is_valid():
            try:
                quiz = _create_from_form(form)
            except DatabaseError:
                logger.exception("Saving quiz failed")
                messages.error(request, "Failed to generate quiz.")
                return render(request, "generate_quiz/create.html", {"form": form})
            if quiz.source == "fallback":
                messages.info(request, "The AI provider was unavailable, so a practice quiz was generated instead.")
            return redirect("quiz_page", quiz_id=quiz.pk)
        messages.error(request, "Please fix the errors.")
    else:
        form = QuizRequestForm()
    return render(request, "generate_quiz/create.html", {"form": form})


def quiz_page(request, quiz_id):
    quiz = find_quiz(quiz_id)
    if quiz is None:
        raise Http404("Quiz not found")
    return render(request, "generate_quiz/quiz.html", {
        "quiz": quiz,
        "questions": quiz.questions.all(),
    })
