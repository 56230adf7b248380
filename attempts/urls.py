from django.urls import path
from . import views

urlpatterns = [
    path("api/attempts", views.attempts_api, name="attempts_api"),
    path("quizzes/<str:quiz_id>/submit/", views.submit_quiz, name="submit_quiz"),
    path("attempts/", views.attempts_page, name="attempts_page"),
]
