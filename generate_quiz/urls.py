from django.urls import path
from . import views

urlpatterns = [
    path("api/quizzes", views.quizzes_api, name="quizzes_api"),
    path("api/quizzes/<str:quiz_id>", views.quiz_detail_api, name="quiz_detail_api"),
    path("", views.home, name="home"),
    path("quizzes/new/", views.create_quiz, name="create_quiz"),
    path("quizzes/<str:quiz_id>/", views.quiz_page, name="quiz_page"),
]
