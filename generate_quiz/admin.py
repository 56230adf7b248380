from django.contrib import admin

from .models import Question, Quiz


class QuestionInline(admin.TabularInline):
    model = Question
    extra = 0
    readonly_fields = ("position", "text", "options", "answer")
    can_delete = False


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ("title", "topic", "difficulty", "num_questions", "source", "created_at")
    list_filter = ("difficulty", "source")
    search_fields = ("title", "topic")
    inlines = [QuestionInline]
