from django.contrib import admin

from .models import Attempt


@admin.register(Attempt)
class AttemptAdmin(admin.ModelAdmin):
    list_display = ("id", "quiz_id", "score", "total", "created_at")
    readonly_fields = ("quiz_id", "user_answers", "score", "total", "created_at")
