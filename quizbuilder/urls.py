from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({"ok": True})


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health', health, name='health'),
    path('', include('generate_quiz.urls')),
    path('', include('attempts.urls')),
]
