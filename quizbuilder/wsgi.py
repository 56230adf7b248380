"""WSGI entry point for the quiz builder service."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "quizbuilder.settings")

application = get_wsgi_application()
