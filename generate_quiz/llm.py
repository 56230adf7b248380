import logging
import random

import google.generativeai as genai
from django.conf import settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """The generative-text provider failed or answered with something unusable."""


class ProviderNotConfigured(ProviderError):
    pass


# -----------------------------
# Gemini setup
# -----------------------------
def is_configured():
    return bool(settings.GEMINI_API_KEYS)


def get_gemini_model():
    """Pick a random API key to distribute load and create a model."""
    if not settings.GEMINI_API_KEYS:
        raise ProviderNotConfigured("No Gemini API keys configured.")
    genai.configure(api_key=random.choice(settings.GEMINI_API_KEYS))
    return genai.GenerativeModel(settings.GEMINI_MODEL)


def complete(prompt: str) -> str:
    """Send ``prompt`` to Gemini and return the response text.

    Only the SDK's ``response.text`` is accepted; blocked, empty or otherwise
    shapeless responses raise :class:`ProviderError`.
    """
    model = get_gemini_model()
    try:
        resp = model.generate_content(
            prompt,
            request_options={"timeout": settings.GEMINI_TIMEOUT},
        )
    except Exception as e:
        raise ProviderError(f"Gemini request failed: {e}") from e

    try:
        text = resp.text
    except (AttributeError, ValueError) as e:
        # .text raises ValueError when the candidate was blocked or has no parts
        raise ProviderError(f"Gemini returned no usable text: {e}") from e

    if not isinstance(text, str) or not text.strip():
        raise ProviderError("Gemini returned an empty response")
    logger.debug("Gemini responded with %d characters", len(text))
    return text
