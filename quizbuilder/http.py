"""Small JSON helpers shared by the API views."""
import json

from django.http import JsonResponse


class MalformedBody(ValueError):
    pass


def json_error(message, status=400, **extra):
    return JsonResponse({"error": message, **extra}, status=status)


def form_error(form):
    """400 response listing every validation message of a bound form."""
    fields = {name: [str(e) for e in errors] for name, errors in form.errors.items()}
    first = next(iter(fields.values()), ["Invalid request"])[0]
    return json_error(first, fields=fields)


def parse_json_body(request):
    """Decode a JSON object body; raise MalformedBody for anything else."""
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedBody(f"Malformed JSON body: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedBody("Request body must be a JSON object")
    return payload
