import json
import logging
from functools import wraps

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from .exceptions import RentalError

logger = logging.getLogger(__name__)


class InvalidPayloadError(Exception):
    """Raised when a request body or query string cannot be used."""

    def __init__(self, message="Invalid request data", errors=None):
        self.message = message
        self.errors = errors
        super().__init__(message)


def api_view(methods):
    """
    Wrap a JSON endpoint: exempt it from CSRF, restrict the HTTP methods and
    turn domain errors into JSON error responses.
    """
    def decorator(view):
        @csrf_exempt
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            if request.method not in methods:
                return JsonResponse({'success': False, 'error': 'Method not allowed'}, status=405)
            try:
                return view(request, *args, **kwargs)
            except InvalidPayloadError as e:
                payload = {'success': False, 'error': e.message}
                if e.errors is not None:
                    payload['errors'] = e.errors
                return JsonResponse(payload, status=400)
            except RentalError as e:
                logger.info("%s %s rejected: %s", request.method, request.path, e.message)
                return JsonResponse({'success': False, 'error': e.message}, status=e.status_code)
        return wrapper
    return decorator


def json_body(request):
    """Decode the request body as a JSON object."""
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidPayloadError("Invalid JSON body")
    if not isinstance(data, dict):
        raise InvalidPayloadError("JSON body must be an object")
    return data


def validated(form):
    """Return the form's cleaned data or raise with its field errors."""
    if not form.is_valid():
        errors = {field: [str(e) for e in errs] for field, errs in form.errors.items()}
        raise InvalidPayloadError("Invalid request data", errors=errors)
    return form.cleaned_data


def parse_bool(value, name):
    if value is None:
        raise InvalidPayloadError(f"Query parameter '{name}' is required")
    lowered = value.strip().lower()
    if lowered in ('true', '1', 'yes'):
        return True
    if lowered in ('false', '0', 'no'):
        return False
    raise InvalidPayloadError(f"Query parameter '{name}' must be true or false")


def parse_number(value, name, cast=int):
    if value in (None, ''):
        return None
    try:
        return cast(value)
    except (TypeError, ValueError, ArithmeticError):
        raise InvalidPayloadError(f"Query parameter '{name}' must be a number")
