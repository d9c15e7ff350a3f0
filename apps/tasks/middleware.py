import logging
from django.conf import settings
from django.http import JsonResponse
from django.utils.crypto import constant_time_compare
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

API_PREFIX = '/api'
API_KEY_HEADER = 'X-API-KEY'


class ApiKeyMiddleware(MiddlewareMixin):
    """
    Guards every /api route with a shared secret.
    - Pre-flight OPTIONS requests pass untouched.
    - X-API-KEY must equal settings.API_KEY (constant-time compare).
    - An empty key is always rejected, even if API_KEY is empty too.
    A rejected request never reaches the view.
    """

    def process_request(self, request):
        if not request.path_info.startswith(API_PREFIX):
            return None

        if request.method == 'OPTIONS':
            return None

        provided = request.headers.get(API_KEY_HEADER, '')
        expected = getattr(settings, 'API_KEY', '') or ''

        if provided and constant_time_compare(expected, provided):
            return None

        logger.warning(f"Rejected API request without a valid key: {request.method} {request.path_info}")
        response = JsonResponse(
            {'error': 'Invalid or missing API key.'},
            status=401,
            json_dumps_params={'indent': 4, 'ensure_ascii': False},
        )
        response['WWW-Authenticate'] = 'API key required'
        return response
