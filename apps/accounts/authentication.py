from django.conf import settings
from rest_framework.authentication import BaseAuthentication

from .services.exceptions import UnauthorizedError
from .services.session import resolve_session_user


class CookieTokenAuthentication(BaseAuthentication):
    """
    Authenticate requests from the auth_token session cookie.

    A missing or unusable cookie leaves the request anonymous; views and
    permissions decide whether that is acceptable.
    """

    def authenticate(self, request):
        token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not token:
            return None

        try:
            user = resolve_session_user(token)
        except UnauthorizedError:
            return None

        return user, token

    def authenticate_header(self, request):
        # Makes DRF answer 401 (not 403) for anonymous requests
        return f'Cookie realm="api", name="{settings.AUTH_COOKIE_NAME}"'
