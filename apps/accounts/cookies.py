"""Helpers for the auth_token session cookie."""

from django.conf import settings

SESSION_COOKIE_MAX_AGE = 24 * 60 * 60


def set_session_cookie(response, token):
    """Attach a freshly issued session token to the response."""
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=SESSION_COOKIE_MAX_AGE,
        path='/',
        secure=settings.AUTH_COOKIE_SECURE,
        httponly=True,
        samesite='Strict',
    )
    return response


def expire_session_cookie(response):
    """Overwrite the session cookie with an empty, already expired value."""
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        '',
        max_age=0,
        path='/',
        secure=settings.AUTH_COOKIE_SECURE,
        httponly=True,
        samesite='Strict',
    )
    return response
