"""
Session tokens for the ``auth_token`` cookie.

A session token is an HS256-signed JWT carrying only the username
(``sub``), the issue time (``iat``) and the expiry (``exp``). Nothing is
stored server-side: a token is valid as long as its signature checks out
against the signing key and ``exp`` is in the future.

The signing key is handed to ``SessionTokenIssuer`` explicitly, so tests
and key rotation can build their own issuer. ``get_token_issuer()``
builds the one configured in settings.

Example:
    issuer = SessionTokenIssuer(signing_key=key)
    token = issuer.issue('alice')
    issuer.validate(token)      # True
    issuer.subject_of(token)    # 'alice'
"""

from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError

from .exceptions import InvalidSessionTokenError

ALGORITHM = 'HS256'
MIN_KEY_BYTES = 32
DEFAULT_LIFETIME = timedelta(hours=24)


class SessionTokenIssuer:
    """Issue and verify signed, time-limited session tokens."""

    def __init__(self, signing_key, lifetime=DEFAULT_LIFETIME):
        if isinstance(signing_key, str):
            key_length = len(signing_key.encode('utf-8'))
        else:
            key_length = len(signing_key or b'')

        if key_length < MIN_KEY_BYTES:
            raise ImproperlyConfigured(
                f"Session token signing key must be at least {MIN_KEY_BYTES} bytes"
            )

        self.lifetime = lifetime
        self._backend = TokenBackend(ALGORITHM, signing_key=signing_key)

    def issue(self, username: str, *, now=None) -> str:
        """Sign a token for ``username`` valid for ``lifetime`` from ``now``."""
        issued_at = now or timezone.now()
        expires_at = issued_at + self.lifetime

        return self._backend.encode({
            'sub': username,
            'iat': int(issued_at.timestamp()),
            'exp': int(expires_at.timestamp()),
        })

    def validate(self, token) -> bool:
        """True if the token is well-formed, correctly signed and unexpired."""
        if not token:
            return False

        try:
            self._backend.decode(token)
        except TokenBackendError:
            return False

        return True

    def subject_of(self, token) -> str:
        """
        Return the username bound to a valid token.

        Raises:
            InvalidSessionTokenError: If the token does not validate
        """
        if not token:
            raise InvalidSessionTokenError("Session token is missing")

        try:
            payload = self._backend.decode(token)
        except TokenBackendError as e:
            raise InvalidSessionTokenError(f"Session token is invalid: {e}") from e

        subject = payload.get('sub')
        if not subject:
            raise InvalidSessionTokenError("Session token has no subject")

        return subject


def get_token_issuer() -> SessionTokenIssuer:
    """Build the issuer configured in settings."""
    return SessionTokenIssuer(
        signing_key=settings.SESSION_TOKEN_SIGNING_KEY,
        lifetime=timedelta(hours=settings.SESSION_TOKEN_LIFETIME_HOURS),
    )
