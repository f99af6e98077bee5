"""Session resolution service for the auth_token cookie."""

from apps.accounts.models import User

from .exceptions import UnauthorizedError
from .session_tokens import get_token_issuer


def resolve_session_user(token) -> User:
    """
    Resolve the user bound to a session token.

    Raises:
        UnauthorizedError: If the token is absent, invalid or expired, or
            its username no longer exists
    """
    issuer = get_token_issuer()

    if not issuer.validate(token):
        raise UnauthorizedError()

    try:
        return User.objects.get_by_username(issuer.subject_of(token))
    except User.DoesNotExist:
        raise UnauthorizedError()


def who_am_i(token) -> dict:
    """Return the identity behind a session token."""
    user = resolve_session_user(token)
    return {
        'username': user.username,
        'is_admin': user.is_admin,
    }
