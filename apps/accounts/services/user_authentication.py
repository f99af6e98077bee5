"""User authentication service."""

import logging

from apps.accounts.models import User

from .captcha import verify_captcha
from .exceptions import CaptchaRejectedError, InvalidCredentialsError
from .session_tokens import get_token_issuer

logger = logging.getLogger(__name__)


def authenticate_user(*, username: str, password: str, captcha_token: str) -> tuple[User, str]:
    """
    Log a user in and issue a session token.

    Args:
        username: Account username
        password: Password as typed by the user
        captcha_token: reCAPTCHA response token from the login form

    Returns:
        Tuple of (authenticated User, signed session token)

    Raises:
        CaptchaRejectedError: If the reCAPTCHA check fails
        InvalidCredentialsError: If the user does not exist or the password is wrong
    """
    if not verify_captcha(captcha_token):
        raise CaptchaRejectedError()

    if not User.objects.verify_credential(username, password):
        logger.warning("Failed login for username=%s", username)
        raise InvalidCredentialsError()

    user = User.objects.get_by_username(username)
    token = get_token_issuer().issue(user.username)

    logger.info("User %s logged in", user.username)
    return user, token
