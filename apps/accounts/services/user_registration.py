"""User registration service."""

import logging

from django.db import transaction, IntegrityError

from apps.accounts.models import User

from .captcha import verify_captcha
from .exceptions import CaptchaRejectedError, UsernameTakenError

logger = logging.getLogger(__name__)


def register_user(
    *,
    username: str,
    password: str,
    email: str,
    captcha_token: str
) -> User:
    """
    Register a new non-admin shop account.

    A taken username is reported before the reCAPTCHA is checked, so it
    fails the same way whatever the challenge outcome.

    Args:
        username: Requested username (must be unique)
        password: Password, stored as submitted
        email: Address that receives order summaries
        captcha_token: reCAPTCHA response token from the registration form

    Returns:
        Created User instance

    Raises:
        UsernameTakenError: If the username already exists
        CaptchaRejectedError: If the reCAPTCHA check fails
    """
    if User.objects.filter(username=username).exists():
        raise UsernameTakenError()

    if not verify_captcha(captcha_token):
        raise CaptchaRejectedError()

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                password=password,
                email=email,
            )
    except IntegrityError:
        # Lost a race with a concurrent registration
        raise UsernameTakenError()

    logger.info("Registered user %s", user.username)
    return user
