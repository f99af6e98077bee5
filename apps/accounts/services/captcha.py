"""reCAPTCHA verification service."""

import logging

import httpx
from django.conf import settings

logger = logging.getLogger(__name__)


def verify_captcha(token) -> bool:
    """
    Verify a reCAPTCHA response token with Google's siteverify endpoint.

    Fails closed: a missing token, a transport error, a non-2xx reply or a
    malformed body all count as a failed challenge.

    Args:
        token: Response token produced by the reCAPTCHA widget

    Returns:
        True if Google confirmed the challenge
    """
    if not token:
        return False

    if not settings.RECAPTCHA_ENABLED:
        return True

    try:
        response = httpx.post(
            settings.RECAPTCHA_VERIFY_URL,
            data={
                'secret': settings.RECAPTCHA_SECRET_KEY,
                'response': token,
            },
            timeout=settings.RECAPTCHA_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("reCAPTCHA verification unavailable: %s", e)
        return False

    if not isinstance(payload, dict):
        logger.warning("reCAPTCHA returned unexpected payload: %r", payload)
        return False

    if payload.get('success') is not True:
        logger.info("reCAPTCHA rejected token: %s", payload.get('error-codes', []))
        return False

    return True
