"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    CaptchaRejectedError,
    InvalidCredentialsError,
    UsernameTakenError,
    UnauthorizedError,
    InvalidSessionTokenError,
)
from .session_tokens import SessionTokenIssuer, get_token_issuer
from .captcha import verify_captcha
from .user_authentication import authenticate_user
from .user_registration import register_user
from .session import resolve_session_user, who_am_i

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'CaptchaRejectedError',
    'InvalidCredentialsError',
    'UsernameTakenError',
    'UnauthorizedError',
    'InvalidSessionTokenError',
    # Tokens
    'SessionTokenIssuer',
    'get_token_issuer',
    # Services
    'verify_captcha',
    'authenticate_user',
    'register_user',
    'resolve_session_user',
    'who_am_i',
]
