"""Domain-specific exceptions for accounts services."""

from rest_framework import status

from apps.common.errors import ShopError


class AccountsServiceError(ShopError):
    """Base exception for accounts services."""
    pass


class CaptchaRejectedError(AccountsServiceError):
    """Raised when the reCAPTCHA challenge fails or cannot be verified."""
    kind = 'captcha_rejected'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'auth.captchaFailed'


class InvalidCredentialsError(AccountsServiceError):
    """Raised when username or password do not match."""
    kind = 'invalid_credentials'
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'auth.invalidCredentials'


class UsernameTakenError(AccountsServiceError):
    """Raised when registering a username that already exists."""
    kind = 'username_taken'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'auth.usernameTaken'


class UnauthorizedError(AccountsServiceError):
    """Raised when the session token is missing, invalid or expired."""
    kind = 'unauthorized'
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'auth.unauthorized'


class InvalidSessionTokenError(AccountsServiceError):
    """Raised when reading the subject of a token that does not validate."""
    kind = 'unauthorized'
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'auth.unauthorized'
