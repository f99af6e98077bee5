"""
Service layer tests for accounts app.

Tests:
- reCAPTCHA verification (network path mocked)
- Login, registration and session resolution
- Credential checks on the user manager
"""

import pytest
import httpx
from unittest.mock import patch, MagicMock

from apps.accounts.models import User
from apps.accounts.services import (
    verify_captcha,
    authenticate_user,
    register_user,
    resolve_session_user,
    who_am_i,
    get_token_issuer,
    CaptchaRejectedError,
    InvalidCredentialsError,
    UsernameTakenError,
    UnauthorizedError,
)


@pytest.fixture
def captcha_enabled(settings):
    settings.RECAPTCHA_ENABLED = True
    settings.RECAPTCHA_SECRET_KEY = 'server-secret'
    settings.RECAPTCHA_VERIFY_URL = 'https://captcha.test/siteverify'
    return settings


@pytest.fixture
def mock_captcha_post():
    with patch('apps.accounts.services.captcha.httpx.post') as mock_post:
        mock_post.return_value = MagicMock()
        mock_post.return_value.json.return_value = {'success': True}
        yield mock_post


# ============================================================================
# CAPTCHA VERIFICATION
# ============================================================================

class TestVerifyCaptcha:

    def test_empty_token_fails_without_network(self, captcha_enabled, mock_captcha_post):
        assert verify_captcha('') is False
        assert verify_captcha(None) is False
        mock_captcha_post.assert_not_called()

    def test_disabled_accepts_any_token(self, settings, mock_captcha_post):
        settings.RECAPTCHA_ENABLED = False

        assert verify_captcha('anything') is True
        mock_captcha_post.assert_not_called()

    def test_success(self, captcha_enabled, mock_captcha_post):
        assert verify_captcha('widget-token') is True

        mock_captcha_post.assert_called_once()
        args, kwargs = mock_captcha_post.call_args
        assert args[0] == 'https://captcha.test/siteverify'
        assert kwargs['data'] == {'secret': 'server-secret', 'response': 'widget-token'}
        assert kwargs['timeout'] == captcha_enabled.RECAPTCHA_TIMEOUT

    def test_rejected_by_google(self, captcha_enabled, mock_captcha_post):
        mock_captcha_post.return_value.json.return_value = {
            'success': False,
            'error-codes': ['invalid-input-response'],
        }

        assert verify_captcha('widget-token') is False

    def test_success_must_be_true(self, captcha_enabled, mock_captcha_post):
        mock_captcha_post.return_value.json.return_value = {'success': 'yes'}

        assert verify_captcha('widget-token') is False

    def test_transport_error_fails_closed(self, captcha_enabled, mock_captcha_post):
        mock_captcha_post.side_effect = httpx.ConnectError('connection refused')

        assert verify_captcha('widget-token') is False

    def test_http_error_status_fails_closed(self, captcha_enabled, mock_captcha_post):
        mock_captcha_post.return_value.raise_for_status.side_effect = httpx.HTTPStatusError(
            'server error', request=MagicMock(), response=MagicMock()
        )

        assert verify_captcha('widget-token') is False

    def test_malformed_body_fails_closed(self, captcha_enabled, mock_captcha_post):
        mock_captcha_post.return_value.json.side_effect = ValueError('not json')

        assert verify_captcha('widget-token') is False

    def test_non_object_body_fails_closed(self, captcha_enabled, mock_captcha_post):
        mock_captcha_post.return_value.json.return_value = ['success']

        assert verify_captcha('widget-token') is False


# ============================================================================
# AUTHENTICATION
# ============================================================================

@pytest.mark.django_db
class TestAuthenticateUser:

    def test_success_returns_user_and_token(self, user):
        authenticated, token = authenticate_user(
            username='alice', password='password123', captcha_token='ok'
        )

        assert authenticated == user
        assert get_token_issuer().subject_of(token) == 'alice'

    def test_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(username='alice', password='nope', captcha_token='ok')

    def test_unknown_user(self, db):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(username='ghost', password='password123', captcha_token='ok')

    def test_captcha_checked_first(self, db):
        """A failed reCAPTCHA wins over bad credentials."""
        with pytest.raises(CaptchaRejectedError):
            authenticate_user(username='ghost', password='nope', captcha_token='')

    def test_captcha_rejected_by_google(self, user, captcha_enabled, mock_captcha_post):
        mock_captcha_post.return_value.json.return_value = {'success': False}

        with pytest.raises(CaptchaRejectedError):
            authenticate_user(username='alice', password='password123', captcha_token='bot')


# ============================================================================
# REGISTRATION
# ============================================================================

@pytest.mark.django_db
class TestRegisterUser:

    def test_creates_customer(self, db):
        user = register_user(
            username='bob', password='bobpass', email='bob@example.com', captcha_token='ok'
        )

        assert user.pk is not None
        assert user.is_admin is False
        assert User.objects.verify_credential('bob', 'bobpass')

    def test_username_taken_skips_captcha(self, user):
        with patch('apps.accounts.services.user_registration.verify_captcha') as mock_verify:
            with pytest.raises(UsernameTakenError):
                register_user(
                    username='alice', password='x', email='a@example.com', captcha_token='ok'
                )

        mock_verify.assert_not_called()

    def test_captcha_rejected(self, db):
        with pytest.raises(CaptchaRejectedError):
            register_user(
                username='bob', password='bobpass', email='bob@example.com', captcha_token=''
            )

        assert not User.objects.filter(username='bob').exists()


# ============================================================================
# SESSION RESOLUTION
# ============================================================================

@pytest.mark.django_db
class TestSession:

    def test_who_am_i(self, admin_user, issuer):
        identity = who_am_i(issuer.issue('admin'))

        assert identity == {'username': 'admin', 'is_admin': True}

    def test_resolve_missing_token(self, db):
        with pytest.raises(UnauthorizedError):
            resolve_session_user(None)

    def test_resolve_unknown_user(self, db, issuer):
        with pytest.raises(UnauthorizedError):
            resolve_session_user(issuer.issue('ghost'))


# ============================================================================
# CREDENTIAL STORE
# ============================================================================

@pytest.mark.django_db
class TestVerifyCredential:

    def test_exact_match(self, user):
        assert User.objects.verify_credential('alice', 'password123') is True

    def test_mismatch(self, user):
        assert User.objects.verify_credential('alice', 'password1234') is False

    def test_none_candidate(self, user):
        assert User.objects.verify_credential('alice', None) is False

    def test_unknown_user(self, db):
        assert User.objects.verify_credential('ghost', 'password123') is False

    def test_username_required(self, db):
        with pytest.raises(ValueError):
            User.objects.create_user(username='', password='x')
