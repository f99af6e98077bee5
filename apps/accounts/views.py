from django.conf import settings
from rest_framework import serializers
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .cookies import set_session_cookie, expire_session_cookie
from .serializers import (
    UserSerializer,
    UserLoginSerializer,
    UserRegistrationSerializer,
)
from .services import authenticate_user, register_user, who_am_i


# Response serializers for API documentation
class LoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    username = serializers.CharField()
    isAdmin = serializers.BooleanField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    kind = serializers.CharField()
    message = serializers.CharField()
    context = serializers.DictField()


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Verify reCAPTCHA and credentials, then set the auth_token session cookie.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user, token = authenticate_user(
        username=serializer.validated_data['username'],
        password=serializer.validated_data['password'],
        captcha_token=serializer.validated_data['recaptchaToken'],
    )

    response = Response({
        'message': 'auth.loggedIn',
        **UserSerializer(user).data,
    })
    return set_session_cookie(response, token)


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer},
    description="Expire the auth_token session cookie.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def logout(request):
    """Logout by expiring the session cookie."""
    response = Response({'message': 'auth.loggedOut'})
    return expire_session_cookie(response)


@extend_schema(
    responses={
        200: UserSerializer,
        401: ErrorResponseSerializer,
    },
    description="Return the user bound to the auth_token session cookie.",
    tags=['auth'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def get_current_user(request):
    """Get the identity of the logged-in user."""
    identity = who_am_i(request.COOKIES.get(settings.AUTH_COOKIE_NAME))
    return Response({
        'username': identity['username'],
        'isAdmin': identity['is_admin'],
    })


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new customer account.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    register_user(
        username=serializer.validated_data['username'],
        password=serializer.validated_data['password'],
        email=serializer.validated_data['email'],
        captcha_token=serializer.validated_data['recaptchaToken'],
    )

    return Response({'message': 'auth.registered'})
