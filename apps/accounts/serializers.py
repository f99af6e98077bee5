from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Identity returned by login and /me."""

    isAdmin = serializers.BooleanField(source='is_admin', read_only=True)

    class Meta:
        model = User
        fields = ['username', 'isAdmin']
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True, trim_whitespace=False)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    # An absent token is a failed challenge, not a malformed request
    recaptchaToken = serializers.CharField(required=False, allow_blank=True, default='')


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.CharField(required=True, max_length=150, trim_whitespace=False)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    email = serializers.EmailField(required=True, max_length=255)
    recaptchaToken = serializers.CharField(required=False, allow_blank=True, default='')
