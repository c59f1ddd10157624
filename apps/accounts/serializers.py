from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """User profile with the size of their drink log."""

    display_name = serializers.CharField(
        source='get_display_name',
        read_only=True,
        help_text="Display name, or the email prefix when none is set."
    )
    drinks_count = serializers.IntegerField(
        source='drinks.count',
        read_only=True,
        help_text="Number of drinks the user has set up."
    )
    records_count = serializers.IntegerField(
        source='consumption_records.count',
        read_only=True,
        help_text="Number of consumption records logged."
    )

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'drinks_count',
            'records_count',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Email and password for obtaining a JWT pair."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
