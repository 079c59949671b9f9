"""
Serializers for User authentication and profile management.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken

from core.context import get_current_organization
from organizations.serializers import OrganizationSerializer

User = get_user_model()


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for viewing the current user's profile (/me/).
    """

    organization = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "email", "first_name", "last_name", "organization"]

    def get_organization(self, instance):
        """
        The organization resolved for this request, or None when the user has none yet.
        """
        organization = get_current_organization()
        if organization is None:
            return None
        return OrganizationSerializer(organization).data


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for registering a new User.
    Organizations are provisioned afterwards through /api/organizations/.
    """

    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    class Meta:
        model = User
        fields = ["id", "email", "password", "first_name", "last_name"]
        read_only_fields = ["id"]

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)

    def to_representation(self, instance):
        """
        Customize response to include JWT tokens immediately after registration.
        """
        data = super().to_representation(instance)

        # Generate tokens manually
        refresh = RefreshToken.for_user(instance)

        data["access"] = str(refresh.access_token)
        data["refresh"] = str(refresh)

        return data
