"""
Serializers for the organizations application.
"""

from django.conf import settings
from rest_framework import serializers

from organizations.exceptions import (
    LogoStorageUnavailable,
    OrganizationNotSaved,
    PersistenceFailure,
    StorageFailure,
)
from organizations.models import Membership, Organization
from organizations.services import OrganizationInput, OrganizationService


class OrganizationSerializer(serializers.ModelSerializer):
    """
    Plain record of an organization, as exposed to clients.
    """

    owner_id = serializers.IntegerField(read_only=True)
    # The storage reference itself, not a URL
    logo_path = serializers.CharField(source="logo_path.name", read_only=True, allow_null=True)
    logo_url = serializers.CharField(read_only=True, allow_null=True)

    class Meta:
        model = Organization
        fields = ["id", "uuid", "name", "slug", "owner_id", "logo_path", "logo_url", "primary_color", "created_at"]
        read_only_fields = fields


class MembershipSerializer(serializers.ModelSerializer):
    """
    An organization the user belongs to, with the user's role in it.
    """

    organization = OrganizationSerializer(read_only=True)

    class Meta:
        model = Membership
        fields = ["role", "organization", "created_at"]


class CreateOrganizationSerializer(serializers.Serializer):
    """
    Validates organization submissions (multipart form or JSON) and provisions them.
    """

    name = serializers.CharField(max_length=255)
    logo = serializers.ImageField(required=False, allow_null=True)
    primary_color = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)

    def validate_logo(self, value):
        if value is None:
            return value

        limit_kb = settings.ORGANIZATION_LOGO_MAX_KB
        if value.size > limit_kb * 1024:
            raise serializers.ValidationError(f"The logo may not be greater than {limit_kb} kilobytes.")
        return value

    def create(self, validated_data):
        """
        Hands the validated fields to the service and translates its failures into API errors.
        """
        request = self.context.get("request")
        data = OrganizationInput(
            name=validated_data["name"],
            logo=validated_data.get("logo"),
            primary_color=validated_data.get("primary_color"),
        )

        service = OrganizationService()

        try:
            return service.create_organization(request.user, data)
        except StorageFailure as e:
            raise LogoStorageUnavailable() from e
        except PersistenceFailure as e:
            raise OrganizationNotSaved() from e

    def to_representation(self, instance):
        return OrganizationSerializer(instance, context=self.context).data
