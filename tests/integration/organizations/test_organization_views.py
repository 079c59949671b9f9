"""
Integration tests for the /api/organizations/ endpoints.
"""

from unittest.mock import patch

from django.core.files.storage import FileSystemStorage, default_storage
from django.db import IntegrityError
from rest_framework import status

from organizations.models import Membership, Organization, Role
from organizations.services import resolve_current_organization
from tests.factories.files import make_image_upload, make_large_image_upload, make_text_upload
from tests.factories.organizations import MembershipFactory, OrganizationFactory
from tests.factories.users import UserFactory

URL = "/api/organizations/"
CURRENT_URL = "/api/organizations/current/"


class TestCreateOrganization:
    """
    POST /api/organizations/
    """

    def test_full_provisioning_flow(self, api_client):
        """
        Register, create a club with a logo, then see it as the current organization.
        """
        register = api_client.post(
            "/api/auth/register/", data={"email": "founder@oakdale.org", "password": "StrongPassword123!"}
        )
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {register.data['access']}")

        response = api_client.post(
            URL,
            data={"name": "Oakdale Soccer Club", "logo": make_image_upload("crest.png"), "primary_color": "#114477"},
            format="multipart",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["message"] == "Organization created successfully."
        record = response.data["organization"]
        assert record["name"] == "Oakdale Soccer Club"
        assert record["slug"] == "oakdale-soccer-club"
        assert record["primary_color"] == "#114477"
        assert record["logo_path"].startswith("logos/")
        assert record["logo_url"] == f"/storage/{record['logo_path']}"
        assert default_storage.exists(record["logo_path"])

        org = Organization.objects.get(pk=record["id"])
        membership = Membership.objects.get(organization=org)
        assert membership.user.email == "founder@oakdale.org"
        assert membership.role == Role.GUARDIAN
        assert org.owner == membership.user

        current = api_client.get(CURRENT_URL)

        assert current.status_code == status.HTTP_200_OK
        assert current.data["id"] == org.id

    def test_json_submission_without_logo(self, api_client):
        api_client.force_authenticate(user=UserFactory())

        response = api_client.post(URL, data={"name": "Riverside Little League"}, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["organization"]["logo_path"] is None
        assert response.data["organization"]["logo_url"] is None
        assert response.data["organization"]["primary_color"] is None

    def test_long_free_form_color_is_accepted(self, api_client):
        api_client.force_authenticate(user=UserFactory())
        color = "club green with a thin gold trim stripe"

        response = api_client.post(URL, data={"name": "X", "primary_color": color}, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["organization"]["primary_color"] == color

    def test_requires_authentication(self, api_client):
        response = api_client.post(URL, data={"name": "Anonymous FC"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Organization.objects.count() == 0

    def test_validation_errors_are_reported_per_field(self, api_client):
        api_client.force_authenticate(user=UserFactory())

        response = api_client.post(URL, data={"name": "", "logo": make_text_upload()}, format="multipart")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.data
        assert "logo" in response.data
        assert Organization.objects.count() == 0

    def test_oversized_logo_is_rejected(self, api_client):
        api_client.force_authenticate(user=UserFactory())

        response = api_client.post(URL, data={"name": "Big Logo FC", "logo": make_large_image_upload()})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "kilobytes" in str(response.data["logo"])
        assert not default_storage.exists("logos")

    def test_storage_failure_returns_503(self, api_client):
        api_client.force_authenticate(user=UserFactory())

        with patch.object(FileSystemStorage, "save", side_effect=OSError("disk full")):
            response = api_client.post(URL, data={"name": "No Space FC", "logo": make_image_upload()})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert "logo" in response.data["detail"]
        assert Organization.objects.count() == 0

    def test_persistence_failure_returns_500(self, api_client):
        api_client.force_authenticate(user=UserFactory())

        with patch.object(Membership.objects, "create", side_effect=IntegrityError("boom")):
            response = api_client.post(URL, data={"name": "Doomed FC"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert Organization.objects.count() == 0


class TestListOrganizations:
    def test_lists_memberships_of_the_user_only(self, api_client):
        user = UserFactory()
        first = MembershipFactory(user=user, role=Role.GUARDIAN)
        second = MembershipFactory(user=user, role=Role.ADMIN)
        MembershipFactory()
        api_client.force_authenticate(user=user)

        response = api_client.get(URL)

        assert response.status_code == status.HTTP_200_OK
        assert [item["organization"]["id"] for item in response.data] == [
            first.organization_id,
            second.organization_id,
        ]
        assert [item["role"] for item in response.data] == ["guardian", "admin"]

    def test_owned_but_not_joined_organizations_are_not_listed(self, api_client):
        user = UserFactory()
        OrganizationFactory(owner=user)
        api_client.force_authenticate(user=user)

        response = api_client.get(URL)

        assert response.data == []


class TestCurrentOrganization:
    def test_returns_404_without_membership(self, api_client):
        api_client.force_authenticate(user=UserFactory())

        response = api_client.get(CURRENT_URL)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Create one" in response.data["detail"]

    def test_returns_first_membership(self, api_client):
        user = UserFactory()
        first = MembershipFactory(user=user)
        MembershipFactory(user=user)
        api_client.force_authenticate(user=user)

        response = api_client.get(CURRENT_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == first.organization_id
        assert response.data["uuid"] == str(first.organization.uuid)

    def test_reuses_the_organization_resolved_for_the_request(self, api_client):
        membership = MembershipFactory()
        api_client.force_authenticate(user=membership.user)

        spy = patch("organizations.services.resolve_current_organization", wraps=resolve_current_organization)
        with spy as resolver:
            response = api_client.get(CURRENT_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == membership.organization_id
        assert resolver.call_count == 1

    def test_requires_authentication(self, api_client):
        response = api_client.get(CURRENT_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
