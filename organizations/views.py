"""
API Views for the organizations application.
"""

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from organizations.models import Membership
from organizations.serializers import CreateOrganizationSerializer, MembershipSerializer, OrganizationSerializer


class OrganizationViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.CreateModelMixin):
    """
    GET  /api/organizations/          organizations of the current user, with role
    POST /api/organizations/          create an organization (multipart form or JSON)
    GET  /api/organizations/current/  the organization resolved for this request
    """

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_queryset(self):
        return Membership.objects.for_user(self.request.user).select_related("organization")

    def get_serializer_class(self):
        if self.action == "create":
            return CreateOrganizationSerializer
        if self.action == "current":
            return OrganizationSerializer
        return MembershipSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        return Response(
            {"message": "Organization created successfully.", "organization": serializer.data},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"])
    def current(self, request):
        """
        The organization memoized on this request by TenantContextMiddleware.
        """
        organization = request.tenant_context.organization
        if organization is None:
            return Response(
                {"detail": "You do not belong to an organization yet. Create one to get started."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(OrganizationSerializer(organization, context={"request": request}).data)
