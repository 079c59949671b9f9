"""
DRF permissions built on the tenant context.
"""

from rest_framework.permissions import BasePermission

from core.context import get_current_organization


class HasCurrentOrganization(BasePermission):
    """
    Allows access only when the request resolved a current organization.
    """

    message = "You need to create an organization first."

    def has_permission(self, request, view):
        return get_current_organization() is not None
