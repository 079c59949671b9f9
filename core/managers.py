"""
Custom Django managers for core functionality (multi-tenancy).
"""

from django.apps import apps
from django.db import models
from django.db.models import Q

from core.context import get_current_organization_id

TENANT_FIELD = "organization_id"


def organization_predicate(organization) -> Q:
    """
    Builds the `organization_id = <id>` predicate for an organization or a raw id.
    """
    organization_id = getattr(organization, "pk", organization)
    return Q(**{TENANT_FIELD: organization_id})


def scope_to_current_organization(queryset):
    """
    AND-combines the current organization predicate into `queryset`.

    With no resolved organization (system tasks, management commands, users
    without a membership) the queryset is returned unchanged.
    """
    org_id = get_current_organization_id()
    if org_id is None:
        return queryset
    return queryset.filter(organization_predicate(org_id))


class TenantScopedQuerySet(models.QuerySet):
    def for_organization(self, organization):
        """
        Narrows the queryset to an explicit organization.
        """
        return self.filter(organization_predicate(organization))


class TenantScopedManager(models.Manager.from_queryset(TenantScopedQuerySet)):
    """
    A manager that automatically filters querysets by the current organization.

    Models opt in by declaring `objects = TenantScopedManager()`; every chained
    call (filter, exclude, get, ...) starts from the scoped queryset.
    """

    def get_queryset(self):
        return scope_to_current_organization(super().get_queryset())

    def unscoped(self):
        """
        Explicit bypass for administrative and cross-tenant code paths.
        """
        return super().get_queryset()


def tenant_scoped_models():
    """
    Returns every installed model whose default manager applies tenant scoping.
    """
    return [model for model in apps.get_models() if isinstance(model._default_manager, TenantScopedManager)]
