"""
Abstract base models providing multi-tenancy capabilities.
"""

from django.db import models

from core.context import get_current_organization_id


class OrganizationOwnedModel(models.Model):
    """
    Abstract base class for all records that belong to exactly one organization.

    It only provides the `organization` link and auto-assignment on save.
    Read isolation is NOT inherited: concrete models declare
    `objects = TenantScopedManager()` themselves.
    """

    # db_index=True because this column is used in almost every WHERE clause.
    organization = models.ForeignKey(
        "organizations.Organization",
        on_delete=models.CASCADE,
        related_name="%(class)s_set",  # Generates names like 'season_set', 'team_set'
        db_index=True,
    )

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        """
        Overridden save method to automatically assign the organization.
        """
        # If the organization is not explicitly set, try to get it from the context
        if not self.organization_id:
            org_id = get_current_organization_id()
            if org_id:
                self.organization_id = org_id

        super().save(*args, **kwargs)
