"""
Models for the organizations application (Tenants and Memberships).
"""

import uuid

from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    """
    Role a user holds inside an organization.
    """

    GUARDIAN = "guardian", "Guardian"
    ADMIN = "admin", "Admin"


class Organization(models.Model):
    """
    Represents a Tenant (a league or club) in the system.

    The slug is derived from the name at creation time and is intentionally
    not unique: two clubs may share a name.
    """

    uuid = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, db_index=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="owned_organizations"
    )
    logo_path = models.ImageField(upload_to="logos/", max_length=255, blank=True, null=True)
    primary_color = models.CharField(max_length=255, blank=True, null=True)
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL, through="organizations.Membership", related_name="organizations"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    @property
    def logo_url(self):
        """
        Public URL of the stored logo (/storage/<reference>), or None.
        """
        if not self.logo_path:
            return None
        return self.logo_path.url


class MembershipQuerySet(models.QuerySet):
    def for_user(self, user):
        """
        Memberships of `user`, oldest first.
        """
        return self.filter(user=user).order_by("created_at", "pk")


class Membership(models.Model):
    """
    Pivot between users and organizations, carrying the user's role.
    At most one row per (organization, user) pair.
    """

    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name="memberships")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="memberships")
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.GUARDIAN)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = MembershipQuerySet.as_manager()

    class Meta:
        ordering = ["created_at", "pk"]
        constraints = [
            models.UniqueConstraint(fields=["organization", "user"], name="unique_membership_per_organization"),
        ]

    def __str__(self):
        return f"{self.user} - {self.organization.name} ({self.get_role_display()})"
