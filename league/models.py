"""
Models for the League application.

Every model here belongs to one organization and declares TenantScopedManager
explicitly, so `Model.objects` only ever sees the current organization's rows.
"""

from django.db import models

from core.managers import TenantScopedManager
from core.models import OrganizationOwnedModel


class Season(OrganizationOwnedModel):
    """
    A playing season (e.g. "Spring 2026").
    """

    name = models.CharField(max_length=255)
    starts_on = models.DateField(blank=True, null=True)
    ends_on = models.DateField(blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = TenantScopedManager()

    class Meta:
        ordering = ["-starts_on", "name"]

    def __str__(self):
        return self.name


class Team(OrganizationOwnedModel):
    season = models.ForeignKey(Season, on_delete=models.CASCADE, related_name="teams")
    name = models.CharField(max_length=255)
    color = models.CharField(max_length=32, blank=True)

    objects = TenantScopedManager()

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.season.name})"


class Player(OrganizationOwnedModel):
    """
    A player registered on a team. NOT a system user.
    """

    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name="players")
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    date_of_birth = models.DateField(blank=True, null=True)
    jersey_number = models.PositiveSmallIntegerField(blank=True, null=True)

    objects = TenantScopedManager()

    class Meta:
        ordering = ["last_name", "first_name"]

    def __str__(self):
        return f"{self.first_name} {self.last_name}"
