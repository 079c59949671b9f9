"""
Signals for the organizations application.
Keeps the memoized "current organization" of the active request fresh.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.context import invalidate_current_organization
from organizations.models import Membership


@receiver([post_save, post_delete], sender=Membership)
def clear_current_organization(sender, instance, **kwargs):
    """
    Drops the resolved organization of the active context when the user's memberships change,
    so the next lookup in this request sees the new membership.
    """
    invalidate_current_organization(instance.user)
