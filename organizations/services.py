"""
Service layer for Organization business logic.
Handles tenant resolution and atomic provisioning of new organizations.
"""

import logging
import os
import uuid
from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import default_storage
from django.db import DatabaseError, transaction
from django.utils.text import slugify

from organizations.exceptions import PersistenceFailure, StorageFailure
from organizations.models import Membership, Organization, Role

logger = logging.getLogger(__name__)

LOGO_NAMESPACE = "logos"


def resolve_current_organization(user) -> Optional[Organization]:
    """
    Returns the organization of the user's first membership, or None.

    A user may belong to several organizations; the oldest membership wins.
    Anonymous users and users without memberships have no organization.
    """
    if user is None or not user.is_authenticated:
        return None

    membership = Membership.objects.for_user(user).select_related("organization").first()
    if membership is None:
        return None
    return membership.organization


@dataclass(frozen=True)
class OrganizationInput:
    """
    The writable fields of a new organization.
    """

    name: str
    logo: Optional[object] = None
    primary_color: Optional[str] = None


class OrganizationService:
    """
    Encapsulates the rules for creating organizations.
    """

    def store_logo(self, logo) -> str:
        """
        Saves an uploaded logo under the logos namespace and returns its storage reference.
        """
        extension = os.path.splitext(logo.name or "")[1].lower()
        name = f"{LOGO_NAMESPACE}/{uuid.uuid4().hex}{extension}"

        try:
            return default_storage.save(name, logo)
        except (OSError, SuspiciousFileOperation) as exc:
            logger.error("Failed to store organization logo %s: %s", name, exc)
            raise StorageFailure("The logo could not be stored.") from exc

    def create_organization(self, user, data: OrganizationInput) -> Organization:
        """
        Creates an organization owned by `user` and makes `user` its guardian.

        The logo is written first, outside the transaction: a failed commit may
        leave an unreferenced file behind, but never a row pointing to a missing file.

        Args:
            user: The requesting (authenticated) user.
            data: Validated input.

        Returns:
            The created Organization.
        """
        # 1. Persist the logo (if any)
        logo_path = self.store_logo(data.logo) if data.logo else None

        # 2-5. Organization and membership are committed together or not at all
        try:
            with transaction.atomic():
                organization = Organization.objects.create(
                    uuid=uuid.uuid4(),
                    name=data.name,
                    slug=slugify(data.name),
                    owner=user,
                    logo_path=logo_path,
                    primary_color=data.primary_color or None,
                )

                Membership.objects.create(organization=organization, user=user, role=Role.GUARDIAN)
        except DatabaseError as exc:
            logger.error("Failed to provision organization %r for user %s: %s", data.name, user.pk, exc)
            raise PersistenceFailure("The organization could not be saved.") from exc

        logger.info("Organization %s (%s) created by user %s", organization.pk, organization.slug, user.pk)
        return organization
