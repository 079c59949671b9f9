import logging
from datetime import timedelta

from celery import shared_task
from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone

from organizations.models import Organization
from organizations.services import LOGO_NAMESPACE

logger = logging.getLogger(__name__)


@shared_task
def purge_orphaned_logos():
    """
    Periodic task deleting logo files that no organization references.

    Provisioning writes the logo before its database transaction, so a failed
    commit leaves the file behind. Files younger than the grace period are kept
    because their transaction may still be running.
    """
    cutoff = timezone.now() - timedelta(seconds=settings.ORPHANED_LOGO_GRACE_SECONDS)

    try:
        _, filenames = default_storage.listdir(LOGO_NAMESPACE)
    except FileNotFoundError:
        return "Finished. No logos stored yet."

    referenced = set(
        Organization.objects.exclude(logo_path__isnull=True)
        .exclude(logo_path="")
        .values_list("logo_path", flat=True)
    )

    deleted_count = 0

    for filename in filenames:
        name = f"{LOGO_NAMESPACE}/{filename}"
        if name in referenced:
            continue
        if default_storage.get_modified_time(name) > cutoff:
            continue

        default_storage.delete(name)
        deleted_count += 1
        logger.info("Deleted orphaned logo %s", name)

    return f"Finished. Checked {len(filenames)} logos. Deleted: {deleted_count}"
