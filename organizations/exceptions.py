"""
Errors raised while provisioning organizations.

Service code raises the plain ProvisioningError family; serializers translate
them into the API exceptions at the bottom of this module.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class ProvisioningError(Exception):
    """
    Base class for failures that abort organization provisioning.
    """


class StorageFailure(ProvisioningError):
    """
    The supplied logo could not be written to storage. Nothing was persisted.
    """


class PersistenceFailure(ProvisioningError):
    """
    The database rejected the organization or membership rows. The transaction was rolled back.
    """


class LogoStorageUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "The logo could not be stored. Please try again."
    default_code = "storage_failure"


class OrganizationNotSaved(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "The organization could not be created. Please try again."
    default_code = "persistence_failure"
