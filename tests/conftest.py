import pytest
from rest_framework.test import APIClient

from core.context import reset_current_organization


@pytest.fixture
def api_client():
    """
    Fixture to provide an instance of DRF APIClient.
    """
    return APIClient()


@pytest.fixture(autouse=True)
def enable_db_access_for_all_tests(db):
    """
    Automatically enables database access for all tests.
    """
    pass


@pytest.fixture(autouse=True)
def clean_tenant_context():
    """
    Tests pin organizations with set_current_organization(); never let one leak into the next test.
    """
    reset_current_organization()
    yield
    reset_current_organization()


@pytest.fixture(autouse=True)
def media_storage(settings, tmp_path):
    """
    Every test writes uploaded logos to its own temporary directory.
    """
    settings.MEDIA_ROOT = str(tmp_path / "storage")
    return tmp_path / "storage"
