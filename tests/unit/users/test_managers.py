"""
Unit tests for CustomUserManager (email as the login identifier).
"""

import pytest
from django.contrib.auth import get_user_model

User = get_user_model()


class TestCustomUserManager:
    """
    Test suite for create_user and create_superuser.
    """

    def test_create_user_without_email_raises_error(self):
        with pytest.raises(ValueError) as exc:
            User.objects.create_user(email=None, password="password123")

        assert "The Email must be set" in str(exc.value)

    def test_create_user_normalizes_domain_and_hashes_password(self):
        user = User.objects.create_user(email="Coach@Riverside.ORG", password="password123")

        assert user.email == "Coach@riverside.org"
        assert user.password != "password123"
        assert user.check_password("password123")
        assert user.is_staff is False

    def test_create_superuser_success(self):
        """
        create_superuser sets is_staff, is_superuser and is_active.
        """
        admin_user = User.objects.create_superuser(email="admin@league.test", password="password123")

        assert admin_user.is_staff is True
        assert admin_user.is_superuser is True
        assert admin_user.is_active is True

    @pytest.mark.parametrize("flag", ["is_staff", "is_superuser"])
    def test_create_superuser_requires_both_flags(self, flag):
        with pytest.raises(ValueError) as exc:
            User.objects.create_superuser(email="admin2@league.test", password="password123", **{flag: False})

        assert flag in str(exc.value)
