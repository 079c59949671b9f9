"""
Models for the users application (Auth).
"""

from django.contrib.auth.models import AbstractUser
from django.db import models

from users.managers import CustomUserManager


class User(AbstractUser):
    """
    Custom User model supporting Email login.

    Organizations are reached through memberships: `user.memberships` and
    `user.organizations` (see organizations.Membership).
    """

    username = None
    email = models.EmailField("email address", unique=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    def __str__(self):
        return self.email
