"""
Celery application for background jobs (orphaned logo cleanup).
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.local")

app = Celery("league")

# All CELERY_* settings live in the Django settings module
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
