import environ
from celery.schedules import crontab

from .base import *  # Import defaults from base.py

# Initialize environment variables
env = environ.Env()

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-dev-key")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ["*"]

# Database
# 'env.db()' automatically parses the 'DATABASE_URL' from docker-compose.yml
# e.g., postgres://postgres:postgres@db:5432/league_db
DATABASES = {
    "default": env.db(),
}

REDIS_URL = env("REDIS_URL", default="redis://redis:6379/0")

# Redis Cache
CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": REDIS_URL,
        "OPTIONS": {
            "CLIENT_CLASS": "django_redis.client.DefaultClient",
        },
    }
}

# Sessions are written through to the database and read from Redis
SESSION_ENGINE = "django.contrib.sessions.backends.cached_db"

# --- CELERY SETTINGS ---
CELERY_BROKER_URL = REDIS_URL
CELERY_RESULT_BACKEND = REDIS_URL

CELERY_ACCEPT_CONTENT = ["application/json"]
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_TIMEZONE = TIME_ZONE


CELERY_BEAT_SCHEDULE = {
    "purge_orphaned_logos_daily": {
        "task": "organizations.tasks.purge_orphaned_logos",
        # Run at 03:15 every day
        "schedule": crontab(minute=15, hour=3),
    },
}

# Show tenant resolution and provisioning details while developing
LOGGING["loggers"]["core"]["level"] = "DEBUG"
LOGGING["loggers"]["organizations"]["level"] = "DEBUG"
