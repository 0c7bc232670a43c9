"""
Test settings for the storefront project.

These settings are used during test execution.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SCHEDULER_AUTOSTART", "false")

from .base import *

# Use a simple secret key for tests
SECRET_KEY = "test-secret-key-not-for-production"  # noqa: S105

DEBUG = False

# Use SQLite for faster tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.dummy.DummyCache",
    }
}

# Password hashers (faster for tests)
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Disable logging during tests
LOGGING = {
    "version": 1,
    "disable_existing_loggers": True,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
        "level": "DEBUG",
    },
}
