from .base import *  # noqa: F403
from .base import LOGGING
from .base import os

DEBUG = True
SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY",
    "local-only-secret-key-change-me-before-deploying-anywhere",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"]

# Print mail to the console unless a relay backend is asked for explicitly
EMAIL_BACKEND = os.environ.get(
    "DJANGO_EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend"
)

LOGGING["loggers"]["stockmonitor"]["level"] = "DEBUG"
