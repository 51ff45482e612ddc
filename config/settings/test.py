"""
With these settings, tests run faster.
"""
from .base import *  # noqa: F403

SECRET_KEY = "test-secret-key-not-for-production"
TEST_RUNNER = "django.test.runner.DiscoverRunner"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
EMAIL_HOST_USER = "alerts@stockmonitor.test"
EMAIL_HOST_PASSWORD = "test-app-password"
DEFAULT_FROM_EMAIL = EMAIL_HOST_USER

STOCK_ALERTS = {
    "BATCH_RULE": "legacy",
    "SUBJECT_PREFIX": "StockMonitor Alert",
    "ALERT_ON_PRODUCT_EDIT": True,
}
