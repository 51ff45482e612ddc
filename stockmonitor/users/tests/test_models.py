import pytest
from django.core.exceptions import ValidationError

from stockmonitor.users.models import User

pytestmark = pytest.mark.django_db


def test_create_user_normalizes_email():
    user = User.objects.create_user(email="Owner@EXAMPLE.com", password="s3cret-pass")

    assert user.email == "Owner@example.com"
    assert user.username is None
    assert user.check_password("s3cret-pass")
    assert str(user) == "Owner@example.com"


def test_create_user_requires_email():
    with pytest.raises(ValueError):
        User.objects.create_user(email="", password="s3cret-pass")


def test_create_user_rejects_invalid_email():
    with pytest.raises(ValidationError):
        User.objects.create_user(email="not-an-email", password="s3cret-pass")


def test_create_superuser():
    admin = User.objects.create_superuser(email="admin@example.com", password="s3cret-pass")

    assert admin.is_staff
    assert admin.is_superuser


def test_users_without_username_can_coexist(user, other_user):
    assert user.username is None
    assert other_user.username is None
