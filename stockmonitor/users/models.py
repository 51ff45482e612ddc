from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.core.validators import validate_email
from django.db import models
from django.utils.translation import gettext_lazy as _


class UserManager(BaseUserManager):
    """User manager keyed on email; username is optional."""

    def _validate_creation_fields(self, email):
        if not email:
            raise ValueError(_('The Email must be set'))

    def create_user(self, email, password=None, **extra_fields):
        self._validate_creation_fields(email)
        extra_fields.setdefault('username', None)

        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.full_clean(exclude=['password'])
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Account that owns products and sales.

    The email address doubles as the login identifier and as the recipient
    of stock alert emails.
    """

    username = models.CharField(
        _("username"),
        max_length=150,
        unique=True,
        null=True,
        blank=True,
        default=None,
    )
    email = models.EmailField(
        _('email address'),
        unique=True,
        blank=False,
        help_text=_("Receives stock alert emails")
    )

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = UserManager()

    def clean(self):
        super().clean()
        validate_email(self.email)

    def __str__(self):
        return self.email
