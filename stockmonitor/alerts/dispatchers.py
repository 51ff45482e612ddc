import logging
import smtplib
from dataclasses import dataclass, field
from typing import List, Optional

from django.apps import apps
from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection

from stockmonitor.core.exceptions import DeliveryError, MissingCredentialsError

from .types import ComposedAlert

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailRelayConfig:
    """
    Credentials and endpoint of the outgoing mail relay.

    Built once when the alerts app loads; the relay account is also the
    sender address of every alert.
    """
    username: str
    password: str = field(repr=False)
    host: str = 'smtp.gmail.com'
    port: int = 587
    use_tls: bool = True
    timeout: int = 10
    from_email: Optional[str] = None

    @classmethod
    def from_settings(cls) -> 'MailRelayConfig':
        username = getattr(settings, 'EMAIL_HOST_USER', '') or ''
        return cls(
            username=username,
            password=getattr(settings, 'EMAIL_HOST_PASSWORD', '') or '',
            host=settings.EMAIL_HOST,
            port=settings.EMAIL_PORT,
            use_tls=settings.EMAIL_USE_TLS,
            timeout=getattr(settings, 'EMAIL_TIMEOUT', None) or 10,
            from_email=username or None,
        )

    @property
    def missing_credentials(self) -> List[str]:
        """Environment variable names of the unset credentials"""
        missing = []
        if not self.username:
            missing.append('EMAIL_USER')
        if not self.password:
            missing.append('EMAIL_PASS')
        return missing

    @property
    def is_configured(self) -> bool:
        return not self.missing_credentials

    @property
    def sender(self) -> str:
        return self.from_email or self.username


class NotificationDispatcher:
    """Sends composed alerts through the mail relay; one message per call"""

    def __init__(self, config: MailRelayConfig, *, connection=None):
        self.config = config
        self._connection = connection

    def send(self, message: ComposedAlert, recipient: str) -> None:
        """
        Deliver ``message`` to ``recipient``.

        Raises:
            MissingCredentialsError: Relay account or password unset; no
                connection is opened
            DeliveryError: The relay refused the message or was unreachable
        """
        missing = self.config.missing_credentials
        if missing:
            raise MissingCredentialsError(missing)

        email = EmailMultiAlternatives(
            subject=message.subject,
            body=message.text_body,
            from_email=self.config.sender,
            to=[recipient],
            connection=self._connection or self._open_connection(),
        )
        email.attach_alternative(message.html_body, 'text/html')

        try:
            email.send(fail_silently=False)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Alert delivery to {recipient} failed: {str(e)}", exc_info=True)
            raise DeliveryError(recipient, str(e))

        logger.info(f"Sent alert '{message.subject}' to {recipient}")

    def _open_connection(self):
        return get_connection(
            username=self.config.username,
            password=self.config.password,
            host=self.config.host,
            port=self.config.port,
            use_tls=self.config.use_tls,
            timeout=self.config.timeout,
            fail_silently=False,
        )


def get_dispatcher() -> NotificationDispatcher:
    """Dispatcher bound to the relay configuration read at start-up"""
    return NotificationDispatcher(apps.get_app_config('alerts').relay_config)
