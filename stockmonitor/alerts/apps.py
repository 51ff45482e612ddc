import logging

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class AlertsConfig(AppConfig):

    name = 'stockmonitor.alerts'
    verbose_name = _("Stock Alerts")

    def ready(self):
        from . import signals  # noqa: F401
        from .dispatchers import MailRelayConfig

        self.relay_config = MailRelayConfig.from_settings()
        if not self.relay_config.is_configured:
            missing = ", ".join(self.relay_config.missing_credentials)
            logger.warning(f"Mail relay credentials missing ({missing}); alert emails will fail")
