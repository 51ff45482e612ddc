from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from stockmonitor.core.models import BaseModel


class AlertRun(BaseModel):
    """
    Date of the user's last successful daily alert check.

    One row per user, overwritten on each run; used only to hold the
    dashboard check to once per calendar day.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='alert_run',
        verbose_name=_("User")
    )
    last_run_on = models.DateField(
        _("Last Run On"),
        null=True,
        blank=True
    )

    class Meta:
        verbose_name = _("Alert Run")
        verbose_name_plural = _("Alert Runs")

    def has_run_on(self, day) -> bool:
        return self.last_run_on == day

    def __str__(self):
        return f"{self.user} - {self.last_run_on or 'never'}"
