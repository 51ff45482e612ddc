from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from stockmonitor.alerts.constants import AlertStatus
from stockmonitor.alerts.services import run_daily_alert_check
from stockmonitor.core.exceptions import ConfigurationError, StockMonitorError


class Command(BaseCommand):
    help = 'Run the daily stock alert check for every user with products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Check again even if the alert check already ran today',
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.NOTICE('Checking for low stock and expiring products...'))

        users = get_user_model().objects.filter(
            is_active=True,
            products__isnull=False,
        ).exclude(email='').distinct().order_by('email')

        sent = failed = 0
        for user in users:
            try:
                result = run_daily_alert_check(user, force=options['force'])
            except ConfigurationError as e:
                raise CommandError(e.message)
            except StockMonitorError as e:
                failed += 1
                self.stdout.write(self.style.ERROR(f'✗ {user.email}: {e.message}'))
                continue

            if result.status == AlertStatus.SENT:
                sent += 1
                self.stdout.write(self.style.SUCCESS(f'✓ {user.email}: alert email sent'))
            elif result.status == AlertStatus.ALREADY_CHECKED:
                self.stdout.write(f'{user.email}: already checked today')
            else:
                self.stdout.write(self.style.WARNING(f'{user.email}: no alerts needed'))

        self.stdout.write(self.style.NOTICE(f'Done: {sent} sent, {failed} failed'))
