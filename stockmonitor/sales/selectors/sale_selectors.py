# stockmonitor/sales/selectors/sale_selectors.py
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from django.core.exceptions import ValidationError
from django.db.models import QuerySet, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from ..constants import SaleDefaults
from ..models import Sale


def list_recent_sales(owner, *, limit: Optional[int] = None) -> QuerySet:
    """
    Owner's sales joined with their product, newest first.

    Args:
        owner: Acting user
        limit: Optional maximum number of rows
    """
    if limit is not None and limit < 1:
        raise ValidationError("Limit must be positive")

    queryset = Sale.objects.owned_by(owner).select_related(
        'product'
    ).order_by('-sale_date')

    if limit:
        queryset = queryset[:limit]
    return queryset


def count_sales(owner) -> int:
    return Sale.objects.owned_by(owner).count()


def daily_sales_totals(
    owner,
    *,
    today: Optional[date] = None,
    days: int = SaleDefaults.CHART_DAYS
) -> List[Dict[str, object]]:
    """Sales total per local calendar day over the last ``days`` days, oldest first"""
    if not (1 <= days <= 365):
        raise ValidationError("Days must be between 1 and 365")

    today = today or timezone.localdate()
    since = today - timedelta(days=days - 1)

    rows = Sale.objects.owned_by(owner).annotate(
        day=TruncDate('sale_date', tzinfo=timezone.get_current_timezone())
    ).filter(
        day__gte=since,
        day__lte=today
    ).values('day').annotate(
        total=Sum('total_price')
    ).order_by('day')

    return [
        {'date': row['day'], 'total': row['total'] or Decimal('0')}
        for row in rows
    ]
