from datetime import date
from typing import Any, Dict, Optional

from django.utils import timezone

from stockmonitor.products.selectors import count_products, list_products
from stockmonitor.sales.constants import SaleDefaults
from stockmonitor.sales.selectors import count_sales, daily_sales_totals

from .composers import summarize_alerts
from .constants import AlertKind


def dashboard_summary(owner, *, today: Optional[date] = None, rule=None) -> Dict[str, Any]:
    """
    Overview figures for the owner's dashboard.

    Returns:
        Dict with total_products, total_sales, low_stock_count, alerts and
        sales_chart (per-day totals over the last week, oldest first)
    """
    today = today or timezone.localdate()
    alerts = summarize_alerts(list_products(owner), today, rule)
    low_stock = next((a for a in alerts if a.kind == AlertKind.LOW_STOCK), None)

    return {
        'total_products': count_products(owner),
        'total_sales': count_sales(owner),
        'low_stock_count': len(low_stock.items) if low_stock else 0,
        'alerts': alerts,
        'sales_chart': daily_sales_totals(owner, today=today, days=SaleDefaults.CHART_DAYS),
    }
