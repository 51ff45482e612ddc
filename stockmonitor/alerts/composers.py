from datetime import date
from typing import Iterable, List, Optional

from django.conf import settings
from django.template.loader import render_to_string

from .constants import AlertKind
from .evaluators import ConfigurableRule, evaluate_many, get_rule
from .types import Alert, BatchEvaluation, ComposedAlert

BATCH_TEMPLATE = 'alerts/email/batch_alert'
PRODUCT_TEMPLATE = 'alerts/email/product_alert'


def _subject_prefix() -> str:
    return settings.STOCK_ALERTS.get('SUBJECT_PREFIX', 'StockMonitor Alert')


def _render(template: str, context: dict) -> tuple:
    return (
        render_to_string(f"{template}.txt", context),
        render_to_string(f"{template}.html", context),
    )


def build_alerts(evaluation: BatchEvaluation) -> List[Alert]:
    """One Alert per non-empty bucket"""
    alerts = []
    if evaluation.low_stock:
        alerts.append(Alert(
            kind=AlertKind.LOW_STOCK,
            message=f"{len(evaluation.low_stock)} items are running low on stock.",
            items=[p.name for p in evaluation.low_stock],
        ))
    if evaluation.expiring:
        alerts.append(Alert(
            kind=AlertKind.EXPIRY,
            message=f"{len(evaluation.expiring)} items are expiring soon.",
            items=[p.name for p in evaluation.expiring],
        ))
    return alerts


def summarize_alerts(products: Iterable, today: date, rule=None) -> List[Alert]:
    """Dashboard alert list for a set of products"""
    return build_alerts(evaluate_many(products, today, rule or get_rule()))


def compose_batch_alert(products: Iterable, today: date, rule=None) -> Optional[ComposedAlert]:
    """
    Summary email covering every product that trips the rule.

    Returns:
        None when no product is low on stock or expiring soon
    """
    rule = rule or get_rule()
    evaluation = evaluate_many(products, today, rule)
    if not evaluation.needs_alert:
        return None

    text_body, html_body = _render(BATCH_TEMPLATE, {
        'low_stock': evaluation.low_stock,
        'expiring': evaluation.expiring,
        'rule': rule,
        'today': today,
    })
    return ComposedAlert(
        subject=(
            f"{_subject_prefix()}: {len(evaluation.low_stock)} Low Stock, "
            f"{len(evaluation.expiring)} Expiring"
        ),
        text_body=text_body,
        html_body=html_body,
        alerts=build_alerts(evaluation),
    )


def compose_product_alert(product, today: date) -> Optional[ComposedAlert]:
    """
    Email about one freshly saved product, judged by its own settings.

    Returns:
        None when the product needs no alert; callers then skip dispatch
    """
    evaluation = ConfigurableRule().evaluate(product, today)
    if not evaluation.needs_alert:
        return None

    text_body, html_body = _render(PRODUCT_TEMPLATE, {
        'product': product,
        'evaluation': evaluation,
        'today': today,
    })
    return ComposedAlert(
        subject=f"{_subject_prefix()}: {product.name}",
        text_body=text_body,
        html_body=html_body,
        alerts=build_alerts(BatchEvaluation(
            low_stock=[product] if evaluation.low_stock else [],
            expiring=[product] if evaluation.expiring_soon else [],
        )),
    )
