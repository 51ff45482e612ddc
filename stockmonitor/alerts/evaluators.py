"""
Stock alert rules.

Everything here is a pure function of the product fields and the date it is
given: no queries, no clock reads, no side effects. ``product`` may be a
``Product`` instance or a ``ProductSnapshot``.

Two rules exist side by side:

* ``ConfigurableRule`` uses each product's own low stock threshold and
  expiry lead time (defaults 50 units / 20 days).
* ``LegacyFixedRule`` ignores product settings and flags stock below 10 units
  or expiry within 7 days.
"""
from datetime import date, timedelta
from typing import Dict, Iterable, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .constants import AlertDefaults, LegacyRuleConstants, RuleNames
from .types import BatchEvaluation, Evaluation


def effective_threshold(product, threshold: Optional[int] = None) -> int:
    if threshold is not None:
        return threshold
    value = getattr(product, 'low_stock_threshold', None)
    return AlertDefaults.LOW_STOCK_THRESHOLD if value is None else value


def effective_lead_days(product, lead_days: Optional[int] = None) -> int:
    if lead_days is not None:
        return lead_days
    value = getattr(product, 'expiry_alert_days', None)
    return AlertDefaults.EXPIRY_ALERT_DAYS if value is None else value


def is_low_stock(product, *, threshold: Optional[int] = None) -> bool:
    """Stock strictly below the effective threshold"""
    return product.stock_quantity < effective_threshold(product, threshold)


def is_expiring_soon(product, today: date, *, lead_days: Optional[int] = None) -> bool:
    """Expiry date within [today, today + lead days], both ends inclusive"""
    expiry_date = getattr(product, 'expiry_date', None)
    if expiry_date is None:
        return False
    window_end = today + timedelta(days=effective_lead_days(product, lead_days))
    return today <= expiry_date <= window_end


class ConfigurableRule:
    """Per-product threshold and lead time"""
    name = RuleNames.CONFIGURABLE
    low_stock_label = "below threshold"
    expiry_label = "within alert window"

    def evaluate(self, product, today: date) -> Evaluation:
        return Evaluation(
            low_stock=is_low_stock(product),
            expiring_soon=is_expiring_soon(product, today),
        )


class LegacyFixedRule:
    """Fixed threshold and expiry window shared by every product"""
    name = RuleNames.LEGACY
    threshold = LegacyRuleConstants.LOW_STOCK_THRESHOLD
    window_days = LegacyRuleConstants.EXPIRY_WINDOW_DAYS

    @property
    def low_stock_label(self) -> str:
        return f"< {self.threshold}"

    @property
    def expiry_label(self) -> str:
        return f"Next {self.window_days} Days"

    def evaluate(self, product, today: date) -> Evaluation:
        return Evaluation(
            low_stock=is_low_stock(product, threshold=self.threshold),
            expiring_soon=is_expiring_soon(product, today, lead_days=self.window_days),
        )


RULES: Dict[str, object] = {
    RuleNames.LEGACY: LegacyFixedRule(),
    RuleNames.CONFIGURABLE: ConfigurableRule(),
}


def get_rule(name: Optional[str] = None):
    """Look up a rule by name; defaults to the configured batch rule"""
    name = name or settings.STOCK_ALERTS.get('BATCH_RULE', RuleNames.LEGACY)
    try:
        return RULES[name]
    except KeyError:
        raise ImproperlyConfigured(
            f"Unknown stock alert rule {name!r}; expected one of {', '.join(RULES)}"
        )


def evaluate_many(products: Iterable, today: date, rule) -> BatchEvaluation:
    """Split products into low stock and expiring buckets, keeping input order"""
    result = BatchEvaluation()
    for product in products:
        evaluation = rule.evaluate(product, today)
        if evaluation.low_stock:
            result.low_stock.append(product)
        if evaluation.expiring_soon:
            result.expiring.append(product)
    return result
