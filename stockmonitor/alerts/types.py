from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence

from .constants import AlertDefaults, AlertKind


@dataclass(frozen=True)
class ProductSnapshot:
    """
    Product fields as submitted to the alert trigger.

    Carries the same attribute names as ``Product`` so the evaluator and the
    composer accept either.
    """
    name: str
    stock_quantity: int
    category: str = ''
    price: Optional[Decimal] = None
    expiry_date: Optional[date] = None
    low_stock_threshold: int = AlertDefaults.LOW_STOCK_THRESHOLD
    expiry_alert_days: int = AlertDefaults.EXPIRY_ALERT_DAYS


@dataclass(frozen=True)
class Evaluation:
    low_stock: bool
    expiring_soon: bool

    @property
    def needs_alert(self) -> bool:
        return self.low_stock or self.expiring_soon


@dataclass
class BatchEvaluation:
    low_stock: List[object] = field(default_factory=list)
    expiring: List[object] = field(default_factory=list)

    @property
    def needs_alert(self) -> bool:
        return bool(self.low_stock or self.expiring)


@dataclass(frozen=True)
class Alert:
    """Transient alert shown on the dashboard; never stored"""
    kind: AlertKind
    message: str
    items: Sequence[str]


@dataclass(frozen=True)
class ComposedAlert:
    subject: str
    text_body: str
    html_body: str
    alerts: Sequence[Alert] = ()
