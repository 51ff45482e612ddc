from rest_framework import serializers

from stockmonitor.alerts.constants import AlertDefaults, AlertKind
from stockmonitor.alerts.types import ProductSnapshot
from stockmonitor.products.constants import FieldLimits, PriceLimits


class OptionalDateField(serializers.DateField):
    """Date input where an empty string means no date"""

    def to_internal_value(self, value):
        if value == '':
            return None
        return super().to_internal_value(value)


class ProductAlertSerializer(serializers.Serializer):
    """Product form values submitted for a single-product alert check"""
    name = serializers.CharField(max_length=FieldLimits.PRODUCT_NAME)
    category = serializers.CharField(
        max_length=FieldLimits.CATEGORY_NAME,
        required=False,
        allow_blank=True,
        allow_null=True,
        default='',
    )
    price = serializers.DecimalField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        min_value=PriceLimits.MIN_VALUE,
        required=False,
        allow_null=True,
        default=None,
    )
    stock_quantity = serializers.IntegerField(
        min_value=0,
        error_messages={"min_value": "Stock must be a valid positive number"},
    )
    expiry_date = OptionalDateField(required=False, allow_null=True, default=None)
    low_stock_threshold = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    expiry_alert_days = serializers.IntegerField(min_value=0, required=False, allow_null=True)

    def to_snapshot(self) -> ProductSnapshot:
        data = self.validated_data
        threshold = data.get('low_stock_threshold')
        lead_days = data.get('expiry_alert_days')
        return ProductSnapshot(
            name=data['name'],
            category=data.get('category') or '',
            price=data.get('price'),
            stock_quantity=data['stock_quantity'],
            expiry_date=data.get('expiry_date'),
            low_stock_threshold=AlertDefaults.LOW_STOCK_THRESHOLD if threshold is None else threshold,
            expiry_alert_days=AlertDefaults.EXPIRY_ALERT_DAYS if lead_days is None else lead_days,
        )


class AlertSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=AlertKind.choices)
    message = serializers.CharField()
    items = serializers.ListField(child=serializers.CharField())


class SalesChartPointSerializer(serializers.Serializer):
    date = serializers.DateField()
    total = serializers.DecimalField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
    )


class DashboardSerializer(serializers.Serializer):
    total_products = serializers.IntegerField()
    total_sales = serializers.IntegerField()
    low_stock_count = serializers.IntegerField()
    alerts = AlertSerializer(many=True)
    sales_chart = SalesChartPointSerializer(many=True)
    daily_alert_check = serializers.CharField()
