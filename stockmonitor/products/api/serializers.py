from django.conf import settings
from djmoney.contrib.django_rest_framework import MoneyField
from rest_framework import serializers

from stockmonitor.products.constants import PriceLimits
from stockmonitor.products.models import Product
from stockmonitor.products.services import create_product, update_product


class ProductSerializer(serializers.ModelSerializer):
    price = MoneyField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
    )
    procurement_price = MoneyField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        default_currency=settings.DEFAULT_CURRENCY,
        required=False,
        allow_null=True,
    )
    unit_cost = MoneyField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        read_only=True,
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "category",
            "price",
            "price_currency",
            "stock_quantity",
            "expiry_date",
            "low_stock_threshold",
            "expiry_alert_days",
            "procurement_price",
            "lot_size",
            "unit_cost",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "price_currency", "lot_size", "created_at", "updated_at"]
        extra_kwargs = {
            "category": {"required": False, "allow_blank": True},
        }

    def validate_price(self, value):
        if getattr(value, "amount", value) < PriceLimits.MIN_VALUE:
            raise serializers.ValidationError("Price must be a valid positive number")
        return value

    def validate_procurement_price(self, value):
        if value is not None and getattr(value, "amount", value) < PriceLimits.MIN_VALUE:
            raise serializers.ValidationError("Procurement price must be a valid positive number")
        return value

    def create(self, validated_data):
        return create_product(owner=self.context["request"].user, **validated_data)

    def update(self, instance, validated_data):
        return update_product(
            owner=self.context["request"].user,
            product_id=instance.pk,
            **validated_data,
        )


class StockOptionSerializer(serializers.ModelSerializer):
    """Compact product row for the sale entry picker"""
    price = MoneyField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        read_only=True,
    )

    class Meta:
        model = Product
        fields = ["id", "name", "price", "stock_quantity"]
