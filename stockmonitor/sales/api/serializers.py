from djmoney.contrib.django_rest_framework import MoneyField
from rest_framework import serializers

from stockmonitor.products.constants import PriceLimits
from stockmonitor.sales.models import Sale


class SaleSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)
    total_price = MoneyField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        read_only=True,
    )
    profit = MoneyField(
        max_digits=PriceLimits.MAX_DIGITS,
        decimal_places=PriceLimits.DECIMALS,
        read_only=True,
    )

    class Meta:
        model = Sale
        fields = [
            "id",
            "product",
            "product_name",
            "quantity",
            "total_price",
            "total_price_currency",
            "profit",
            "sale_date",
        ]
        read_only_fields = fields


class RecordSaleSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(
        min_value=1,
        error_messages={"min_value": "Quantity must be a valid positive number"},
    )


class RecentSalesQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=500, required=False)
